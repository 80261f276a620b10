import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from todoapp.models.user import User
from todoapp.schemas.user import UserCreate
from todoapp.core.security import get_password_hash, verify_password
from todoapp.core import otp as otp_util
from todoapp.core.mailer import send_otp_email

logger = logging.getLogger(__name__)

async def create_user(db: AsyncSession, user_in: UserCreate) -> User:
    db_user = User(
        name=user_in.name,
        email=user_in.email.lower().strip(),
        hashed_password=get_password_hash(user_in.password),
        email_verified=False,
    )
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    logger.info(f"👤 Registered user {db_user.id} ({db_user.email})")
    return db_user

async def get_user(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).filter(User.id == user_id))
    return result.scalars().first()

async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).filter(User.email == email.lower().strip()))
    return result.scalars().first()

async def authenticate(db: AsyncSession, email: str, password: str) -> User | None:
    user = await get_user_by_email(db, email)
    if not user:
        return None
    try:
        if verify_password(password, user.hashed_password):
            return user
    except ValueError as e:
        logger.warning(f"⚠️ [Login] Password verification failed for {email}: {e}")
    return None

async def send_verification_code(db: AsyncSession, user: User, rotate_secret: bool = False) -> dict:
    """
    Email a fresh code to the user.
    A secret is assigned when the user has none yet, or always when rotate_secret is set.
    """
    if rotate_secret or not user.otp_secret:
        user.otp_secret = otp_util.generate_otp_secret()
        db.add(user)
        await db.commit()
        await db.refresh(user)

    code = otp_util.generate_otp(user.otp_secret)
    return await send_otp_email(user.email, code)

async def mark_email_verified(db: AsyncSession, user: User) -> User:
    user.email_verified = True
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info(f"✅ Email verified for user {user.id}")
    return user

async def set_otp_state(db: AsyncSession, user: User, enabled: bool) -> User:
    """Turn the second factor on (after a verified code) or off (dropping the secret)."""
    user.otp_enabled = enabled
    user.otp_verified = enabled
    if not enabled:
        user.otp_secret = None
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info(f"🔐 OTP {'enabled' if enabled else 'disabled'} for user {user.id}")
    return user

async def update_push_token(db: AsyncSession, user: User, push_token: str | None) -> User:
    user.push_token = push_token
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user
