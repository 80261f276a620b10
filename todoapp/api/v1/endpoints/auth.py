import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from todoapp.core.config import settings
from todoapp.core.database import get_db
from todoapp.core import security
from todoapp.core.otp import verify_otp
from todoapp.schemas.user import (
    UserCreate, UserLogin, UserResponse, RegisterResponse, Token, VerifyEmailResponse,
    LoginChallenge, CodeSubmission, OTPToken, OTPSetupResponse, OTPStatusResponse,
    OTPLoginResponse, OTPDebugResponse, PushTokenUpdate,
)
from todoapp.schemas.common import Message
from todoapp.services import user_service
from todoapp.api.deps import get_current_user
from todoapp.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()

def _token_payload(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "token": security.create_access_token(user.id),
    }

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    if await user_service.get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

    user = await user_service.create_user(db, user_in)
    await user_service.send_verification_code(db, user, rotate_secret=True)

    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "require_email_verification": True,
        "message": "Registration successful. Please verify your email with the code sent to your email address.",
    }

@router.post(
    "/login",
    response_model=Token | LoginChallenge,
    responses={403: {"model": LoginChallenge, "description": "Email verification required"}},
)
async def login(user_in: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await user_service.authenticate(db, user_in.email, user_in.password)
    if not user:
        logger.warning(f"⚠️ Failed login for {user_in.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.email_verified:
        await user_service.send_verification_code(db, user)
        challenge = LoginChallenge(
            email=user.email,
            require_email_verification=True,
            message="Email verification required. A new verification code has been sent to your email.",
        )
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content=challenge.model_dump())

    if user.otp_enabled and user.otp_verified:
        await user_service.send_verification_code(db, user)
        return LoginChallenge(
            email=user.email,
            require_otp=True,
            message="OTP sent to your email address",
        )

    return _token_payload(user)

@router.post("/verify-email", response_model=VerifyEmailResponse)
async def verify_email(payload: CodeSubmission, db: AsyncSession = Depends(get_db)):
    user = await user_service.get_user_by_email(db, payload.email)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if not user.otp_secret:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Verification not set up for this user")

    if user.email_verified:
        return {"message": "Email already verified", **_token_payload(user)}

    if not verify_otp(payload.token, user.otp_secret):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired verification code")

    user = await user_service.mark_email_verified(db, user)
    return {"message": "Email verified successfully", **_token_payload(user)}

@router.get("/me", response_model=UserResponse)
async def get_user_profile(current_user: User = Depends(get_current_user)):
    return current_user

@router.put("/push-token", response_model=Message)
async def update_push_token(
    payload: PushTokenUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    await user_service.update_push_token(db, current_user, payload.push_token)
    return {"message": "Push token updated successfully"}

@router.post("/otp/enable", response_model=OTPSetupResponse)
async def enable_otp(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    await user_service.send_verification_code(db, current_user, rotate_secret=True)
    return {
        "message": "OTP setup initiated. Please verify with the code sent to your email.",
        "otp_secret": current_user.otp_secret,
    }

@router.post("/otp/verify", response_model=OTPStatusResponse)
async def verify_otp_setup(
    payload: OTPToken,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not current_user.otp_secret:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found or OTP not set up")
    if not verify_otp(payload.token, current_user.otp_secret):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired OTP")

    await user_service.set_otp_state(db, current_user, enabled=True)
    return {"message": "OTP verified and enabled successfully", "otp_enabled": True}

@router.post("/otp/disable", response_model=OTPStatusResponse)
async def disable_otp(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    await user_service.set_otp_state(db, current_user, enabled=False)
    return {"message": "OTP disabled successfully", "otp_enabled": False}

@router.post("/otp/validate", response_model=OTPLoginResponse)
async def validate_otp(payload: CodeSubmission, db: AsyncSession = Depends(get_db)):
    """Second step of a login for users with OTP enabled."""
    user = await user_service.get_user_by_email(db, payload.email)
    if not user or not user.otp_enabled or not user.otp_secret:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found or OTP not enabled")

    if not verify_otp(payload.token, user.otp_secret):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired OTP")

    return {
        **_token_payload(user),
        "otp_enabled": user.otp_enabled,
        "otp_verified": user.otp_verified,
    }

if settings.ENVIRONMENT == "development":
    @router.get("/debug/otp/{email}", response_model=OTPDebugResponse)
    async def debug_otp(email: str, db: AsyncSession = Depends(get_db)):
        user = await user_service.get_user_by_email(db, email)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "otp_enabled": user.otp_enabled,
            "otp_verified": user.otp_verified,
            "has_otp_secret": bool(user.otp_secret),
        }
