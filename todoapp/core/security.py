from datetime import datetime, timedelta, timezone
from typing import Any
from jose import jwt, JWTError
from passlib.context import CryptContext
from todoapp.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"
BCRYPT_MAX_BYTES = 72

def create_access_token(subject: Any, expires_delta: timedelta | None = None) -> str:
    """Sign a bearer token for a user id; lifetime defaults to ACCESS_TOKEN_EXPIRE_MINUTES."""
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {"sub": str(subject), "exp": datetime.now(timezone.utc) + lifetime}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> str | None:
    """Return the token subject, or None when the token is invalid or expired."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return claims.get("sub")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_fit_bcrypt_limit(plain_password), hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(_fit_bcrypt_limit(password))

def _fit_bcrypt_limit(password: str) -> str:
    # bcrypt only reads the first 72 bytes; cut there without splitting a character
    raw = (password or "").encode("utf-8")
    if len(raw) <= BCRYPT_MAX_BYTES:
        return password or ""
    return raw[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")
