import logging
import pyotp
from todoapp.core.config import settings

logger = logging.getLogger(__name__)


def generate_otp_secret() -> str:
    """Create a fresh base32 secret for a user."""
    return pyotp.random_base32(length=32)


def _totp(secret: str) -> pyotp.TOTP:
    return pyotp.TOTP(secret, interval=settings.OTP_STEP_SECONDS)


def generate_otp(secret: str) -> str:
    """Current code for the secret; valid for one step (5 minutes by default)."""
    return _totp(secret).now()


def verify_otp(token: str, secret: str) -> bool:
    """Check a code, allowing one step of clock drift either side."""
    if not token or not secret:
        return False
    try:
        return _totp(secret).verify(str(token).strip(), valid_window=settings.OTP_VALID_WINDOW)
    except Exception as e:
        logger.warning(f"⚠️ OTP verification error: {e}")
        return False
