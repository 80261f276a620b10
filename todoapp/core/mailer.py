import logging
from email.message import EmailMessage
from email.utils import make_msgid

import aiosmtplib

from todoapp.core.config import settings

logger = logging.getLogger(__name__)

OTP_SUBJECT = "Your Todo App Verification Code"


class EmailDeliveryError(Exception):
    """Raised when the SMTP transport fails in production."""


def build_otp_message(email: str, otp: str) -> EmailMessage:
    sender = settings.EMAIL_FROM or settings.EMAIL_USER or "no-reply@todoapp.local"

    message = EmailMessage()
    message["From"] = sender
    message["To"] = email
    message["Subject"] = OTP_SUBJECT
    message["Message-ID"] = make_msgid(domain="todoapp.local")
    message.set_content(
        f"Your verification code is {otp}. It will expire in 5 minutes.\n"
        "If you didn't request this code, please ignore this email."
    )
    message.add_alternative(
        f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
          <h2>Todo App Verification</h2>
          <p>Your verification code is:</p>
          <h1 style="font-size: 32px; letter-spacing: 5px; background-color: #f4f4f4; padding: 15px; text-align: center; font-family: monospace;">{otp}</h1>
          <p>This code will expire in 5 minutes.</p>
          <p>If you didn't request this code, please ignore this email.</p>
        </div>
        """,
        subtype="html",
    )
    return message


async def send_otp_email(email: str, otp: str) -> dict:
    """
    Email a verification code.

    Outside production a transport failure is logged and reported as a
    simulated success carrying the code, so sign-up keeps working without SMTP.
    In production the failure raises EmailDeliveryError.
    """
    message = build_otp_message(email, otp)

    try:
        await aiosmtplib.send(
            message,
            hostname=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.EMAIL_USER,
            password=settings.EMAIL_PASS,
            start_tls=True,
            timeout=settings.SMTP_TIMEOUT,
        )
    except Exception as e:
        if settings.is_production:
            logger.error(f"❌ Failed to send verification email to {email}: {e}")
            raise EmailDeliveryError("Failed to send verification email") from e

        logger.warning(f"⚠️ Email transport failed ({e}). Simulating delivery to {email} with code {otp}")
        return {"success": True, "message_id": "simulated-email", "development_otp": otp}

    logger.info(f"📧 Verification email sent to {email}")
    return {"success": True, "message_id": message.get("Message-ID")}
