from sqlalchemy import Column, Integer, String, Boolean, DateTime
from todoapp.core.database import Base
from todoapp.utils.timezone import utcnow

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    is_active = Column(Boolean, default=True)
    email_verified = Column(Boolean, default=False, nullable=False)

    # Second factor / email verification codes
    otp_secret = Column(String, nullable=True)
    otp_enabled = Column(Boolean, default=False, nullable=False)
    otp_verified = Column(Boolean, default=False, nullable=False)

    push_token = Column(String, nullable=True) # Device token read by the delivery poller
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
