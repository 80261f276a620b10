from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from todoapp.schemas.common import UTCDateTime

class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator('name')
    def name_must_not_be_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('Name is required')
        return v.strip()

class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    email_verified: bool
    otp_enabled: bool
    otp_verified: bool
    push_token: Optional[str] = None
    created_at: Optional[UTCDateTime] = None

    class Config:
        from_attributes = True

class RegisterResponse(BaseModel):
    id: int
    name: str
    email: str
    require_email_verification: bool = True
    message: str

class Token(BaseModel):
    id: int
    name: str
    email: str
    token: str
    token_type: str = "bearer"

class VerifyEmailResponse(Token):
    message: str

class LoginChallenge(BaseModel):
    """Returned instead of a token when a code has to be entered first."""
    email: str
    message: str
    require_email_verification: bool = False
    require_otp: bool = False

class CodeSubmission(BaseModel):
    email: EmailStr
    token: str = Field(min_length=1)

class OTPToken(BaseModel):
    token: str = Field(min_length=1)

class OTPSetupResponse(BaseModel):
    message: str
    otp_secret: str

class OTPStatusResponse(BaseModel):
    message: str
    otp_enabled: bool

class OTPLoginResponse(Token):
    otp_enabled: bool
    otp_verified: bool

class OTPDebugResponse(BaseModel):
    id: int
    name: str
    email: str
    otp_enabled: bool
    otp_verified: bool
    has_otp_secret: bool

class PushTokenUpdate(BaseModel):
    push_token: Optional[str] = None
