from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

class Credentials(BaseModel):
    """Email and password forwarded to the auth platform"""
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalise_email(cls, value: str) -> str:
        return value.strip().lower()

class SignUpRequest(Credentials):
    """A new GM or player account"""
    password: str = Field(..., min_length=8)

class SignInRequest(Credentials):
    pass

class RefreshTokenRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)

class TokenResponse(BaseModel):
    """Session handed to the client; user_id is what worlds store as owner_id"""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user_id: str
    email: Optional[str] = None
