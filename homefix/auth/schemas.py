"""
homefix/auth/schemas.py

Defines Pydantic models for authentication flows:
- Signup and login request payloads
- Login response carrying the session token
"""

from typing import Annotated

from pydantic import AfterValidator, EmailStr, Field, model_validator

from homefix.core.schemas import CamelModel
from homefix.core.validators import password_validator
from homefix.database.enums import UserRole
from homefix.users.schemas import AccountRead
from homefix.worker.schemas import WorkerSignupData

# --------------------------------------------------
# Custom Types
# --------------------------------------------------

PasswordStr = Annotated[str, AfterValidator(password_validator)]


# --------------------------------------------------
# AUTH REQUEST SCHEMAS
# --------------------------------------------------

class SignupRequest(CamelModel):
    """
    Request schema for new account registration.
    Workers describe their offering in `additionalData`.
    """
    email: EmailStr = Field(..., description="Email address for new account")
    password: PasswordStr = Field(..., description="At least 8 characters with a letter and a digit")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    role: UserRole = Field(default=UserRole.USER, description="user or worker")
    phone: str = Field(..., min_length=5, max_length=30, description="Contact phone number")
    additional_data: WorkerSignupData | None = Field(
        default=None, description="Worker-only profile details"
    )

    @model_validator(mode="after")
    def check_role(self) -> "SignupRequest":
        if self.role == UserRole.ADMIN:
            raise ValueError("Admin accounts cannot be created through signup")
        if self.role == UserRole.WORKER:
            if self.additional_data is None or not self.additional_data.service_type:
                raise ValueError("Workers must offer at least one service type")
        return self


class LoginRequest(CamelModel):
    """
    Request schema for login using a JSON payload.
    """
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")


# --------------------------------------------------
# AUTH RESPONSE SCHEMAS
# --------------------------------------------------

class LoginResponse(CamelModel):
    """
    Response schema after successful login.
    """
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Type of the token (default: bearer)")
    user: AccountRead = Field(..., description="Details of the authenticated account")
