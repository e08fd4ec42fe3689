from pydantic import BaseModel, Field, field_validator

from src.oxhub.core.security.validators import validate_email_format
from src.oxhub.models import CompanyRole


class LoginRequest(BaseModel):
    email: str = Field(max_length=255, json_schema_extra={"examples": ["user@example.com"]})

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return validate_email_format(v)


class LoginResponse(BaseModel):
    """``otp`` is only present when passcodes are returned in the response."""

    message: str = "OTP sent successfully"
    otp: str | None = None


class VerifyOtpRequest(BaseModel):
    email: str = Field(max_length=255)
    otp: str = Field(json_schema_extra={"examples": ["123456"]})

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return validate_email_format(v)

    @field_validator("otp")
    @classmethod
    def validate_otp_length(cls, v: str) -> str:
        if len(v) != 6:
            raise ValueError("OTP must be exactly 6 characters")
        return v


class MembershipSummary(BaseModel):
    id: int
    subdomain: str
    role: CompanyRole


class UserSummary(BaseModel):
    id: int
    email: str
    companies: list[MembershipSummary]


class VerifyOtpResponse(BaseModel):
    access_token: str
    user: UserSummary
