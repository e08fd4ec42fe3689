"""User model - identities authenticated by email and one-time passcode."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.oxhub.models.base import utc_now


class User(SQLModel, table=True):
    """User created implicitly on first login.

    ``otp`` and ``otp_expiry`` are set together on login and cleared together
    on successful verification.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    otp: str | None = Field(default=None, max_length=16)
    otp_expiry: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def set_otp(self, otp: str, expires_at: datetime) -> None:
        self.otp = otp
        self.otp_expiry = expires_at
        self.updated_at = utc_now()

    def clear_otp(self) -> None:
        self.otp = None
        self.otp_expiry = None
        self.updated_at = utc_now()
