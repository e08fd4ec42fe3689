from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "OX Hub API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True
    api_prefix: str = "/api"

    # Security
    log_user_emails: bool = False

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Auth
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 1440

    # One-time passcodes
    otp_length: int = 6
    otp_expire_minutes: int = 10
    otp_delivery: str = "response"  # response, email

    # Email (Resend)
    resend_api_key: str | None = None  # If not set, emails are logged but not sent
    email_from: str = "noreply@example.com"
    email_send_timeout_seconds: int = 10

    # OX API
    ox_api_base_url: str = "https://{subdomain}.ox-sys.com"
    ox_api_token: str | None = None  # Fallback when register-company omits a token
    ox_validation_timeout_seconds: float = 10.0
    ox_request_timeout_seconds: float = 15.0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Reject wildcards since credentials are allowed."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("otp_delivery")
    @classmethod
    def validate_otp_delivery(cls, v: str) -> str:
        if v not in ("response", "email"):
            raise ValueError("OTP_DELIVERY must be 'response' or 'email'")
        return v

    @field_validator("ox_api_base_url")
    @classmethod
    def validate_ox_api_base_url(cls, v: str) -> str:
        if "{subdomain}" not in v:
            raise ValueError("OX_API_BASE_URL must contain a '{subdomain}' placeholder")
        return v.rstrip("/")

    @property
    def returns_otp_in_response(self) -> bool:
        return self.otp_delivery == "response"


@lru_cache
def get_settings() -> Settings:
    return Settings()
