"""Authentication service - one-time passcode login and session issuance."""

from datetime import timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.oxhub.core.config import get_settings
from src.oxhub.core.exceptions import ExternalDependencyFailure, Unauthenticated
from src.oxhub.core.logging import get_logger
from src.oxhub.core.notifications import send_otp_email
from src.oxhub.core.security import create_access_token, generate_otp, otp_matches
from src.oxhub.models import User
from src.oxhub.models.base import utc_now
from src.oxhub.repositories import UserRepository
from src.oxhub.schemas.auth import (
    LoginResponse,
    MembershipSummary,
    UserSummary,
    VerifyOtpResponse,
)

logger = get_logger(__name__)

INVALID_OTP_MESSAGE = "Invalid OTP or OTP expired"
OTP_EMAIL_FAILED_MESSAGE = "Failed to send OTP email"


class AuthService:
    """Passwordless authentication.

    Users are created implicitly on their first login. A passcode is single
    use: a successful verify clears it, and a new login supersedes any
    unconsumed one.
    """

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def _get_or_create_user(self, email: str) -> User:
        user = await self.user_repo.get_by_email(email)
        if user is not None:
            return user

        user = User(email=email)
        self.user_repo.add(user)
        try:
            await self.session.flush()
        except IntegrityError:
            # A concurrent login created the same email first
            await self.session.rollback()
            existing = await self.user_repo.get_by_email(email)
            if existing is None:
                raise
            return existing

        logger.info("User created on first login", user_id=user.id)
        return user

    async def login(self, email: str) -> LoginResponse:
        """Issue a fresh passcode for ``email``, creating the user if needed.

        Raises:
            ExternalDependencyFailure: email delivery is configured and failed.
                The passcode stays stored, so a retry of login supersedes it.
        """
        settings = get_settings()

        try:
            user = await self._get_or_create_user(email)
            otp = generate_otp()
            user.set_otp(otp, utc_now() + timedelta(minutes=settings.otp_expire_minutes))
            self.session.add(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("OTP issued", user_id=user.id, delivery=settings.otp_delivery)

        if settings.returns_otp_in_response:
            return LoginResponse(otp=otp)

        if not send_otp_email(email, otp, settings.otp_expire_minutes):
            logger.error("OTP email delivery failed", user_id=user.id)
            raise ExternalDependencyFailure(OTP_EMAIL_FAILED_MESSAGE, code="email_unavailable")
        return LoginResponse()

    async def verify_otp(self, email: str, otp: str) -> VerifyOtpResponse:
        """Exchange a valid passcode for a session token.

        Raises:
            Unauthenticated: unknown user, wrong passcode, or expired passcode.
                The three cases are reported identically.
        """
        try:
            found = await self.user_repo.find_user_with_memberships(email=email)
            if found is None:
                logger.warning("OTP verification failed", reason="unknown_user")
                raise Unauthenticated(INVALID_OTP_MESSAGE)

            user, memberships = found
            if (
                not otp_matches(user.otp, otp)
                or user.otp_expiry is None
                or user.otp_expiry < utc_now()
            ):
                logger.warning("OTP verification failed", user_id=user.id)
                raise Unauthenticated(INVALID_OTP_MESSAGE)

            user.clear_otp()
            self.session.add(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        user_id: int = user.id  # type: ignore[assignment]
        access_token = create_access_token(user_id, user.email)
        logger.info("OTP verified, session issued", user_id=user_id)

        return VerifyOtpResponse(
            access_token=access_token,
            user=UserSummary(
                id=user_id,
                email=user.email,
                companies=[
                    MembershipSummary(
                        id=m.company.id,  # type: ignore[arg-type]
                        subdomain=m.company.subdomain,
                        role=m.membership.role_enum,
                    )
                    for m in memberships
                ],
            ),
        )
