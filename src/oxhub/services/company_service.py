"""Company registration, membership and ownership."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.oxhub.core.config import get_settings
from src.oxhub.core.exceptions import (
    AlreadyExists,
    AlreadyMember,
    Forbidden,
    InvalidInput,
    NotFound,
)
from src.oxhub.core.logging import get_logger
from src.oxhub.core.ox_client import OxClient
from src.oxhub.core.security import strip_bearer_prefix
from src.oxhub.models import Company, CompanyRole
from src.oxhub.repositories import CompanyRepository, MembershipRepository, UserRepository
from src.oxhub.schemas.company import (
    CompanyListResponse,
    CompanyMembershipRead,
    CompanyRef,
    DeleteCompanyResponse,
    RegisterCompanyResponse,
)

logger = get_logger(__name__)

COMPANY_CREATED_MESSAGE = "Company registered successfully and user set as admin"
COMPANY_JOINED_MESSAGE = "Successfully joined existing company as manager"
COMPANY_NOT_FOUND_MESSAGE = "Company not found"
NOT_OWNER_MESSAGE = "Only the admin who created this company can delete it"
ALREADY_MEMBER_MESSAGE = "User already associated with this company"


class CompanyService:
    """Company lifecycle.

    Ownership (``Company.admin_id``) and membership role are separate: only
    the creator may delete a company, whatever role other members hold.
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        membership_repo: MembershipRepository,
        user_repo: UserRepository,
        ox_client: OxClient,
        session: AsyncSession,
    ):
        self.company_repo = company_repo
        self.membership_repo = membership_repo
        self.user_repo = user_repo
        self.ox_client = ox_client
        self.session = session

    @staticmethod
    def resolve_token(token: str | None) -> str:
        """Strip the ``Bearer`` prefix, falling back to the configured token."""
        raw = token if token is not None else get_settings().ox_api_token
        resolved = strip_bearer_prefix(raw) if raw else ""
        if not resolved:
            raise InvalidInput("Invalid token format")
        return resolved

    async def register_company(
        self, subdomain: str, user_id: int, token: str | None = None
    ) -> RegisterCompanyResponse:
        """Create a company with the caller as owner, or join an existing one.

        Raises:
            InvalidInput: no usable OX token.
            ExternalValidationFailed: the OX API rejected the token or subdomain.
            AlreadyMember: the caller already belongs to the company, including
                when a concurrent join by the same caller committed first.
            AlreadyExists: a concurrent registration created the subdomain first.
        """
        ox_token = self.resolve_token(token)
        await self.ox_client.validate_token(subdomain, ox_token)

        creating = False
        try:
            company = await self.company_repo.get_by_subdomain(subdomain)

            if company is None:
                creating = True
                company, _ = await self.company_repo.create_company_with_owner_membership(
                    subdomain, ox_token, user_id
                )
                await self.session.commit()
                logger.info("Company registered", company_id=company.id, subdomain=subdomain)
                return RegisterCompanyResponse(
                    message=COMPANY_CREATED_MESSAGE,
                    company=CompanyRef(id=company.id, subdomain=company.subdomain),  # type: ignore[arg-type]
                    role=CompanyRole.ADMIN,
                )

            company_id: int = company.id  # type: ignore[assignment]
            if await self.membership_repo.get_membership(user_id, company_id) is not None:
                raise AlreadyMember(ALREADY_MEMBER_MESSAGE)

            self.membership_repo.create_membership(user_id, company_id, CompanyRole.MANAGER)
            await self.session.commit()
            logger.info("Company joined", company_id=company_id, subdomain=subdomain)
            return RegisterCompanyResponse(
                message=COMPANY_JOINED_MESSAGE,
                company=CompanyRef(id=company_id, subdomain=company.subdomain),
                role=CompanyRole.MANAGER,
            )
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(
                "Company registration lost a race", subdomain=subdomain, creating=creating
            )
            if creating:
                raise AlreadyExists("Company with this subdomain already exists") from e
            raise AlreadyMember(ALREADY_MEMBER_MESSAGE) from e
        except Exception:
            await self.session.rollback()
            raise

    async def get_company(self, company_id: int) -> Company:
        company = await self.company_repo.get_by_id(company_id)
        if company is None:
            raise NotFound(COMPANY_NOT_FOUND_MESSAGE)
        return company

    async def delete_company(self, company_id: int, user_id: int) -> DeleteCompanyResponse:
        """Delete a company owned by ``user_id``; memberships cascade.

        Raises:
            NotFound: no such company.
            Forbidden: the caller is not the company's creator.
            InvalidInput: the store rejected the delete.
        """
        company = await self.get_company(company_id)
        if company.admin_id != user_id:
            raise Forbidden(NOT_OWNER_MESSAGE)

        deleted = CompanyRef(id=company_id, subdomain=company.subdomain)
        try:
            await self.company_repo.delete(company)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to delete company", company_id=company_id, error=str(e))
            raise InvalidInput("Failed to delete company") from e

        logger.info("Company deleted", company_id=company_id, subdomain=deleted.subdomain)
        return DeleteCompanyResponse(deleted_company=deleted)

    async def get_user_companies(self, user_id: int) -> CompanyListResponse:
        """List the user's memberships in join order.

        Raises:
            NotFound: the user does not exist.
        """
        found = await self.user_repo.find_user_with_memberships(user_id=user_id)
        if found is None:
            raise NotFound("User not found")

        _, memberships = found
        return CompanyListResponse(
            companies=[
                CompanyMembershipRead(
                    id=m.company.id,  # type: ignore[arg-type]
                    subdomain=m.company.subdomain,
                    role=m.membership.role_enum,
                    created_at=m.company.created_at,
                )
                for m in memberships
            ]
        )
