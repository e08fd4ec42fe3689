"""Repository for Company entity."""

from sqlmodel import select

from src.oxhub.models import Company, CompanyRole, UserCompany
from src.oxhub.repositories.base import BaseRepository
from src.oxhub.repositories.membership import MembershipRepository


class CompanyRepository(BaseRepository[Company]):
    """Repository for Company entity."""

    model = Company

    async def get_by_subdomain(self, subdomain: str) -> Company | None:
        """Get company by subdomain."""
        result = await self.session.execute(
            select(Company).where(Company.subdomain == subdomain)
        )
        return result.scalar_one_or_none()

    async def create_company_with_owner_membership(
        self, subdomain: str, token: str, admin_id: int
    ) -> tuple[Company, UserCompany]:
        """Stage a company and its creator's ADMIN membership in the current transaction.

        Both rows are flushed (so ids and constraint violations surface here)
        but not committed; the caller commits or rolls back both together.
        """
        company = Company(subdomain=subdomain, token=token, admin_id=admin_id)
        self.session.add(company)
        await self.session.flush()

        membership = MembershipRepository(self.session).create_membership(
            admin_id,
            company.id,  # type: ignore[arg-type]
            CompanyRole.ADMIN,
        )
        await self.session.flush()
        return company, membership

    async def delete(self, company: Company) -> None:
        """Delete a company; its memberships go with it via ON DELETE CASCADE."""
        await self.session.delete(company)
        await self.session.flush()
