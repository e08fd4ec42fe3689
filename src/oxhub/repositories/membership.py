"""Repository for UserCompany entity."""

from typing import NamedTuple

from sqlmodel import col, select

from src.oxhub.models import Company, CompanyRole, UserCompany
from src.oxhub.repositories.base import BaseRepository


class CompanyMembership(NamedTuple):
    """A membership row together with the company it points at."""

    membership: UserCompany
    company: Company


class MembershipRepository(BaseRepository[UserCompany]):
    """Repository for user-company memberships."""

    model = UserCompany

    async def get_membership(self, user_id: int, company_id: int) -> UserCompany | None:
        """Get membership for a user in a company."""
        result = await self.session.execute(
            select(UserCompany).where(
                UserCompany.user_id == user_id,
                UserCompany.company_id == company_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: int) -> list[CompanyMembership]:
        """List a user's memberships with their companies, in join order."""
        result = await self.session.execute(
            select(UserCompany, Company)
            .join(Company, col(Company.id) == col(UserCompany.company_id))
            .where(UserCompany.user_id == user_id)
            .order_by(col(UserCompany.id))
        )
        return [CompanyMembership(membership, company) for membership, company in result.all()]

    def create_membership(
        self,
        user_id: int,
        company_id: int,
        role: CompanyRole = CompanyRole.MANAGER,
    ) -> UserCompany:
        """Create a new membership (add to session, no commit)."""
        membership = UserCompany(user_id=user_id, company_id=company_id, role=role.value)
        self.session.add(membership)
        return membership
