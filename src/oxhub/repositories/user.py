"""Repository for User entity."""

from sqlmodel import select

from src.oxhub.models import User
from src.oxhub.repositories.base import BaseRepository
from src.oxhub.repositories.membership import CompanyMembership, MembershipRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email address (exact, case-sensitive match)."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_user_with_memberships(
        self,
        *,
        user_id: int | None = None,
        email: str | None = None,
    ) -> tuple[User, list[CompanyMembership]] | None:
        """Load a user by id or email together with every membership and its company.

        Returns None if no such user exists.
        """
        if (user_id is None) == (email is None):
            raise ValueError("Pass exactly one of user_id or email")

        if user_id is not None:
            user = await self.get_by_id(user_id)
        else:
            user = await self.get_by_email(email)  # type: ignore[arg-type]
        if user is None:
            return None

        memberships = await MembershipRepository(self.session).list_for_user(user.id)  # type: ignore[arg-type]
        return user, memberships
