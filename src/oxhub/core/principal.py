"""The authenticated caller, resolved fresh from the store on every request.

Passed explicitly from the session guard to handlers and services; nothing
here is stored in ambient request state.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from src.oxhub.models import CompanyRole


@dataclass(frozen=True)
class MembershipClaim:
    """One of the principal's company memberships as it is right now."""

    company_id: int
    subdomain: str
    role: CompanyRole
    token: str


@dataclass(frozen=True)
class Principal:
    """Immutable identity of the current request's user."""

    user_id: int
    email: str
    companies: tuple[MembershipClaim, ...] = field(default_factory=tuple)

    def membership_for(self, company_id: int) -> MembershipClaim | None:
        for claim in self.companies:
            if claim.company_id == company_id:
                return claim
        return None

    def memberships_with_roles(self, roles: Iterable[CompanyRole]) -> list[MembershipClaim]:
        """Memberships whose role is one of ``roles``, in join order."""
        allowed = frozenset(roles)
        return [claim for claim in self.companies if claim.role in allowed]

    def has_any_role(self, roles: Iterable[CompanyRole]) -> bool:
        return bool(self.memberships_with_roles(roles))
