"""Role and ownership guards.

Required roles are declared per route in ``core.roles`` and looked up by
route name when the guard is built.
"""

from collections.abc import Awaitable, Callable
from typing import Annotated, Final

from fastapi import Path

from src.oxhub.api.dependencies.auth import CurrentPrincipal
from src.oxhub.api.dependencies.services import CompanyServiceDep
from src.oxhub.core.exceptions import Forbidden, Unauthenticated
from src.oxhub.core.principal import Principal
from src.oxhub.core.roles import denied_message, roles_for
from src.oxhub.models import Company

# Integer primary keys are 32-bit on Postgres
MAX_ID: Final[int] = 2**31 - 1

CompanyId = Annotated[int, Path(gt=0, le=MAX_ID)]


def require_roles(route_name: str) -> Callable[[Principal], Awaitable[Principal]]:
    """Build a guard admitting principals with any of the route's declared roles.

    Unscoped routes only need one qualifying membership in any company;
    narrowing to a specific company is left to the handler.
    """
    roles = roles_for(route_name)
    message = denied_message(route_name)

    async def role_guard(principal: CurrentPrincipal) -> Principal:
        if not principal.has_any_role(roles):
            raise Forbidden(message, required_roles=sorted(r.value for r in roles))
        return principal

    return role_guard


def check_company_owner(principal: Principal | None, company: Company) -> Principal:
    if principal is None:
        raise Unauthenticated("Authentication required")
    if company.admin_id != principal.user_id:
        raise Forbidden("Only the admin who created this company can delete it")
    return principal


async def require_company_owner(
    company_id: CompanyId,
    principal: CurrentPrincipal,
    company_service: CompanyServiceDep,
) -> Principal:
    """Admit only the creator of the company named in the path."""
    company = await company_service.get_company(company_id)
    return check_company_owner(principal, company)
