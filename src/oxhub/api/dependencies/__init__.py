"""FastAPI dependency injection definitions."""

from src.oxhub.api.dependencies.access import (
    MAX_ID,
    CompanyId,
    check_company_owner,
    require_company_owner,
    require_roles,
)
from src.oxhub.api.dependencies.auth import (
    CurrentPrincipal,
    extract_bearer_token,
    get_current_principal,
)
from src.oxhub.api.dependencies.db import DBSession, get_db_session
from src.oxhub.api.dependencies.repositories import (
    CompanyRepo,
    MembershipRepo,
    UserRepo,
    get_company_repository,
    get_membership_repository,
    get_user_repository,
)
from src.oxhub.api.dependencies.services import (
    AuthServiceDep,
    CompanyServiceDep,
    OxApiClient,
    ProductServiceDep,
    get_auth_service,
    get_company_service,
    get_product_service,
)
from src.oxhub.core.roles import ROUTE_ROLES

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Repositories
    "CompanyRepo",
    "MembershipRepo",
    "UserRepo",
    "get_company_repository",
    "get_membership_repository",
    "get_user_repository",
    # Services
    "AuthServiceDep",
    "CompanyServiceDep",
    "OxApiClient",
    "ProductServiceDep",
    "get_auth_service",
    "get_company_service",
    "get_product_service",
    # Guards
    "MAX_ID",
    "CompanyId",
    "CurrentPrincipal",
    "ROUTE_ROLES",
    "check_company_owner",
    "extract_bearer_token",
    "get_current_principal",
    "require_company_owner",
    "require_roles",
]
