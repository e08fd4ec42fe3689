"""Roles each guarded route requires, keyed by route name."""

from typing import Final

from src.oxhub.models import CompanyRole

PRODUCTS_LIST: Final[str] = "products.list"

ROUTE_ROLES: dict[str, frozenset[CompanyRole]] = {
    PRODUCTS_LIST: frozenset({CompanyRole.ADMIN, CompanyRole.MANAGER}),
}

ROLE_DENIED_MESSAGES: dict[str, str] = {
    PRODUCTS_LIST: "Only users with manager or admin role can access products",
}


def roles_for(route_name: str) -> frozenset[CompanyRole]:
    return ROUTE_ROLES[route_name]


def denied_message(route_name: str) -> str:
    return ROLE_DENIED_MESSAGES.get(route_name, "Insufficient role")
