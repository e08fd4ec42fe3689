"""Tests for principal role checks and guard policies."""

import pytest

from src.oxhub.api.dependencies import ROUTE_ROLES, check_company_owner, require_roles
from src.oxhub.api.dependencies.auth import extract_bearer_token
from src.oxhub.core.exceptions import Forbidden, InvalidInput, Unauthenticated
from src.oxhub.core.principal import MembershipClaim, Principal
from src.oxhub.core.roles import PRODUCTS_LIST, ROLE_DENIED_MESSAGES
from src.oxhub.models import Company, CompanyRole
from src.oxhub.services.product_service import (
    NO_PRODUCT_ROLE_MESSAGE,
    PRODUCT_ROLES,
    ProductService,
)

pytestmark = pytest.mark.unit


def claim(company_id: int, role: CompanyRole) -> MembershipClaim:
    return MembershipClaim(
        company_id=company_id, subdomain=f"company-{company_id}", role=role, token="t"
    )


ADMIN_OF_1 = claim(1, CompanyRole.ADMIN)
MANAGER_OF_2 = claim(2, CompanyRole.MANAGER)


class TestExtractBearerToken:
    def test_bearer(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize("header", [None, "", "abc", "Basic abc", "Bearer", "bearer abc"])
    def test_rejected(self, header):
        with pytest.raises(Unauthenticated, match="Access token not found"):
            extract_bearer_token(header)


class TestRoleGuard:
    def test_products_route_declares_admin_and_manager(self):
        assert ROUTE_ROLES["products.list"] == {CompanyRole.ADMIN, CompanyRole.MANAGER}

    async def test_admits_any_qualifying_membership(self):
        guard = require_roles("products.list")
        principal = Principal(user_id=1, email="a@x.com", companies=(MANAGER_OF_2,))
        assert await guard(principal) is principal

    async def test_rejects_principal_without_memberships(self):
        guard = require_roles("products.list")
        with pytest.raises(Forbidden, match="manager or admin"):
            await guard(Principal(user_id=1, email="a@x.com"))

    def test_unknown_route_name_fails_fast(self):
        with pytest.raises(KeyError):
            require_roles("no.such.route")

    def test_product_selection_uses_route_roles(self):
        assert PRODUCT_ROLES is ROUTE_ROLES[PRODUCTS_LIST]
        assert NO_PRODUCT_ROLE_MESSAGE == ROLE_DENIED_MESSAGES[PRODUCTS_LIST]


class TestOwnershipGuard:
    def company(self, admin_id: int) -> Company:
        return Company(id=10, subdomain="acme", token="t", admin_id=admin_id)

    def test_owner_admitted(self):
        principal = Principal(user_id=5, email="a@x.com")
        assert check_company_owner(principal, self.company(5)) is principal

    def test_missing_principal(self):
        with pytest.raises(Unauthenticated):
            check_company_owner(None, self.company(5))

    def test_admin_member_who_is_not_creator_rejected(self):
        principal = Principal(
            user_id=6, email="b@x.com", companies=(claim(10, CompanyRole.ADMIN),)
        )
        with pytest.raises(Forbidden, match="Only the admin who created"):
            check_company_owner(principal, self.company(5))


class TestProductCompanySelection:
    def test_first_qualifying_membership_in_join_order(self):
        principal = Principal(user_id=1, email="a@x.com", companies=(MANAGER_OF_2, ADMIN_OF_1))
        assert ProductService.select_company(principal, None) == MANAGER_OF_2

    def test_explicit_company(self):
        principal = Principal(user_id=1, email="a@x.com", companies=(MANAGER_OF_2, ADMIN_OF_1))
        assert ProductService.select_company(principal, 1) == ADMIN_OF_1

    def test_explicit_company_without_membership(self):
        principal = Principal(user_id=1, email="a@x.com", companies=(ADMIN_OF_1,))
        with pytest.raises(InvalidInput, match="do not have access"):
            ProductService.select_company(principal, 99)

    def test_no_memberships(self):
        with pytest.raises(Forbidden):
            ProductService.select_company(Principal(user_id=1, email="a@x.com"), None)
