"""Paginated product listing proxied from the company's OX API."""

from src.oxhub.core.exceptions import Forbidden, InvalidInput
from src.oxhub.core.logging import get_logger
from src.oxhub.core.ox_client import OxClient
from src.oxhub.core.principal import MembershipClaim, Principal
from src.oxhub.core.roles import PRODUCTS_LIST, denied_message, roles_for
from src.oxhub.schemas.product import ProductCompany, ProductPagination, ProductsResponse

logger = get_logger(__name__)

PRODUCT_ROLES = roles_for(PRODUCTS_LIST)
NO_PRODUCT_ROLE_MESSAGE = denied_message(PRODUCTS_LIST)


class ProductService:
    """Select the company a request is about and fetch its products."""

    def __init__(self, ox_client: OxClient):
        self.ox_client = ox_client

    @staticmethod
    def select_company(principal: Principal, company_id: int | None) -> MembershipClaim:
        """Pick the membership whose company the listing is for.

        With ``company_id`` that exact membership is required; otherwise the
        first membership (in join order) with a qualifying role is used.
        """
        if company_id is not None:
            claim = principal.membership_for(company_id)
            if claim is None:
                raise InvalidInput("You do not have access to the specified company")
            if claim.role not in PRODUCT_ROLES:
                raise Forbidden(NO_PRODUCT_ROLE_MESSAGE)
            return claim

        qualifying = principal.memberships_with_roles(PRODUCT_ROLES)
        if not qualifying:
            raise Forbidden(NO_PRODUCT_ROLE_MESSAGE)
        return qualifying[0]

    async def get_products(
        self,
        principal: Principal,
        page: int,
        size: int,
        company_id: int | None = None,
    ) -> ProductsResponse:
        claim = self.select_company(principal, company_id)
        logger.info(
            "Fetching products",
            company_id=claim.company_id,
            subdomain=claim.subdomain,
            page=page,
            size=size,
        )

        data = await self.ox_client.get_variations(claim.subdomain, claim.token, page, size)
        total = data.get("total")

        return ProductsResponse(
            data=data,
            pagination=ProductPagination(
                page=page,
                size=size,
                total=total if isinstance(total, int) else 0,
            ),
            company=ProductCompany(
                id=claim.company_id,
                subdomain=claim.subdomain,
                user_role=claim.role,
            ),
        )
