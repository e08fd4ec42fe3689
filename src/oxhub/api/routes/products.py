"""Product endpoints - proxied from the company's OX API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.oxhub.api.dependencies import MAX_ID, ProductServiceDep, require_roles
from src.oxhub.core.principal import Principal
from src.oxhub.core.roles import PRODUCTS_LIST
from src.oxhub.schemas import ApiResponse, ProductsResponse
from src.oxhub.schemas.product import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

router = APIRouter(tags=["products"])


@router.get(
    "/products",
    name=PRODUCTS_LIST,
    response_model=ApiResponse[ProductsResponse],
    responses={
        400: {"description": "Invalid pagination, no access to company, or OX API failure"},
        403: {"description": "No manager or admin membership"},
    },
)
async def list_products(
    principal: Annotated[Principal, Depends(require_roles(PRODUCTS_LIST))],
    service: ProductServiceDep,
    page: Annotated[int, Query(ge=1)] = 1,
    size: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    company_id: Annotated[int | None, Query(alias="companyId", ge=1, le=MAX_ID)] = None,
) -> ApiResponse[ProductsResponse]:
    """List one page of the company's product variations."""
    result = await service.get_products(principal, page, size, company_id)
    return ApiResponse.wrap(result)
