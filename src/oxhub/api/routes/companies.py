"""Company endpoints - registration, membership listing and deletion."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.oxhub.api.dependencies import (
    CompanyId,
    CompanyServiceDep,
    CurrentPrincipal,
    require_company_owner,
)
from src.oxhub.core.principal import Principal
from src.oxhub.schemas import (
    ApiResponse,
    CompanyListResponse,
    DeleteCompanyResponse,
    RegisterCompanyRequest,
    RegisterCompanyResponse,
)

router = APIRouter(tags=["companies"])


@router.get("/companies", response_model=ApiResponse[CompanyListResponse])
async def list_companies(
    principal: CurrentPrincipal, service: CompanyServiceDep
) -> ApiResponse[CompanyListResponse]:
    """List the caller's companies with their role in each."""
    result = await service.get_user_companies(principal.user_id)
    return ApiResponse.wrap(result)


@router.post(
    "/register-company",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[RegisterCompanyResponse],
    responses={
        400: {
            "description": (
                "Invalid subdomain, OX token validation failed, or already a member"
            )
        },
        401: {"description": "Missing or invalid session token"},
    },
)
async def register_company(
    data: RegisterCompanyRequest,
    principal: CurrentPrincipal,
    service: CompanyServiceDep,
) -> ApiResponse[RegisterCompanyResponse]:
    """Register a company as its admin, or join an existing one as manager."""
    result = await service.register_company(data.subdomain, principal.user_id, data.token)
    return ApiResponse.wrap(result, status.HTTP_201_CREATED)


@router.delete(
    "/company/{company_id}",
    response_model=ApiResponse[DeleteCompanyResponse],
    responses={
        403: {"description": "Caller is not the company's creator"},
        404: {"description": "Company not found"},
    },
)
async def delete_company(
    company_id: CompanyId,
    owner: Annotated[Principal, Depends(require_company_owner)],
    service: CompanyServiceDep,
) -> ApiResponse[DeleteCompanyResponse]:
    """Delete a company and every membership in it. Creator only."""
    result = await service.delete_company(company_id, owner.user_id)
    return ApiResponse.wrap(result)
