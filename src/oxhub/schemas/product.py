from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.oxhub.models import CompanyRole

MAX_PAGE_SIZE = 20
DEFAULT_PAGE_SIZE = 10


class ProductPagination(BaseModel):
    page: int
    size: int
    total: int


class ProductCompany(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    subdomain: str
    user_role: CompanyRole = Field(alias="userRole")


class ProductsResponse(BaseModel):
    """``data`` is the OX API body, passed through unchanged."""

    success: bool = True
    data: dict[str, Any]
    pagination: ProductPagination
    company: ProductCompany
