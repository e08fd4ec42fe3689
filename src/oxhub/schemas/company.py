from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.oxhub.core.security.validators import (
    MAX_SUBDOMAIN_LENGTH,
    validate_bearer_format,
    validate_subdomain_format,
)
from src.oxhub.models import CompanyRole


class RegisterCompanyRequest(BaseModel):
    subdomain: str = Field(
        min_length=1,
        max_length=MAX_SUBDOMAIN_LENGTH,
        json_schema_extra={
            "examples": ["demo"],
            "description": "Company subdomain in the OX system. Letters, numbers and hyphens.",
        },
    )
    token: str | None = Field(
        default=None,
        json_schema_extra={
            "examples": ["Bearer xyz123token"],
            "description": "OX API token. Falls back to the configured OX_API_TOKEN.",
        },
    )

    @field_validator("subdomain")
    @classmethod
    def validate_subdomain(cls, v: str) -> str:
        return validate_subdomain_format(v)

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return validate_bearer_format(v)


class CompanyRef(BaseModel):
    id: int
    subdomain: str


class RegisterCompanyResponse(BaseModel):
    message: str
    company: CompanyRef
    role: CompanyRole


class CompanyMembershipRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    subdomain: str
    role: CompanyRole
    created_at: datetime = Field(alias="createdAt")


class CompanyListResponse(BaseModel):
    success: bool = True
    companies: list[CompanyMembershipRead]


class DeleteCompanyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Company deleted successfully"
    deleted_company: CompanyRef = Field(alias="deletedCompany")
