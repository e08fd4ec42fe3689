from src.oxhub.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MembershipSummary,
    UserSummary,
    VerifyOtpRequest,
    VerifyOtpResponse,
)
from src.oxhub.schemas.company import (
    CompanyListResponse,
    CompanyMembershipRead,
    CompanyRef,
    DeleteCompanyResponse,
    RegisterCompanyRequest,
    RegisterCompanyResponse,
)
from src.oxhub.schemas.envelope import ApiResponse
from src.oxhub.schemas.product import ProductCompany, ProductPagination, ProductsResponse

__all__ = [
    # Envelope
    "ApiResponse",
    # Auth
    "LoginRequest",
    "LoginResponse",
    "MembershipSummary",
    "UserSummary",
    "VerifyOtpRequest",
    "VerifyOtpResponse",
    # Company
    "CompanyListResponse",
    "CompanyMembershipRead",
    "CompanyRef",
    "DeleteCompanyResponse",
    "RegisterCompanyRequest",
    "RegisterCompanyResponse",
    # Product
    "ProductCompany",
    "ProductPagination",
    "ProductsResponse",
]
