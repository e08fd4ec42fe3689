from src.oxhub.services.auth_service import AuthService
from src.oxhub.services.company_service import CompanyService
from src.oxhub.services.product_service import ProductService

__all__ = ["AuthService", "CompanyService", "ProductService"]
