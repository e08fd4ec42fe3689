"""Model exports.

Import from here: `from src.oxhub.models import User, Company`
"""

from src.oxhub.models.company import Company, UserCompany
from src.oxhub.models.enums import CompanyRole
from src.oxhub.models.user import User

__all__ = [
    # Enums
    "CompanyRole",
    # Models
    "Company",
    "User",
    "UserCompany",
]
