"""Repository layer - data access abstraction."""

from src.oxhub.repositories.base import BaseRepository
from src.oxhub.repositories.company import CompanyRepository
from src.oxhub.repositories.membership import CompanyMembership, MembershipRepository
from src.oxhub.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "CompanyMembership",
    "CompanyRepository",
    "MembershipRepository",
    "UserRepository",
]
