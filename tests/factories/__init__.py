"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, CompanyFactory, ...
"""

from tests.factories.base import BaseFactory, unique_suffix, utc_now
from tests.factories.company import CompanyFactory, UserCompanyFactory
from tests.factories.user import UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "unique_suffix",
    "utc_now",
    # User
    "UserFactory",
    # Company
    "CompanyFactory",
    "UserCompanyFactory",
]
