"""Company and membership models."""

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.oxhub.models.base import utc_now
from src.oxhub.models.enums import CompanyRole


class Company(SQLModel, table=True):
    """A tenant in the OX system, addressed by its subdomain.

    ``admin_id`` is the creating user. It is set once and never changes;
    only that user may delete the company.
    """

    __tablename__ = "companies"

    id: int | None = Field(default=None, primary_key=True)
    subdomain: str = Field(max_length=63, unique=True, index=True)
    token: str = Field(max_length=2048)
    admin_id: int = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class UserCompany(SQLModel, table=True):
    """Membership of a user in a company, with a role on the edge.

    Rows are removed by the database when their company is deleted.
    """

    __tablename__ = "user_companies"
    __table_args__ = (
        UniqueConstraint("user_id", "company_id", name="uq_user_companies_user_company"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    company_id: int = Field(foreign_key="companies.id", ondelete="CASCADE", index=True)
    role: str = Field(default=CompanyRole.MANAGER.value, max_length=20)

    @property
    def role_enum(self) -> CompanyRole:
        return CompanyRole(self.role)
