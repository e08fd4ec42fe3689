"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.oxhub.api.dependencies.db import DBSession
from src.oxhub.repositories import CompanyRepository, MembershipRepository, UserRepository


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_company_repository(session: DBSession) -> CompanyRepository:
    return CompanyRepository(session)


def get_membership_repository(session: DBSession) -> MembershipRepository:
    return MembershipRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
CompanyRepo = Annotated[CompanyRepository, Depends(get_company_repository)]
MembershipRepo = Annotated[MembershipRepository, Depends(get_membership_repository)]
