"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.oxhub.api.dependencies.db import DBSession
from src.oxhub.api.dependencies.repositories import CompanyRepo, MembershipRepo, UserRepo
from src.oxhub.core.ox_client import OxClient, get_ox_client
from src.oxhub.services import AuthService, CompanyService, ProductService

OxApiClient = Annotated[OxClient, Depends(get_ox_client)]


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    return AuthService(user_repo, session)


def get_company_service(
    company_repo: CompanyRepo,
    membership_repo: MembershipRepo,
    user_repo: UserRepo,
    ox_client: OxApiClient,
    session: DBSession,
) -> CompanyService:
    return CompanyService(company_repo, membership_repo, user_repo, ox_client, session)


def get_product_service(ox_client: OxApiClient) -> ProductService:
    return ProductService(ox_client)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CompanyServiceDep = Annotated[CompanyService, Depends(get_company_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
