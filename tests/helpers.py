"""Test helper functions for common data creation patterns."""

from typing import Any

import httpx
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.oxhub.core.ox_client import OxClient
from src.oxhub.core.security import create_access_token
from src.oxhub.models import Company, CompanyRole, User, UserCompany
from tests.factories import CompanyFactory, UserCompanyFactory, UserFactory


async def create_user(session: AsyncSession, **user_kwargs) -> User:
    user = UserFactory.build(**user_kwargs)
    session.add(user)
    await session.flush()
    return user


async def create_company_with_owner(
    session: AsyncSession,
    owner: User,
    **company_kwargs,
) -> tuple[Company, UserCompany]:
    """Create a company owned by ``owner`` along with the owner's ADMIN membership.

    Returns:
        Tuple of (company, membership)
    """
    company = CompanyFactory.build(admin_id=owner.id, **company_kwargs)
    session.add(company)
    await session.flush()

    membership = UserCompanyFactory.admin(user_id=owner.id, company_id=company.id)
    session.add(membership)
    await session.flush()

    return company, membership


async def add_membership(
    session: AsyncSession,
    user: User,
    company: Company,
    role: CompanyRole = CompanyRole.MANAGER,
) -> UserCompany:
    membership = UserCompanyFactory.build(user_id=user.id, company_id=company.id, role=role.value)
    session.add(membership)
    await session.flush()
    return membership


def auth_headers(user: User) -> dict[str, str]:
    """Authorization header carrying a freshly signed session token for ``user``."""
    token = create_access_token(user.id, user.email)  # type: ignore[arg-type]
    return {"Authorization": f"Bearer {token}"}


# --- HTTP helpers ---

DEFAULT_VARIATIONS = {
    "variations": [
        {"id": 1, "name": "Blue T-shirt", "sku": "TS-BLUE-M"},
        {"id": 2, "name": "Red T-shirt", "sku": "TS-RED-M"},
    ],
    "total": 42,
}


class FakeOxApi:
    """In-process stand-in for the per-company OX API.

    Records every request. Set ``profile_status`` / ``variations_status`` to
    simulate upstream failures, or ``timeout`` to make every call time out.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.profile_status = 200
        self.variations_status = 200
        self.variations_body: Any = DEFAULT_VARIATIONS
        self.timeout = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.timeout:
            raise httpx.ReadTimeout("timed out", request=request)
        if request.url.path == "/profile":
            return httpx.Response(self.profile_status, json={"name": request.url.host})
        if request.url.path == "/variations":
            return httpx.Response(self.variations_status, json=self.variations_body)
        return httpx.Response(404)

    def client(self) -> OxClient:
        return OxClient(transport=httpx.MockTransport(self.handler))

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def login_and_verify(client: AsyncClient, email: str) -> dict[str, Any]:
    """Run the passcode flow end to end and return the verify payload."""
    login = await client.post("/api/auth/login", json={"email": email})
    assert login.status_code == 200, login.text
    otp = login.json()["data"]["otp"]

    verify = await client.post("/api/auth/verify", json={"email": email, "otp": otp})
    assert verify.status_code == 200, verify.text
    return verify.json()["data"]
