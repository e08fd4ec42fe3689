"""End-to-end flows across login, registration and products."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.oxhub.models import Company, UserCompany
from tests.helpers import FakeOxApi, bearer, login_and_verify

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_creator_becomes_admin_and_second_user_joins_as_manager(
    client: AsyncClient, db_session: AsyncSession
) -> None:
    first = await login_and_verify(client, "a@x.com")
    token = first["access_token"]

    created = await client.post(
        "/api/register-company",
        json={"subdomain": "acme", "token": "Bearer ox"},
        headers=bearer(token),
    )
    assert created.status_code == 201
    assert created.json()["data"]["role"] == "ADMIN"

    second = await login_and_verify(client, "b@x.com")
    joined = await client.post(
        "/api/register-company",
        json={"subdomain": "acme", "token": "Bearer ox"},
        headers=bearer(second["access_token"]),
    )
    assert joined.status_code == 201
    assert joined.json()["data"]["role"] == "MANAGER"

    company = (
        await db_session.execute(select(Company).where(Company.subdomain == "acme"))
    ).scalar_one()
    rows = (
        await db_session.execute(
            select(UserCompany)
            .where(UserCompany.company_id == company.id)
            .order_by(UserCompany.id)
        )
    ).scalars().all()
    assert [(row.user_id, row.role) for row in rows] == [
        (first["user"]["id"], "ADMIN"),
        (second["user"]["id"], "MANAGER"),
    ]
    assert company.admin_id == first["user"]["id"]

    # A fresh sign-in reports the membership
    again = await login_and_verify(client, "a@x.com")
    assert again["user"]["companies"] == [
        {"id": company.id, "subdomain": "acme", "role": "ADMIN"}
    ]


async def test_oversized_page_rejected_before_external_call(
    client: AsyncClient, ox_api: FakeOxApi
) -> None:
    session = await login_and_verify(client, "a@x.com")
    headers = bearer(session["access_token"])
    await client.post(
        "/api/register-company", json={"subdomain": "acme", "token": "Bearer ox"}, headers=headers
    )
    assert ox_api.paths() == ["/profile"]

    response = await client.get("/api/products", params={"size": 25}, headers=headers)

    assert response.status_code == 400
    assert ox_api.paths() == ["/profile"]


async def test_owner_deletes_company_and_manager_loses_access(
    client: AsyncClient, ox_api: FakeOxApi
) -> None:
    owner = await login_and_verify(client, "owner@x.com")
    manager = await login_and_verify(client, "manager@x.com")
    owner_headers = bearer(owner["access_token"])
    manager_headers = bearer(manager["access_token"])

    created = await client.post(
        "/api/register-company", json={"subdomain": "acme", "token": "Bearer ox"},
        headers=owner_headers,
    )
    company_id = created.json()["data"]["company"]["id"]
    await client.post(
        "/api/register-company", json={"subdomain": "acme", "token": "Bearer ox"},
        headers=manager_headers,
    )

    denied = await client.delete(f"/api/company/{company_id}", headers=manager_headers)
    assert denied.status_code == 403

    deleted = await client.delete(f"/api/company/{company_id}", headers=owner_headers)
    assert deleted.status_code == 200

    listing = await client.get("/api/companies", headers=manager_headers)
    assert listing.json()["data"]["companies"] == []
