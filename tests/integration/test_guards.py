"""Tests for the session guard."""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from src.oxhub.core.config import get_settings
from src.oxhub.core.security import create_access_token
from src.oxhub.models import User
from tests.helpers import (
    add_membership,
    auth_headers,
    bearer,
    create_company_with_owner,
    create_user,
)

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestSessionGuard:
    async def test_missing_header(self, client: AsyncClient) -> None:
        response = await client.get("/api/companies")

        assert response.status_code == 401
        body = response.json()
        assert body["message"] == "Access token not found"
        assert body["error"] == {"code": "unauthenticated"}

    @pytest.mark.parametrize("header", ["Token abc", "Bearer", "Basic dXNlcjpwYXNz"])
    async def test_malformed_header(self, client: AsyncClient, header: str) -> None:
        response = await client.get("/api/companies", headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json()["message"] == "Access token not found"

    async def test_expired_token(self, client: AsyncClient, test_user: User) -> None:
        token = create_access_token(test_user.id, test_user.email, timedelta(seconds=-5))

        response = await client.get("/api/companies", headers=bearer(token))

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    async def test_foreign_signature(self, client: AsyncClient, test_user: User) -> None:
        token = jwt.encode(
            {"sub": str(test_user.id), "email": test_user.email},
            "some-other-secret-that-is-at-least-32-chars",
            algorithm=get_settings().jwt_algorithm,
        )

        response = await client.get("/api/companies", headers=bearer(token))

        assert response.status_code == 401

    async def test_non_numeric_subject(self, client: AsyncClient) -> None:
        token = jwt.encode(
            {"sub": "not-a-number", "email": "a@x.com"},
            get_settings().jwt_secret_key,
            algorithm=get_settings().jwt_algorithm,
        )

        response = await client.get("/api/companies", headers=bearer(token))

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    async def test_deleted_user(self, client: AsyncClient) -> None:
        token = create_access_token(424242, "gone@example.com")

        response = await client.get("/api/companies", headers=bearer(token))

        assert response.status_code == 401

    async def test_membership_granted_after_sign_in_is_visible(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        owner = await create_user(db_session)
        user = await create_user(db_session)
        company, _ = await create_company_with_owner(db_session, owner, subdomain="late")
        await db_session.commit()

        headers = auth_headers(user)
        before = await client.get("/api/products", headers=headers)
        assert before.status_code == 403

        await add_membership(db_session, user, company)
        await db_session.commit()

        after = await client.get("/api/products", headers=headers)
        assert after.status_code == 200
        assert after.json()["data"]["company"]["subdomain"] == "late"

    async def test_membership_removed_after_sign_in_is_visible(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        owner = await create_user(db_session)
        manager = await create_user(db_session)
        company, _ = await create_company_with_owner(db_session, owner)
        await add_membership(db_session, manager, company)
        await db_session.commit()

        headers = auth_headers(manager)
        assert (await client.get("/api/products", headers=headers)).status_code == 200

        await client.delete(f"/api/company/{company.id}", headers=auth_headers(owner))

        assert (await client.get("/api/products", headers=headers)).status_code == 403
