"""HTTP client for the per-company OX API.

Each company lives at its own subdomain. Calls are bearer-authenticated with
the company's stored token and always carry a bounded timeout.
"""

from typing import Any

import httpx

from src.oxhub.core.config import get_settings
from src.oxhub.core.exceptions import ExternalDependencyFailure, ExternalValidationFailed
from src.oxhub.core.logging import get_logger

logger = get_logger(__name__)


class OxClient:
    """Thin async wrapper over the two OX endpoints this service uses."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self.transport = transport

    def base_url(self, subdomain: str) -> str:
        return get_settings().ox_api_base_url.format(subdomain=subdomain)

    async def _get(
        self,
        subdomain: str,
        token: str,
        path: str,
        timeout: float,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self.base_url(subdomain),
            timeout=timeout,
            transport=self.transport,
        ) as client:
            response = await client.get(
                path,
                params=params,
                headers={
                    "Accept": "application/json",
                    "Authorization": f"Bearer {token}",
                },
            )
            response.raise_for_status()
            return response

    async def validate_token(self, subdomain: str, token: str) -> None:
        """Check the token against ``GET /profile``.

        Raises:
            ExternalValidationFailed: with code ``ox_unauthorized``, ``ox_not_found``,
                ``ox_timeout`` or ``ox_unavailable``.
        """
        settings = get_settings()
        logger.info("Validating OX token", subdomain=subdomain)
        try:
            await self._get(subdomain, token, "/profile", settings.ox_validation_timeout_seconds)
        except httpx.TimeoutException as e:
            logger.error("OX API validation timed out", subdomain=subdomain)
            raise ExternalValidationFailed("OX API request timeout", code="ox_timeout") from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                "OX API validation failed", subdomain=subdomain, status_code=status_code
            )
            if status_code == 401:
                raise ExternalValidationFailed(
                    "Invalid or expired OX API token", code="ox_unauthorized"
                ) from e
            if status_code == 404:
                raise ExternalValidationFailed(
                    "Subdomain not found or invalid", code="ox_not_found"
                ) from e
            raise ExternalValidationFailed(
                "Failed to validate token with OX API", code="ox_unavailable"
            ) from e
        except httpx.HTTPError as e:
            logger.error("OX API validation failed", subdomain=subdomain, error=str(e))
            raise ExternalValidationFailed(
                "Failed to validate token with OX API", code="ox_unavailable"
            ) from e

        logger.info("OX API validation successful", subdomain=subdomain)

    async def get_variations(
        self, subdomain: str, token: str, page: int, size: int
    ) -> dict[str, Any]:
        """Fetch one page of product variations; the body is returned verbatim.

        Raises:
            ExternalDependencyFailure: with a code naming the failure mode.
        """
        settings = get_settings()
        try:
            response = await self._get(
                subdomain,
                token,
                "/variations",
                settings.ox_request_timeout_seconds,
                params={"page": page, "size": size},
            )
            data = response.json()
        except httpx.TimeoutException as e:
            logger.error("OX products request timed out", subdomain=subdomain)
            raise ExternalDependencyFailure(
                "Request timeout while fetching products", code="ox_timeout"
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                "Failed to fetch products from OX API",
                subdomain=subdomain,
                status_code=status_code,
            )
            raise _products_error(status_code) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Failed to fetch products from OX API", subdomain=subdomain, error=str(e)
            )
            raise ExternalDependencyFailure(
                "Failed to fetch products from OX API", code="ox_unavailable"
            ) from e

        if not isinstance(data, dict):
            raise ExternalDependencyFailure(
                "Failed to fetch products from OX API", code="ox_unavailable"
            )
        return data


def _products_error(status_code: int) -> ExternalDependencyFailure:
    if status_code == 401:
        return ExternalDependencyFailure(
            "Invalid or expired company token. Please re-register the company.",
            code="ox_unauthorized",
        )
    if status_code == 403:
        return ExternalDependencyFailure("Access denied to company products", code="ox_forbidden")
    if status_code == 404:
        return ExternalDependencyFailure(
            "Products endpoint not found for this company", code="ox_not_found"
        )
    if status_code >= 500:
        return ExternalDependencyFailure(
            "OX API server error. Please try again later.", code="ox_server_error"
        )
    return ExternalDependencyFailure("Failed to fetch products from OX API", code="ox_unavailable")


_ox_client: OxClient | None = None


def get_ox_client() -> OxClient:
    """Get the shared OX client."""
    global _ox_client
    if _ox_client is None:
        _ox_client = OxClient()
    return _ox_client
