"""
HTTP gateway to the hero slider API

Thin async wrapper over the admin endpoints. Every non-2xx answer and
every transport failure becomes a ``PersistenceError`` carrying the status
code and the message from the error body, so callers only handle one
exception type.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.api import HERO_SLIDER_ADMIN_PREFIX, I18N_PREFIX
from app.config import settings
from app.exceptions import PersistenceError

logger = logging.getLogger(__name__)

ADMIN_SLIDERS = HERO_SLIDER_ADMIN_PREFIX
LANGUAGES = f"{I18N_PREFIX}/languages"


def _error_details(response: httpx.Response) -> tuple[str, str | None]:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}", None

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return str(error.get("message") or f"HTTP {response.status_code}"), error.get("error_code")
    if isinstance(error, str):
        return error, None
    return f"HTTP {response.status_code}", None


class SliderGateway:
    """Admin API client.

    Pass ``client`` to reuse a configured ``httpx.AsyncClient`` (tests pass
    one bound to the ASGI app); otherwise one is created for ``base_url``.
    Collection reads use pages of ``page_size``, by default the largest
    page the API accepts.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        client: httpx.AsyncClient | None = None,
        page_size: int | None = None,
    ):
        self.page_size = page_size or settings.admin_page_limit_max
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=base_url or settings.admin_api_base_url)
        self._headers = {"Authorization": f"Bearer {token}"} if token else {}

    async def __aenter__(self) -> SliderGateway:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def _request(self, method: str, path: str, operation: str, **kwargs) -> dict[str, Any]:
        try:
            response = await self.client.request(method, path, headers=self._headers, **kwargs)
        except httpx.TimeoutException:
            logger.warning("Slider API %s timed out", operation)
            raise PersistenceError("The slider service did not answer in time", 504, operation)
        except httpx.RequestError as e:
            logger.warning("Slider API %s failed: %s", operation, e)
            raise PersistenceError(f"Could not reach the slider service: {e}", 502, operation)

        if response.is_success:
            return response.json() if response.content else {}

        message, remote_code = _error_details(response)
        logger.warning("Slider API %s returned %d: %s", operation, response.status_code, message)
        raise PersistenceError(message, response.status_code, operation, remote_code)

    async def fetch_sliders(self) -> list[dict[str, Any]]:
        """Read the whole collection, page by page, in store order."""
        sliders: list[dict[str, Any]] = []
        page = 1
        while True:
            data = await self._request(
                "GET", ADMIN_SLIDERS, "fetch_sliders", params={"page": page, "limit": self.page_size}
            )
            sliders.extend(data.get("sliders", []))
            if page >= data.get("pagination", {}).get("totalPages", 1):
                return sliders
            page += 1

    async def fetch_languages(self) -> list[dict[str, Any]]:
        data = await self._request("GET", LANGUAGES, "fetch_languages")
        return data.get("languages", [])

    async def create_slider(self, payload: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("POST", ADMIN_SLIDERS, "create_slider", json=payload)
        return data["slider"]

    async def update_slider(self, slider_id: int, changes: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("PUT", f"{ADMIN_SLIDERS}/{slider_id}", "update_slider", json=changes)
        return data["slider"]

    async def delete_slider(self, slider_id: int) -> None:
        await self._request("DELETE", f"{ADMIN_SLIDERS}/{slider_id}", "delete_slider")
