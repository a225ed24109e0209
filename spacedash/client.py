"""Async client for the SpaceTraders HTTP API."""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from .models import Agent, ServerStatus, Ship, System

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.spacetraders.io/v2"

_SHIPS = TypeAdapter(list[Ship])
_SYSTEMS = TypeAdapter(list[System])


class SpaceTradersError(RuntimeError):
    """Raised when a request fails or the response cannot be decoded."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SpaceTradersClient:
    """Thin wrapper over one `httpx.AsyncClient` with bearer auth.

    No retries and no paging policy: each call is a single request.
    """

    def __init__(
        self,
        token: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "SpaceTradersClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def get_status(self) -> ServerStatus:
        # The status document is the only unwrapped body.
        body = await self._get("/")
        return self._validate(ServerStatus.model_validate, body, "/")

    async def get_my_agent(self) -> Agent:
        data = await self._get_data("/my/agent")
        return self._validate(Agent.model_validate, data, "/my/agent")

    async def get_my_ships(self) -> list[Ship]:
        data = await self._get_data("/my/ships")
        return self._validate(_SHIPS.validate_python, data, "/my/ships")

    async def get_systems(self, page: int = 1, limit: int = 20) -> list[System]:
        data = await self._get_data("/systems", params={"page": page, "limit": limit})
        return self._validate(_SYSTEMS.validate_python, data, "/systems")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            raise SpaceTradersError(f"GET {path} failed: {exc}") from exc

        if response.is_error:
            raise SpaceTradersError(
                f"GET {path} returned {response.status_code}: {self._error_message(response)}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise SpaceTradersError(
                f"GET {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from exc

    async def _get_data(self, path: str, params: dict[str, Any] | None = None) -> Any:
        body = await self._get(path, params=params)
        if not isinstance(body, dict) or "data" not in body:
            raise SpaceTradersError(f"GET {path} response has no 'data' member")
        return body["data"]

    @staticmethod
    def _validate(parse, payload: Any, path: str):
        try:
            return parse(payload)
        except ValidationError as exc:
            logger.debug("Invalid payload from %s: %s", path, exc)
            raise SpaceTradersError(f"GET {path} returned an unexpected payload") from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text.strip() or response.reason_phrase
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return response.reason_phrase
