"""HTTP client for the color corrector service."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from httpx import Timeout
from jsonschema import ValidationError, validate

from .const import UNKNOWN_PROFILE_MESSAGE
from .models import CorrectionRequest, CorrectionResult, ProfileSummary, RGBColor
from .profiles import UnknownProfileError

LOGGER = logging.getLogger(__name__)
DEFAULT_TIMEOUT = Timeout(1.5)
RESULT_SCHEMA = CorrectionResult.model_json_schema(mode="validation")


class CorrectorClientError(RuntimeError):
    """Raised when the corrector service call fails."""


class CorrectorClient:
    """Wrapper around the corrector service endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | httpx.Timeout | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout or DEFAULT_TIMEOUT
        self._client = client

    async def correct(
        self,
        *,
        hex_value: str | None = None,
        rgb: RGBColor | None = None,
        device: str | None = None,
        brightness: int = 100,
    ) -> CorrectionResult:
        """Request a correction and validate the returned payload."""

        request_model = CorrectionRequest(
            hex=hex_value,
            rgb=rgb,
            device=device,
            brightness=brightness,
        )
        payload = request_model.model_dump(mode="json", exclude_none=True)
        LOGGER.info(
            "corrector_request_start device=%s target=%s",
            device,
            hex_value or (rgb.hex if rgb else None),
        )

        response = await self._send("POST", "/correct", json=payload)
        if response.status_code == httpx.codes.NOT_FOUND and self._names_unknown_profile(response):
            raise UnknownProfileError(device or "")
        self._raise_for_status(response)

        data = self._decode(response)
        try:
            validate(data, RESULT_SCHEMA)
        except (ValidationError, TypeError) as exc:
            LOGGER.warning("corrector_failed error=%s payload=%s", exc, data)
            raise CorrectorClientError("Corrector response failed validation") from exc

        result = CorrectionResult.model_validate(data)
        LOGGER.info(
            "corrector_request_complete device=%s corrected=%s",
            result.device,
            result.corrected_hex,
        )
        return result

    async def list_profiles(self, brand: str | None = None) -> list[ProfileSummary]:
        params = {"brand": brand} if brand else None
        response = await self._send("GET", "/profiles", params=params)
        self._raise_for_status(response)
        data = self._decode(response)
        if not isinstance(data, list):
            raise CorrectorClientError("Corrector returned an unexpected profile listing")
        return [ProfileSummary.model_validate(item) for item in data]

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = self._client
        close_client = False
        if client is None:
            timeout = self._timeout
            if not isinstance(timeout, Timeout):
                timeout = Timeout(timeout)
            client = httpx.AsyncClient(timeout=timeout)
            close_client = True

        try:
            return await client.request(method, f"{self._base_url}{path}", **kwargs)
        except httpx.HTTPError as exc:
            LOGGER.warning("corrector_failed path=%s error=%s", path, exc)
            raise CorrectorClientError(f"Corrector request failed: {exc}") from exc
        finally:
            if close_client:
                await client.aclose()

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        LOGGER.warning(
            "corrector_failed status=%s body=%s", response.status_code, response.text
        )
        raise CorrectorClientError(
            f"Corrector returned HTTP {response.status_code}"
        )

    @staticmethod
    def _names_unknown_profile(response: httpx.Response) -> bool:
        """Tell a missing device profile apart from a missing route."""

        try:
            detail = response.json().get("detail")
        except (json.JSONDecodeError, AttributeError):
            return False
        return isinstance(detail, str) and detail.startswith(UNKNOWN_PROFILE_MESSAGE)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise CorrectorClientError("Corrector returned invalid JSON") from exc
