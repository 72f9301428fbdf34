from __future__ import annotations

from typing import Any

import httpx
import pytest

from ledcorrector.client import CorrectorClient, CorrectorClientError
from ledcorrector.correction import build_result
from ledcorrector.models import RGBColor
from ledcorrector.profiles import UnknownProfileError, list_profiles

pytestmark = pytest.mark.asyncio

BASE_URL = "https://corrector.invalid"


def _result_payload(hex_digits: str = "FF6600", device: str = "tl-fans") -> dict[str, Any]:
    color = RGBColor(
        r=int(hex_digits[0:2], 16), g=int(hex_digits[2:4], 16), b=int(hex_digits[4:6], 16)
    )
    return build_result(color, device).model_dump(mode="json")


async def test_correct_posts_request_and_parses_result() -> None:
    captured: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["body"] = request.content
        return httpx.Response(200, json=_result_payload())

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = CorrectorClient(f"{BASE_URL}/", client=http_client)
        result = await client.correct(hex_value="#FF6600", device="tl-fans", brightness=100)

    assert captured["url"] == f"{BASE_URL}/correct"
    assert b'"hex":"#FF6600"' in captured["body"]
    assert b'"rgb"' not in captured["body"]
    assert result.corrected_hex == "#FF2200"
    assert result.category == "orange"


async def test_correct_maps_not_found_to_unknown_profile() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "Unknown device profile: 'rgb-toaster'"})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = CorrectorClient(BASE_URL, client=http_client)
        with pytest.raises(UnknownProfileError):
            await client.correct(hex_value="#FF6600", device="rgb-toaster")


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, json={"detail": "Not Found"}),
        httpx.Response(404, text="<html>missing</html>"),
        httpx.Response(404, json=["unexpected"]),
    ],
)
async def test_correct_treats_other_not_found_as_failure(response) -> None:
    transport = httpx.MockTransport(lambda request: response)
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = CorrectorClient(f"{BASE_URL}/wrong-prefix", client=http_client)
        with pytest.raises(CorrectorClientError, match="HTTP 404"):
            await client.correct(hex_value="#FF6600", device="tl-fans")


async def test_correct_rejects_payload_failing_schema(caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        payload = _result_payload()
        payload["corrected"] = {"r": 999, "g": 0, "b": 0}
        return httpx.Response(200, json=payload)

    caplog.set_level("WARNING")
    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = CorrectorClient(BASE_URL, client=http_client)
        with pytest.raises(CorrectorClientError):
            await client.correct(rgb=RGBColor(r=255, g=102, b=0))

    assert "corrector_failed" in caplog.text


async def test_correct_surfaces_server_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = CorrectorClient(BASE_URL, client=http_client)
        with pytest.raises(CorrectorClientError, match="HTTP 500"):
            await client.correct(hex_value="FF6600")


async def test_correct_wraps_transport_failures(caplog) -> None:
    class ExplodingClient:
        async def request(self, *_: Any, **__: Any) -> httpx.Response:
            raise httpx.ReadTimeout("boom")

        async def aclose(self) -> None:  # pragma: no cover
            return None

    caplog.set_level("INFO")
    client = CorrectorClient(BASE_URL, client=ExplodingClient())  # type: ignore[arg-type]

    with pytest.raises(CorrectorClientError):
        await client.correct(hex_value="#FF6600")

    assert "corrector_failed" in caplog.text


async def test_client_builds_default_timeout(monkeypatch) -> None:
    captured: dict[str, Any] = {}

    class DummyAsyncClient:
        def __init__(self, *, timeout: httpx.Timeout | None = None, **kwargs: Any) -> None:
            assert kwargs == {}
            captured["timeout"] = timeout
            captured["closed"] = False

        async def request(self, method: str, url: str, **_: Any) -> httpx.Response:
            return httpx.Response(
                200,
                json=_result_payload(),
                request=httpx.Request(method, url),
            )

        async def aclose(self) -> None:
            captured["closed"] = True

    monkeypatch.setattr(httpx, "AsyncClient", DummyAsyncClient)

    client = CorrectorClient(BASE_URL)
    await client.correct(hex_value="#FF6600")

    timeout = captured["timeout"]
    assert isinstance(timeout, httpx.Timeout)
    assert timeout.read == pytest.approx(1.5)
    assert captured["closed"] is True


async def test_list_profiles_filters_by_brand() -> None:
    captured: dict[str, Any] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["params"] = dict(request.url.params)
        return httpx.Response(
            200, json=[summary.model_dump(mode="json") for summary in list_profiles("nzxt")]
        )

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = CorrectorClient(BASE_URL, client=http_client)
        summaries = await client.list_profiles("nzxt")

    assert captured["params"] == {"brand": "nzxt"}
    assert [summary.key for summary in summaries] == ["nzxt-aer", "nzxt-kraken", "nzxt-hue"]


async def test_client_round_trips_through_service(load_service) -> None:
    main = load_service()
    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = CorrectorClient("http://corrector.test", client=http_client)
        result = await client.correct(
            rgb=RGBColor(r=0, g=0, b=255), device="tl-fans", brightness=50
        )

    assert result.corrected == RGBColor(r=0, g=0, b=242)
    assert result.adjusted == RGBColor(r=0, g=0, b=121)
    assert result.category == "blue"


async def test_client_maps_service_unknown_device(load_service) -> None:
    main = load_service()
    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport) as http_client:
        client = CorrectorClient("http://corrector.test", client=http_client)
        with pytest.raises(UnknownProfileError) as excinfo:
            await client.correct(hex_value="#FF6600", device="rgb-toaster")

    assert excinfo.value.key == "rgb-toaster"
