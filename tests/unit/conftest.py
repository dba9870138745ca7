# tests/unit/conftest.py

from collections.abc import Callable

import httpx
import pytest

from llm_sdk.client import LlmSdk

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def make_sdk() -> Callable[..., tuple[LlmSdk, RecordingTransport]]:
    """Build an LlmSdk on top of a recording mock transport.

    Retry sleeps are captured in ``sdk.sleeps`` instead of waiting.
    """

    def _make(
        handler: Handler,
        token: str = "test-token",
        max_retries: int = 3,
        base_url: str = "https://api.test/v1",
    ) -> tuple[LlmSdk, RecordingTransport]:
        transport = RecordingTransport(handler)
        sdk = LlmSdk(
            token,
            base_url,
            max_retries,
            http_client=httpx.AsyncClient(transport=transport),
        )
        sleeps: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            sleeps.append(seconds)

        sdk._sleep = fake_sleep  # type: ignore[method-assign]
        sdk.sleeps = sleeps  # type: ignore[attr-defined]
        return sdk, transport

    return _make
