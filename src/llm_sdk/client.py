# src/llm_sdk/client.py

"""Resilient dispatch client.

Every call goes through the same pipeline:

    request metrics/log -> retry (exponential backoff) -> traced attempt -> send

Retry wraps the innermost send, so every attempt is traced on its own.
Only transient failures are retried: transport errors (connect, DNS, TLS,
timeout) and throttling/server statuses. Anything else fails immediately.
"""

import asyncio
import logging
from time import monotonic
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    before_sleep_log,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from llm_sdk.api.chat_completion import ChatCompletionRequest, ChatCompletionResponse
from llm_sdk.api.create_image import CreateImageRequest, CreateImageResponse
from llm_sdk.api.embedding import EmbeddingRequest, EmbeddingResponse
from llm_sdk.api.speech import SpeechRequest
from llm_sdk.api.whisper import WhisperRequest, WhisperResponse, WhisperResponseFormat
from llm_sdk.builder import IntoRequest
from llm_sdk.config import (
    DEFAULT_BASE_URL,
    MAX_RETRIES,
    TIMEOUT,
    USER_AGENT,
    ClientConfig,
)
from llm_sdk.errors import (
    APIConnectionError,
    APIStatusError,
    LlmSdkError,
    ResponseDecodeError,
)
from llm_sdk.observability import names
from llm_sdk.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset(
    {408, 409, 429, 500, 502, 503, 504}
)


def _is_transient_status(response: httpx.Response) -> bool:
    return response.status_code in RETRYABLE_STATUS_CODES


def _last_outcome(retry_state: RetryCallState) -> Any:
    # Out of attempts: return the last response, or re-raise the last error
    return retry_state.outcome.result()  # type: ignore[union-attr]


class LlmSdk:
    """Async client for the OpenAI-compatible HTTP API.

    Immutable after construction. Safe to share across concurrent tasks:
    the underlying ``httpx.AsyncClient`` is the only shared resource.
    Construct one per process/session and pass it around.
    """

    def __init__(
        self,
        token: str = "",
        base_url: str = DEFAULT_BASE_URL,
        max_retries: int = MAX_RETRIES,
        *,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = ClientConfig(
            token=token, base_url=base_url, max_retries=max_retries
        )
        self.metrics_hook = metrics_hook
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=TIMEOUT)
        self._client = http_client
        self._sleep = asyncio.sleep
        logger.info(
            "Initialized LlmSdk with base_url=%s, max_retries=%s, authenticated=%s",
            self.config.base_url,
            self.config.max_retries,
            bool(self.config.token),
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
        http_client: httpx.AsyncClient | None = None,
    ) -> "LlmSdk":
        return cls(
            config.token,
            config.base_url,
            config.max_retries,
            metrics_hook=metrics_hook,
            http_client=http_client,
        )

    async def __aenter__(self) -> "LlmSdk":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client, unless it was injected by the caller."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def chat_completion(
        self, req: ChatCompletionRequest
    ) -> ChatCompletionResponse:
        res = await self._send_and_log("chat_completion", req)
        return self._parse_json(res, ChatCompletionResponse)

    async def create_image(self, req: CreateImageRequest) -> CreateImageResponse:
        res = await self._send_and_log("create_image", req)
        return self._parse_json(res, CreateImageResponse)

    async def speech(self, req: SpeechRequest) -> bytes:
        """Synthesize speech. Returns the raw audio in the requested format."""
        res = await self._send_and_log("speech", req)
        return res.content

    async def whisper(self, req: WhisperRequest) -> WhisperResponse:
        """Transcribe or translate audio.

        Only the json format is parsed; every other format (text, srt, vtt,
        verbose_json) comes back verbatim in ``WhisperResponse.text``.
        """
        is_json = req.response_format is WhisperResponseFormat.JSON
        res = await self._send_and_log("whisper", req)
        if is_json:
            return self._parse_json(res, WhisperResponse)
        return WhisperResponse(text=res.text)

    async def embedding(self, req: EmbeddingRequest) -> EmbeddingResponse:
        res = await self._send_and_log("embedding", req)
        return self._parse_json(res, EmbeddingResponse)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _prepare_request(self, req: IntoRequest) -> httpx.Request:
        request = req.into_request(self.config.base_url, self._client)
        if self.config.token:
            request.headers["Authorization"] = f"Bearer {self.config.token}"
        request.headers["User-Agent"] = USER_AGENT
        request.extensions["timeout"] = httpx.Timeout(TIMEOUT).as_dict()
        return request

    async def _send_and_log(self, operation: str, req: IntoRequest) -> httpx.Response:
        request = self._prepare_request(req)
        labels = {"operation": operation}
        start = monotonic()

        try:
            response = await self._send_with_retry(operation, request)
            self._raise_for_status(response)
        except LlmSdkError:
            self.metrics_hook.increment(names.ERRORS_TOTAL, labels=labels)
            raise
        finally:
            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(
                names.REQUEST_DURATION, elapsed_ms, labels=labels
            )
            self.metrics_hook.increment(names.REQUESTS_TOTAL, labels=labels)

        logger.info(
            "%s: status=%d, latency=%.0fms",
            operation,
            response.status_code,
            elapsed_ms,
        )
        return response

    async def _send_with_retry(
        self, operation: str, request: httpx.Request
    ) -> httpx.Response:
        """Send with transport-only retries.

        When attempts run out on a transient status, the last response is
        returned so the status check can report its body.
        """
        log_retry = before_sleep_log(logger, logging.WARNING)

        def before_sleep(retry_state: RetryCallState) -> None:
            self.metrics_hook.increment(
                names.RETRIES_TOTAL, labels={"operation": operation}
            )
            log_retry(retry_state)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=(
                retry_if_exception_type(httpx.TransportError)
                | retry_if_result(_is_transient_status)
            ),
            before_sleep=before_sleep,
            retry_error_callback=_last_outcome,
            sleep=self._sleep,
        )
        try:
            return await retrying(self._send_attempt, operation, request)
        except httpx.TransportError as exc:
            logger.error("%s: transport failed: %s", operation, exc)
            raise APIConnectionError(f"{operation} failed: {exc!r}") from exc

    async def _send_attempt(
        self, operation: str, request: httpx.Request
    ) -> httpx.Response:
        """One traced HTTP send."""
        labels = {"operation": operation}
        start = monotonic()
        try:
            response = await self._client.send(request)
        except httpx.TransportError as exc:
            self.metrics_hook.increment(
                names.ATTEMPTS_TOTAL, labels={**labels, "status": "error"}
            )
            logger.debug("%s %s failed: %r", request.method, request.url, exc)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.ATTEMPT_DURATION, elapsed_ms, labels=labels
        )
        self.metrics_hook.increment(
            names.ATTEMPTS_TOTAL,
            labels={**labels, "status": str(response.status_code)},
        )
        logger.debug(
            "%s %s -> %d (%.0fms)",
            request.method,
            request.url,
            response.status_code,
            elapsed_ms,
        )
        return response

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_client_error or response.is_server_error:
            text = response.text
            logger.error("API failed: %s", text)
            raise APIStatusError(response.status_code, text)

    def _parse_json(
        self, response: httpx.Response, model_type: type[ResponseT]
    ) -> ResponseT:
        try:
            return model_type.model_validate_json(response.content)
        except ValidationError as exc:
            logger.error("Failed to decode %s: %s", model_type.__name__, exc)
            raise ResponseDecodeError(
                f"Unexpected {model_type.__name__} body: {exc}", response.text
            ) from exc
