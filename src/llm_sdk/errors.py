# src/llm_sdk/errors.py

"""Exception hierarchy for llm-sdk.

Every failure a caller can see derives from ``LlmSdkError``:

- ``RequestValidationError``: a request value could not be built.
- ``APIConnectionError``: the transport failed after all retries.
- ``APIStatusError``: the API answered with a 4xx/5xx status.
- ``ResponseDecodeError``: the body did not match the expected shape.
"""


class LlmSdkError(Exception):
    """Base class for all llm-sdk errors."""


class RequestValidationError(LlmSdkError, ValueError):
    """A request value is missing required fields or holds invalid values.

    Raised by builders before any network call is made.
    """

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class APIConnectionError(LlmSdkError):
    """Network-level failure (connect, DNS, TLS, timeout) after retries."""


class APIStatusError(LlmSdkError):
    """The API returned a client or server error status.

    The full response body is kept so callers can diagnose the failure.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API failed: {body}")
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(LlmSdkError):
    """The response body could not be parsed into the declared type."""

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body
