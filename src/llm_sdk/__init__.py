# src/llm_sdk/__init__.py

"""Typed async client for the OpenAI HTTP API.

Design principles:
- Typed: every request is a validated, immutable value
- Explicit: unset optional fields never reach the wire
- Transport only: retries only on network/throttling/server errors
- No singletons: construct one LlmSdk and share it

Example:
    >>> from llm_sdk import LlmSdk, CreateImageRequest, ImageQuality
    >>>
    >>> sdk = LlmSdk(token="sk-...")
    >>> req = (
    ...     CreateImageRequest.builder()
    ...     .prompt("draw a cute caterpillar")
    ...     .quality(ImageQuality.HD)
    ...     .build()
    ... )
    >>> res = await sdk.create_image(req)
    >>> print(res.data[0].url)
"""

# API types
from .api import (
    AssistantMessage,
    ChatCompletionModel,
    ChatCompletionRequest,
    ChatCompletionResponse,
    CreateImageRequest,
    CreateImageResponse,
    EmbeddingRequest,
    EmbeddingResponse,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
    SpeechRequest,
    SpeechResponseFormat,
    SpeechVoice,
    SystemMessage,
    Tool,
    ToolMessage,
    UserMessage,
    WhisperRequest,
    WhisperResponse,
    WhisperResponseFormat,
)

# Builders
from .builder import IntoRequest, RequestBuilder, WireModel

# Client
from .client import LlmSdk

# Config
from .config import ClientConfig

# Errors
from .errors import (
    APIConnectionError,
    APIStatusError,
    LlmSdkError,
    RequestValidationError,
    ResponseDecodeError,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Schema export
from .schema import ToSchema, to_schema

__all__ = [
    # API types
    "AssistantMessage",
    "ChatCompletionModel",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "CreateImageRequest",
    "CreateImageResponse",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    "SpeechRequest",
    "SpeechResponseFormat",
    "SpeechVoice",
    "SystemMessage",
    "Tool",
    "ToolMessage",
    "UserMessage",
    "WhisperRequest",
    "WhisperResponse",
    "WhisperResponseFormat",
    # Builders
    "IntoRequest",
    "RequestBuilder",
    "WireModel",
    # Client
    "LlmSdk",
    # Config
    "ClientConfig",
    # Errors
    "APIConnectionError",
    "APIStatusError",
    "LlmSdkError",
    "RequestValidationError",
    "ResponseDecodeError",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Schema export
    "ToSchema",
    "to_schema",
]
