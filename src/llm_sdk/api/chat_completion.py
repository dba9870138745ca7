# src/llm_sdk/api/chat_completion.py

import json
import logging
from enum import Enum
from typing import Annotated, Any, Literal

import httpx
from pydantic import BaseModel, Field

from llm_sdk.builder import WireModel
from llm_sdk.schema import to_schema

logger = logging.getLogger(__name__)


class ChatCompletionModel(str, Enum):
    GPT_3_5_TURBO = "gpt-3.5-turbo"
    GPT_4 = "gpt-4"
    GPT_4_TURBO_PREVIEW = "gpt-4-turbo-preview"
    GPT_4_VISION_PREVIEW = "gpt-4-vision-preview"
    GPT_4O = "gpt-4o"


class ChatResponseFormatType(str, Enum):
    TEXT = "text"
    JSON_OBJECT = "json_object"


class ToolChoiceMode(str, Enum):
    NONE = "none"
    AUTO = "auto"
    REQUIRED = "required"


class FinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"
    FUNCTION_CALL = "function_call"


# ---------------------------------------------------------------------------
# Tool calls (shared by requests and responses)
# ---------------------------------------------------------------------------


class FunctionCall(BaseModel):
    name: str
    # JSON-encoded arguments, exactly as produced by the model
    arguments: str


class ToolCall(BaseModel):
    id: str
    type: Literal["function"] = "function"
    function: FunctionCall

    def parse_arguments(self) -> dict[str, Any]:
        """Decode the arguments. Malformed JSON yields an empty dict."""
        try:
            arguments = json.loads(self.function.arguments)
        except json.JSONDecodeError:
            logger.warning(
                "Failed to parse tool call arguments: %s", self.function.arguments
            )
            return {}
        return arguments if isinstance(arguments, dict) else {}


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class SystemMessage(WireModel):
    role: Literal["system"] = "system"
    content: str
    name: str | None = None


class UserMessage(WireModel):
    role: Literal["user"] = "user"
    content: str
    name: str | None = None


class AssistantMessage(WireModel):
    """A previous model turn, fed back as history."""

    role: Literal["assistant"] = "assistant"
    content: str | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None


class ToolMessage(WireModel):
    """Result of a tool call, answering ``tool_call_id``."""

    role: Literal["tool"] = "tool"
    content: str
    tool_call_id: str


ChatCompletionMessage = Annotated[
    SystemMessage | UserMessage | AssistantMessage | ToolMessage,
    Field(discriminator="role"),
]


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class FunctionDefinition(WireModel):
    name: str = Field(min_length=1)
    description: str | None = None
    # JSON Schema of the parameters object
    parameters: dict[str, Any]


class Tool(WireModel):
    type: Literal["function"] = "function"
    function: FunctionDefinition

    @classmethod
    def new_function(
        cls,
        name: str,
        description: str,
        parameters: "type[BaseModel]",
    ) -> "Tool":
        """Describe a callable function whose params live in ``parameters``."""
        return cls(
            function=FunctionDefinition(
                name=name,
                description=description,
                parameters=to_schema(parameters),
            )
        )


class NamedFunction(WireModel):
    name: str


class NamedToolChoice(WireModel):
    """Force the model to call one specific function."""

    type: Literal["function"] = "function"
    function: NamedFunction

    @classmethod
    def new(cls, name: str) -> "NamedToolChoice":
        return cls(function=NamedFunction(name=name))


class ChatResponseFormat(WireModel):
    type: ChatResponseFormatType


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class ChatCompletionRequest(WireModel):
    """Chat completion request.

    Stateless: ``messages`` carries the whole conversation.
    """

    messages: list[ChatCompletionMessage] = Field(min_length=1)
    model: ChatCompletionModel = ChatCompletionModel.GPT_3_5_TURBO
    frequency_penalty: float | None = Field(default=None, ge=-2.0, le=2.0)
    max_tokens: int | None = Field(default=None, ge=1)
    n: int | None = Field(default=None, ge=1)
    presence_penalty: float | None = Field(default=None, ge=-2.0, le=2.0)
    response_format: ChatResponseFormat | None = None
    seed: int | None = None
    stop: str | list[str] | None = None
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)
    tools: list[Tool] | None = None
    tool_choice: ToolChoiceMode | NamedToolChoice | None = None
    user: str | None = None

    @classmethod
    def new(
        cls,
        model: ChatCompletionModel,
        messages: list[ChatCompletionMessage],
    ) -> "ChatCompletionRequest":
        return cls.builder().model(model).messages(messages).build()

    @classmethod
    def new_with_tools(
        cls,
        model: ChatCompletionModel,
        messages: list[ChatCompletionMessage],
        tools: list[Tool],
    ) -> "ChatCompletionRequest":
        return cls.builder().model(model).messages(messages).tools(tools).build()

    def into_request(self, base_url: str, client: httpx.AsyncClient) -> httpx.Request:
        return self._json_request(base_url, client, "/chat/completions")


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class ChatResponseMessage(BaseModel):
    role: str = "assistant"
    content: str | None = None
    tool_calls: list[ToolCall] | None = None


class ChatCompletionChoice(BaseModel):
    index: int
    message: ChatResponseMessage
    # Unknown reasons are kept as plain strings
    finish_reason: FinishReason | str | None = Field(
        default=None, union_mode="left_to_right"
    )


class ChatCompletionUsage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletionResponse(BaseModel):
    id: str
    object: str = "chat.completion"
    created: int
    model: str
    system_fingerprint: str | None = None
    choices: list[ChatCompletionChoice]
    usage: ChatCompletionUsage

    @property
    def content(self) -> str | None:
        """Text of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].message.content
