from .chat_completion import (
    AssistantMessage,
    ChatCompletionChoice,
    ChatCompletionMessage,
    ChatCompletionModel,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatCompletionUsage,
    ChatResponseFormat,
    ChatResponseFormatType,
    ChatResponseMessage,
    FinishReason,
    FunctionCall,
    FunctionDefinition,
    NamedToolChoice,
    SystemMessage,
    Tool,
    ToolCall,
    ToolChoiceMode,
    ToolMessage,
    UserMessage,
)
from .create_image import (
    CreateImageRequest,
    CreateImageResponse,
    ImageModel,
    ImageObject,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
)
from .embedding import (
    EmbeddingData,
    EmbeddingEncodingFormat,
    EmbeddingInput,
    EmbeddingModel,
    EmbeddingRequest,
    EmbeddingResponse,
    EmbeddingUsage,
)
from .speech import SpeechModel, SpeechRequest, SpeechResponseFormat, SpeechVoice
from .whisper import (
    WhisperModel,
    WhisperRequest,
    WhisperRequestType,
    WhisperResponse,
    WhisperResponseFormat,
)

__all__ = [
    # Chat completion
    "AssistantMessage",
    "ChatCompletionChoice",
    "ChatCompletionMessage",
    "ChatCompletionModel",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionUsage",
    "ChatResponseFormat",
    "ChatResponseFormatType",
    "ChatResponseMessage",
    "FinishReason",
    "FunctionCall",
    "FunctionDefinition",
    "NamedToolChoice",
    "SystemMessage",
    "Tool",
    "ToolCall",
    "ToolChoiceMode",
    "ToolMessage",
    "UserMessage",
    # Image generation
    "CreateImageRequest",
    "CreateImageResponse",
    "ImageModel",
    "ImageObject",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    # Embeddings
    "EmbeddingData",
    "EmbeddingEncodingFormat",
    "EmbeddingInput",
    "EmbeddingModel",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EmbeddingUsage",
    # Speech
    "SpeechModel",
    "SpeechRequest",
    "SpeechResponseFormat",
    "SpeechVoice",
    # Whisper
    "WhisperModel",
    "WhisperRequest",
    "WhisperRequestType",
    "WhisperResponse",
    "WhisperResponseFormat",
]
