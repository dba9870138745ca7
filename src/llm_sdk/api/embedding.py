# src/llm_sdk/api/embedding.py

from enum import Enum

import httpx
from pydantic import BaseModel, field_validator

from llm_sdk.builder import WireModel

# Token arrays are not supported, only text
EmbeddingInput = str | list[str]


class EmbeddingModel(str, Enum):
    TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"


class EmbeddingEncodingFormat(str, Enum):
    FLOAT = "float"
    BASE64 = "base64"


class EmbeddingRequest(WireModel):
    """Embedding request for one text or a batch of texts.

    The input must not be empty and must fit the model's context
    (8192 tokens for text-embedding-ada-002); batches hold at most 2048 texts.
    """

    input: EmbeddingInput
    model: EmbeddingModel = EmbeddingModel.TEXT_EMBEDDING_ADA_002
    encoding_format: EmbeddingEncodingFormat | None = None
    user: str | None = None

    @field_validator("input")
    @classmethod
    def _input_not_empty(cls, value: EmbeddingInput) -> EmbeddingInput:
        texts = [value] if isinstance(value, str) else value
        if not texts or any(not text for text in texts):
            raise ValueError("input must not be empty")
        return value

    @classmethod
    def new(cls, input: EmbeddingInput) -> "EmbeddingRequest":
        return cls.builder().input(input).build()

    @classmethod
    def new_array(cls, input: list[str]) -> "EmbeddingRequest":
        return cls.builder().input(list(input)).build()

    def into_request(self, base_url: str, client: httpx.AsyncClient) -> httpx.Request:
        return self._json_request(base_url, client, "/embeddings")


class EmbeddingUsage(BaseModel):
    prompt_tokens: int
    total_tokens: int


class EmbeddingData(BaseModel):
    index: int
    # A base64 string when encoding_format is base64
    embedding: list[float] | str
    object: str = "embedding"


class EmbeddingResponse(BaseModel):
    object: str
    data: list[EmbeddingData]
    model: str
    usage: EmbeddingUsage
