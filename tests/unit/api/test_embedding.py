# tests/unit/api/test_embedding.py

import json

import httpx
import pytest

from llm_sdk.api.embedding import (
    EmbeddingEncodingFormat,
    EmbeddingRequest,
    EmbeddingResponse,
)
from llm_sdk.errors import RequestValidationError


def test_new_with_single_text() -> None:
    req = EmbeddingRequest.new("Hello, my dog is cute.")

    assert req.to_wire() == {
        "input": "Hello, my dog is cute.",
        "model": "text-embedding-ada-002",
    }


def test_new_array_serializes_list() -> None:
    req = EmbeddingRequest.new_array(["a", "b"])
    assert req.to_wire()["input"] == ["a", "b"]


def test_encoding_format_wire_value() -> None:
    req = (
        EmbeddingRequest.builder()
        .input("hi")
        .encoding_format(EmbeddingEncodingFormat.BASE64)
        .build()
    )
    assert req.to_wire()["encoding_format"] == "base64"


@pytest.mark.parametrize("value", ["", [], ["ok", ""]])
def test_empty_input_rejected(value: str | list[str]) -> None:
    with pytest.raises(RequestValidationError):
        EmbeddingRequest.new(value)


def test_into_request_posts_json() -> None:
    request = EmbeddingRequest.new("hi").into_request(
        "https://api.test/v1", httpx.AsyncClient()
    )

    assert str(request.url) == "https://api.test/v1/embeddings"
    assert json.loads(request.content)["input"] == "hi"


def test_response_parses() -> None:
    body = {
        "object": "list",
        "data": [{"object": "embedding", "index": 0, "embedding": [0.1, 0.2]}],
        "model": "text-embedding-ada-002",
        "usage": {"prompt_tokens": 5, "total_tokens": 5},
    }

    res = EmbeddingResponse.model_validate(body)

    assert res.data[0].embedding == [0.1, 0.2]
    assert res.usage.total_tokens == 5
