# src/llm_sdk/api/create_image.py

from enum import Enum

import httpx
from pydantic import BaseModel, Field

from llm_sdk.builder import WireModel


class ImageModel(str, Enum):
    DALL_E_3 = "dall-e-3"


class ImageQuality(str, Enum):
    STANDARD = "standard"
    HD = "hd"


class ImageResponseFormat(str, Enum):
    URL = "url"
    B64_JSON = "b64_json"


class ImageSize(str, Enum):
    LARGE = "1024x1024"
    LARGE_WIDE = "1792x1024"
    LARGE_TALL = "1024x1792"


class ImageStyle(str, Enum):
    VIVID = "vivid"
    NATURAL = "natural"


class CreateImageRequest(WireModel):
    """Image generation request. Only dall-e-3 is supported."""

    # Max 4000 characters for dall-e-3
    prompt: str = Field(min_length=1)
    model: ImageModel = ImageModel.DALL_E_3
    # dall-e-3 only supports n=1
    n: int | None = Field(default=None, ge=1, le=10)
    quality: ImageQuality | None = None
    response_format: ImageResponseFormat | None = None
    size: ImageSize | None = None
    style: ImageStyle | None = None
    # End-user id, helps the provider detect abuse
    user: str | None = None

    @classmethod
    def new(cls, prompt: str) -> "CreateImageRequest":
        return cls.builder().prompt(prompt).build()

    def into_request(self, base_url: str, client: httpx.AsyncClient) -> httpx.Request:
        return self._json_request(base_url, client, "/images/generations")


class ImageObject(BaseModel):
    # Set when response_format is b64_json
    b64_json: str | None = None
    # Set when response_format is url (the default)
    url: str | None = None
    # Present when the API revised the prompt
    revised_prompt: str | None = None


class CreateImageResponse(BaseModel):
    created: int
    data: list[ImageObject]
