# src/llm_sdk/api/speech.py

from enum import Enum

import httpx
from pydantic import Field

from llm_sdk.builder import WireModel


class SpeechModel(str, Enum):
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"


class SpeechVoice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class SpeechResponseFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"


class SpeechRequest(WireModel):
    """Text-to-speech request. The response is the raw audio bytes."""

    model: SpeechModel = SpeechModel.TTS_1
    # Max 4096 characters
    input: str = Field(min_length=1)
    voice: SpeechVoice = SpeechVoice.NOVA
    response_format: SpeechResponseFormat = SpeechResponseFormat.MP3
    speed: float | None = Field(default=None, ge=0.25, le=4.0)

    @classmethod
    def new(cls, input: str) -> "SpeechRequest":
        return cls.builder().input(input).build()

    def into_request(self, base_url: str, client: httpx.AsyncClient) -> httpx.Request:
        return self._json_request(base_url, client, "/audio/speech")
