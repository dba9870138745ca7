# src/llm_sdk/api/whisper.py

from enum import Enum

import httpx
from pydantic import BaseModel, Field

from llm_sdk.builder import WireModel

FILE_NAME = "file.mp3"
FILE_MIME_TYPE = "audio/mp3"


class WhisperModel(str, Enum):
    WHISPER_1 = "whisper-1"


class WhisperResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


class WhisperRequestType(str, Enum):
    TRANSCRIPTION = "transcription"
    TRANSLATION = "translation"


class WhisperRequest(WireModel):
    """Speech-to-text request, sent as a multipart form.

    ``request_type`` picks the endpoint and is never sent. ``language`` only
    applies to transcription; it is dropped from translation forms.
    """

    # Audio bytes in one of: flac, mp3, mp4, mpeg, mpga, m4a, ogg, wav, webm
    file: bytes = Field(min_length=1, repr=False)
    model: WhisperModel = WhisperModel.WHISPER_1
    # ISO-639-1
    language: str | None = None
    # Should match the audio language for transcription, English for translation
    prompt: str | None = None
    response_format: WhisperResponseFormat = WhisperResponseFormat.JSON
    temperature: float | None = Field(default=None, ge=0.0, le=1.0)
    request_type: WhisperRequestType

    @classmethod
    def transcription(cls, data: bytes) -> "WhisperRequest":
        return (
            cls.builder()
            .file(data)
            .request_type(WhisperRequestType.TRANSCRIPTION)
            .build()
        )

    @classmethod
    def translation(cls, data: bytes) -> "WhisperRequest":
        return (
            cls.builder().file(data).request_type(WhisperRequestType.TRANSLATION).build()
        )

    @property
    def path(self) -> str:
        if self.request_type is WhisperRequestType.TRANSCRIPTION:
            return "/audio/transcriptions"
        return "/audio/translations"

    def form_fields(self) -> dict[str, str]:
        """Text parts of the multipart form, in wire order."""
        fields = {
            "model": self.model.value,
            "response_format": self.response_format.value,
        }
        if (
            self.request_type is WhisperRequestType.TRANSCRIPTION
            and self.language is not None
        ):
            fields["language"] = self.language
        if self.prompt is not None:
            fields["prompt"] = self.prompt
        if self.temperature is not None:
            fields["temperature"] = str(self.temperature)
        return fields

    def to_wire(self) -> dict[str, str]:
        """Text fields only; the audio travels as a separate file part."""
        return self.form_fields()

    def into_request(self, base_url: str, client: httpx.AsyncClient) -> httpx.Request:
        return client.build_request(
            "POST",
            f"{base_url}{self.path}",
            data=self.form_fields(),
            files={"file": (FILE_NAME, self.file, FILE_MIME_TYPE)},
        )


class WhisperResponse(BaseModel):
    text: str
