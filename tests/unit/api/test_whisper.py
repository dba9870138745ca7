# tests/unit/api/test_whisper.py

import httpx
import pytest

from llm_sdk.api.whisper import (
    WhisperRequest,
    WhisperRequestType,
    WhisperResponseFormat,
)
from llm_sdk.errors import RequestValidationError

AUDIO = b"ID3\x00fake-mp3-bytes"


def _body(request: httpx.Request) -> bytes:
    return request.read()


class TestWhisperForm:
    def test_transcription_defaults(self) -> None:
        req = WhisperRequest.transcription(AUDIO)

        assert req.request_type is WhisperRequestType.TRANSCRIPTION
        assert req.form_fields() == {"model": "whisper-1", "response_format": "json"}

    def test_transcription_includes_language(self) -> None:
        req = (
            WhisperRequest.builder()
            .file(AUDIO)
            .language("de")
            .request_type(WhisperRequestType.TRANSCRIPTION)
            .build()
        )
        assert req.form_fields()["language"] == "de"

    def test_translation_never_includes_language(self) -> None:
        req = (
            WhisperRequest.builder()
            .file(AUDIO)
            .language("de")
            .request_type(WhisperRequestType.TRANSLATION)
            .build()
        )

        assert "language" not in req.form_fields()
        request = req.into_request("https://api.test/v1", httpx.AsyncClient())
        assert b'name="language"' not in _body(request)

    def test_optional_prompt_and_temperature(self) -> None:
        req = (
            WhisperRequest.builder()
            .file(AUDIO)
            .prompt("Hello.")
            .temperature(0.2)
            .response_format(WhisperResponseFormat.VERBOSE_JSON)
            .request_type(WhisperRequestType.TRANSCRIPTION)
            .build()
        )

        assert req.form_fields() == {
            "model": "whisper-1",
            "response_format": "verbose_json",
            "prompt": "Hello.",
            "temperature": "0.2",
        }

    def test_missing_file_and_type_fails(self) -> None:
        with pytest.raises(RequestValidationError) as exc_info:
            WhisperRequest.builder().language("en").build()

        assert exc_info.value.missing == ["file", "request_type"]

    def test_temperature_out_of_range_rejected(self) -> None:
        with pytest.raises(RequestValidationError):
            WhisperRequest.builder().file(AUDIO).temperature(1.5).request_type(
                WhisperRequestType.TRANSCRIPTION
            ).build()


class TestWhisperIntoRequest:
    def test_transcription_path_and_file_part(self) -> None:
        req = WhisperRequest.transcription(AUDIO)

        request = req.into_request("https://api.test/v1", httpx.AsyncClient())
        body = _body(request)

        assert str(request.url) == "https://api.test/v1/audio/transcriptions"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="file"; filename="file.mp3"' in body
        assert b"Content-Type: audio/mp3" in body
        assert AUDIO in body
        assert b'name="model"' in body

    def test_translation_path(self) -> None:
        req = WhisperRequest.translation(AUDIO)

        request = req.into_request("https://api.test/v1", httpx.AsyncClient())

        assert str(request.url) == "https://api.test/v1/audio/translations"

    def test_to_wire_accepts_binary_audio(self) -> None:
        audio = b"\xff\xfb\x90\x00\x80mp3-frame"
        req = WhisperRequest.transcription(audio)

        assert req.to_wire() == {"model": "whisper-1", "response_format": "json"}
        request = req.into_request("https://api.test/v1", httpx.AsyncClient())
        assert audio in _body(request)
