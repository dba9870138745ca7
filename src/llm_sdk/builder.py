# src/llm_sdk/builder.py

"""Request value base class, builder and HTTP adapter protocol.

Request values are frozen pydantic models. Optional fields default to
``None`` and never reach the wire; fields with a real default are always
sent. Builders collect field values and validate once, in ``build()``.
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import RequestValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="WireModel")


class IntoRequest(Protocol):
    """Anything that can turn itself into an outbound HTTP request."""

    def into_request(self, base_url: str, client: httpx.AsyncClient) -> httpx.Request:
        """Build the request for ``{base_url}/<operation-path>``.

        Auth, user-agent and timeout are applied later by the client.
        """
        ...


class WireModel(BaseModel):
    """Base for request values.

    Immutable. Unknown fields rejected. ``None`` means "let the API decide".
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def builder(cls: type[ModelT]) -> "RequestBuilder[ModelT]":
        return RequestBuilder(cls)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready payload: enum wire strings, unset optionals omitted."""
        return self.model_dump(mode="json", exclude_none=True)

    def _json_request(
        self, base_url: str, client: httpx.AsyncClient, path: str
    ) -> httpx.Request:
        return client.build_request("POST", f"{base_url}{path}", json=self.to_wire())


class RequestBuilder(Generic[ModelT]):
    """Mutable builder for a request value.

    Every model field gets a chainable setter of the same name:

        >>> req = (
        ...     CreateImageRequest.builder()
        ...     .prompt("draw a cute caterpillar")
        ...     .quality(ImageQuality.HD)
        ...     .build()
        ... )
    """

    def __init__(self, model_type: type[ModelT]) -> None:
        self._model_type = model_type
        self._values: dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], "RequestBuilder[ModelT]"]:
        if name.startswith("_"):
            raise AttributeError(name)
        if name not in self._model_type.model_fields:
            raise AttributeError(
                f"{type(self).__name__} for {self._model_type.__name__} "
                f"has no field '{name}'"
            )

        def setter(value: Any) -> "RequestBuilder[ModelT]":
            self._values[name] = value
            return self

        return setter

    def missing_fields(self) -> list[str]:
        return sorted(
            name
            for name, field in self._model_type.model_fields.items()
            if field.is_required() and name not in self._values
        )

    def build(self) -> ModelT:
        """Validate and create the request value.

        Raises:
            RequestValidationError: If required fields are unset or any
                value is rejected (bad enum value, out of range, empty).
        """
        type_name = self._model_type.__name__
        missing = self.missing_fields()
        if missing:
            logger.debug("Cannot build %s, missing: %s", type_name, missing)
            raise RequestValidationError(
                f"{type_name} missing required fields: {', '.join(missing)}",
                missing=missing,
            )

        try:
            return self._model_type(**self._values)
        except ValidationError as exc:
            raise RequestValidationError(f"Invalid {type_name}: {exc}") from exc
