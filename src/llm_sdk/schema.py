# src/llm_sdk/schema.py

"""JSON Schema export for tool parameters.

If you have a function that you want the model to call, put all of its
params into a pydantic model and pass that model to ``to_schema`` (or
derive from ``ToSchema`` and call ``YourModel.to_schema()``).

This is infrastructure, not behavior. Pure data transformation.
"""

from typing import Any

from pydantic import BaseModel

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def to_schema(model_type: type[BaseModel]) -> dict[str, Any]:
    """Return the JSON Schema describing ``model_type``.

    Args:
        model_type: A pydantic model class.

    Returns:
        A fresh dict on every call, with the ``$schema`` dialect marker
        first and the model's ``title``, ``type``, ``properties`` etc.

    Raises:
        TypeError: If ``model_type`` is not a pydantic model class.
    """
    if not (isinstance(model_type, type) and issubclass(model_type, BaseModel)):
        raise TypeError(f"Expected a pydantic model class, got {model_type!r}")

    return {"$schema": JSON_SCHEMA_DIALECT, **model_type.model_json_schema()}


class ToSchema(BaseModel):
    """Mixin for parameter models that can describe themselves."""

    @classmethod
    def to_schema(cls) -> dict[str, Any]:
        return to_schema(cls)
