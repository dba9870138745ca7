# tests/unit/schema/test_schema.py

import pytest
from pydantic import BaseModel, Field

from llm_sdk.schema import JSON_SCHEMA_DIALECT, ToSchema, to_schema


class SearchInput(BaseModel):
    """Search for documents."""

    query: str = Field(description="The search query")
    limit: int = Field(default=10, description="Max results")


class WeatherParams(ToSchema):
    city: str


class TestToSchema:
    def test_object_schema(self) -> None:
        schema = to_schema(SearchInput)

        assert schema["$schema"] == JSON_SCHEMA_DIALECT
        assert schema["type"] == "object"
        assert schema["title"] == "SearchInput"
        assert set(schema["properties"]) == {"query", "limit"}
        assert schema["required"] == ["query"]

    def test_schema_includes_field_descriptions(self) -> None:
        query_prop = to_schema(SearchInput)["properties"]["query"]
        assert query_prop.get("description") == "The search query"

    def test_each_call_returns_fresh_dict(self) -> None:
        first = to_schema(SearchInput)
        first["properties"].clear()

        assert "query" in to_schema(SearchInput)["properties"]

    def test_mixin(self) -> None:
        schema = WeatherParams.to_schema()

        assert schema["properties"]["city"]["type"] == "string"
        assert schema == to_schema(WeatherParams)

    def test_rejects_non_model(self) -> None:
        with pytest.raises(TypeError):
            to_schema(dict)  # type: ignore[arg-type]

    def test_dialect_matches_defs_layout(self) -> None:
        class Location(BaseModel):
            city: str

        class Trip(BaseModel):
            origin: Location
            destination: Location

        schema = to_schema(Trip)

        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert "Location" in schema["$defs"]
        assert schema["properties"]["origin"]["$ref"] == "#/$defs/Location"
