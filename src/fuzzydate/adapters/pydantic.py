"""Pydantic integration: fuzzy dates travel through JSON as canonical strings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Final

from pydantic_core import core_schema

from fuzzydate.domain.fuzzy_date import FuzzyDate

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

# ECMA-compatible variant of the parser grammar, published in JSON schemas.
FUZZY_DATE_JSON_PATTERN: Final[str] = r"^([0-9]{3}[0-9?]|\?{4})\.([0-9]{2}|\?\?)\.([0-9]{2}|\?\?)$"


def _serialize(value: FuzzyDate) -> str:
    return value.canonical


class _FuzzyDatePydanticAnnotation:
    """Validate canonical strings (or ready ``FuzzyDate`` values); every dump writes the string.

    Malformed or impossible dates raise ``FuzzyDateError`` (a ``ValueError``) inside the
    validator, which pydantic reports as a ``ValidationError`` for the enclosing model.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,  # noqa: ANN401
        _handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        from_string = core_schema.no_info_after_validator_function(
            FuzzyDate.parse,
            core_schema.str_schema(),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_string,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(FuzzyDate), from_string]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize,
                when_used="always",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema(pattern=FUZZY_DATE_JSON_PATTERN))


PydanticFuzzyDate = Annotated[FuzzyDate, _FuzzyDatePydanticAnnotation]


__all__ = ["FUZZY_DATE_JSON_PATTERN", "PydanticFuzzyDate"]
