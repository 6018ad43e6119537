from __future__ import annotations

import json

import pytest
from pydantic import BaseModel, ValidationError

from fuzzydate.adapters.pydantic import FUZZY_DATE_JSON_PATTERN, PydanticFuzzyDate
from fuzzydate.domain import FuzzyDate


class PersonRecord(BaseModel):
    name: str
    born: PydanticFuzzyDate
    died: PydanticFuzzyDate | None = None


def test_model_parses_canonical_strings() -> None:
    record = PersonRecord.model_validate({"name": "Anna", "born": "1990.05.??"})

    assert record.born == FuzzyDate(1990, 5)
    assert record.died is None


def test_model_parses_json_payload() -> None:
    record = PersonRecord.model_validate_json(
        '{"name": "Ivan", "born": "188?.??.??", "died": "1950.03.08"}'
    )

    assert record.born.is_decade is True
    assert record.born.year == 1880
    assert record.died == FuzzyDate(1950, 3, 8)


def test_model_accepts_fuzzy_date_instances() -> None:
    born = FuzzyDate(month=2, day=29)

    record = PersonRecord(name="Olga", born=born)

    assert record.born is born


def test_model_dumps_canonical_strings_to_json() -> None:
    record = PersonRecord(name="Anna", born=FuzzyDate(2000, 5, 15))

    payload = json.loads(record.model_dump_json())

    assert payload == {"name": "Anna", "born": "2000.05.15", "died": None}


def test_python_dump_writes_canonical_strings() -> None:
    record = PersonRecord(name="Anna", born=FuzzyDate(1990, is_decade=True))

    assert record.model_dump() == {"name": "Anna", "born": "199?.??.??", "died": None}


def test_python_dump_round_trip() -> None:
    record = PersonRecord(name="Anna", born=FuzzyDate(1990, is_decade=True), died=FuzzyDate(2001))

    restored = PersonRecord.model_validate(record.model_dump())

    assert restored == record
    assert restored.born.is_decade is True


def test_json_round_trip() -> None:
    record = PersonRecord(name="Anna", born=FuzzyDate(1990, is_decade=True), died=FuzzyDate(2001))

    restored = PersonRecord.model_validate_json(record.model_dump_json())

    assert restored == record


@pytest.mark.parametrize("raw", ["2020-01-01", "2001.02.29", "????.??.??", "", 19900501])
def test_model_rejects_invalid_dates(raw: object) -> None:
    with pytest.raises(ValidationError):
        PersonRecord.model_validate({"name": "Anna", "born": raw})


def test_json_schema_describes_canonical_string() -> None:
    schema = PersonRecord.model_json_schema()

    born = schema["properties"]["born"]
    assert born["type"] == "string"
    assert born["pattern"] == FUZZY_DATE_JSON_PATTERN
