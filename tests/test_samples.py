"""Tests for InitLedger sample values."""

import pytest

from chaincode_builder.codegen.core.schema import Field, FieldType
from chaincode_builder.codegen.languages.go import synthesize_sample_value


def samples(field, count=3):
    return [synthesize_sample_value(field, index) for index in range(1, count + 1)]


def test_booleans_alternate_starting_false():
    assert samples(Field("Active", FieldType.BOOLEAN, "active")) == ["false", "true", "false"]


def test_integers_step_by_hundred():
    assert samples(Field("Value", FieldType.INTEGER, "value")) == ["100", "200", "300"]


def test_floats_step_by_ten_and_a_half():
    assert samples(Field("Price", FieldType.FLOAT, "price")) == ["10.5", "21", "31.5"]


@pytest.mark.parametrize(
    "field, expected",
    [
        (Field("ID", FieldType.STRING, "id"), '"asset2"'),
        (Field("Key", FieldType.STRING, "Id"), '"asset2"'),
        (Field("Owner", FieldType.STRING, "owner"), '"User2"'),
        (Field("Holder", FieldType.STRING, "owner"), '"User2"'),
        (Field("Description", FieldType.STRING, "description"), '"Sample Description 2"'),
    ],
)
def test_string_roles(field, expected):
    assert synthesize_sample_value(field, 2) == expected


def test_collections():
    assert synthesize_sample_value(Field("Tags", FieldType.STRING_LIST, "tags"), 1) == (
        '[]string{"item1-1", "item1-2"}'
    )
    assert synthesize_sample_value(Field("Labels", FieldType.STRING_MAP, "labels"), 3) == (
        'map[string]string{"key3": "value3"}'
    )


def test_unknown_type_uses_generic_string():
    field = Field.from_tag("Extra", "uint64", "extra")
    assert synthesize_sample_value(field, 1) == '"Extra1"'


def test_deterministic():
    field = Field("Description", FieldType.STRING, "description")
    assert samples(field) == samples(field)
