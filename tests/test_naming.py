"""Tests for identifier derivation and field role inference."""

from chaincode_builder.codegen.core.naming import (
    find_key_field,
    is_owner_field,
    key_member_name,
    key_param_name,
    lowercased_noun,
    param_name,
    plural_collection_name,
    var_name,
)
from chaincode_builder.codegen.core.schema import Field, FieldType
from chaincode_builder.codegen.languages.go import create_go_name_checker


def test_identifier_derivation():
    assert var_name("CarPart") == "carPart"
    assert plural_collection_name("Item") == "items"
    assert lowercased_noun("CarPart") == "carpart"


def test_param_name_is_lowercased_tag():
    assert param_name(Field("AppraisedValue", FieldType.INTEGER, "appraisedValue")) == (
        "appraisedvalue"
    )


def test_key_field_matches_name_or_tag_case_insensitively():
    by_tag = Field("Key", FieldType.STRING, "ID")
    by_name = Field("Id", FieldType.STRING, "identifier")
    other = Field("Name", FieldType.STRING, "name")

    assert find_key_field([other, by_tag, by_name]) is by_tag
    assert find_key_field([other, by_name]) is by_name
    assert find_key_field([other]) is None


def test_key_fallbacks_without_identifying_field():
    fields = [Field("Name", FieldType.STRING, "name")]
    assert key_param_name(fields) == "id"
    assert key_member_name(fields) == "ID"


def test_key_names_from_identifying_field():
    fields = [Field("AssetID", FieldType.STRING, "id")]
    assert key_param_name(fields) == "id"
    assert key_member_name(fields) == "AssetID"


def test_owner_detection():
    assert is_owner_field(Field("Owner", FieldType.STRING, "holder"))
    assert is_owner_field(Field("Holder", FieldType.STRING, "OWNER"))
    assert not is_owner_field(Field("Owners", FieldType.STRING, "owners"))


def test_go_name_checker():
    checker = create_go_name_checker()
    assert checker.problem("value") is None
    assert checker.problem("type") == "is a reserved word"
    assert checker.problem("err") == "shadows a builtin"
    assert checker.problem("my-field") == "is not a valid identifier"
    assert checker.problem("") == "is empty"
    assert checker.is_safe("owner")
