"""Tests for generate_code: validation warnings, metadata and failures."""

import pytest

from chaincode_builder.codegen import GenerationResult, generate_code
from chaincode_builder.codegen.core.schema import Field, FieldType
from chaincode_builder.codegen.languages.go import ChaincodeGenerator


class ExplodingGenerator(ChaincodeGenerator):
    def generate(self, name, version, blocks, block_props, fields):
        raise RuntimeError("boom")


def run(generator, blocks, props=None, fields=None):
    return generate_code(generator, "CC", "1.0", blocks, props or {}, fields or [])


def test_successful_result(generator, make_block, asset_fields):
    blocks = [make_block("c1", "createAsset"), make_block("e1", "emitEvent")]
    result = run(generator, blocks, {"c1": {"assetType": "Car"}}, asset_fields)

    assert result.success
    assert "func (s *SmartContract) CreateCar(" in result.code
    assert result.metadata == {
        "language": "go",
        "file_extension": ".go",
        "chaincode_name": "CC",
        "chaincode_version": "1.0",
        "asset_type": "Car",
        "block_count": 2,
        "field_count": 4,
        "unknown_blocks": 1,
        "has_key_field": True,
    }


def test_clean_input_has_no_warnings(generator, make_block, asset_fields):
    result = run(generator, [make_block("i1", "init"), make_block("c1", "createAsset")], fields=asset_fields)
    assert result.warnings == []


def test_formatting_collapses_blank_lines(generator, make_block):
    result = run(generator, [make_block("e1", "emitEvent"), make_block("e2", "emitEvent")])
    assert "\n\n\n\n" not in result.code
    assert all(line == line.rstrip() for line in result.code.splitlines())


@pytest.mark.parametrize(
    "fields, blocks, expected",
    [
        ([], [("c1", "createRecord")], "Asset schema has no fields"),
        (
            [Field("Name", FieldType.STRING, "name")],
            [("c1", "createRecord")],
            "No identifying field",
        ),
        (
            [Field("ID", FieldType.STRING, "id"), Field.from_tag("Size", "uint8", "size")],
            [("c1", "createRecord")],
            "Unknown type 'uint8' for field Size",
        ),
        (
            [Field("ID", FieldType.STRING, "id"), Field("Kind", FieldType.STRING, "type")],
            [("c1", "createRecord")],
            "Parameter 'type' for field Kind is a reserved word",
        ),
        (
            [Field("ID", FieldType.STRING, "id"), Field("Note", FieldType.STRING, "my-note")],
            [("c1", "createRecord")],
            "Parameter 'my-note' for field Note is not a valid identifier",
        ),
        (
            [Field("ID", FieldType.STRING, "id"), Field("secret", FieldType.STRING, "secret")],
            [("c1", "createRecord")],
            "Field secret is not exported",
        ),
        (
            [Field("ID", FieldType.STRING, "id")],
            [("c1", "createRecord"), ("c1", "readRecord")],
            "Duplicate block instance id: c1",
        ),
        (
            [Field("ID", FieldType.STRING, "id")],
            [("c1", "createRecord"), ("c2", "createRecord")],
            "Function CreateAsset is declared 2 times",
        ),
        (
            [Field("ID", FieldType.STRING, "id")],
            [("g1", "getCreator")],
            "Block 'getCreator' (getCreator) has no generator",
        ),
    ],
)
def test_validation_warnings(generator, make_block, fields, blocks, expected):
    result = run(generator, [make_block(*b) for b in blocks], fields=fields)

    assert result.success
    assert any(expected in warning for warning in result.warnings), result.warnings


def test_bad_asset_type_warns(generator, make_block, asset_fields):
    result = run(
        generator, [make_block("c1", "createRecord")], {"c1": {"assetType": "My Asset"}}, asset_fields
    )
    assert "Asset type 'My Asset' is not a valid identifier" in result.warnings


def test_no_key_field_generation_completes(generator, make_block):
    fields = [Field("Name", FieldType.STRING, "name")]
    result = run(generator, [make_block("u1", "updateRecord")], fields=fields)

    assert result.success
    assert result.metadata["has_key_field"] is False
    assert "s.AssetExists(ctx, id)" in result.code


@pytest.mark.parametrize(
    "tags",
    [["init"], ["query"], ["init", "query"]],
)
def test_keyless_sequences_do_not_warn_about_key(generator, make_block, tags):
    fields = [Field("Name", FieldType.STRING, "name")]
    blocks = [make_block(f"b{i}", tag) for i, tag in enumerate(tags)]
    result = run(generator, blocks, fields=fields)

    assert not any("No identifying field" in warning for warning in result.warnings)


def test_init_with_create_warns_about_key(generator, make_block):
    fields = [Field("Name", FieldType.STRING, "name")]
    result = run(generator, [make_block("i1", "init"), make_block("c1", "createRecord")], fields=fields)
    assert any("No identifying field" in warning for warning in result.warnings)


def test_header_keeps_name_and_version_verbatim(generator):
    result = generate_code(generator, "CC", "1.0 ", [], {}, [])
    assert result.code.startswith("// Generated Chaincode: CC v1.0 \npackage main\n")


def test_warnings_are_logged(generator, make_block, caplog):
    run(generator, [make_block("c1", "createRecord")])
    assert "Asset schema has no fields" in caplog.text


def test_failure_becomes_error_result(make_block):
    result = run(ExplodingGenerator(), [make_block("i1", "init")])

    assert not result.success
    assert result.code == ""
    assert "boom" in result.error_message
    assert isinstance(result.exception, RuntimeError)


def test_error_constructor():
    result = GenerationResult.error("nope")
    assert not result.success
    assert result.error_message == "nope"
    assert result.warnings == []
