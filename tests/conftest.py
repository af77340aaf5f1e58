"""Shared fixtures for chaincode_builder tests."""

import pytest

from chaincode_builder.codegen.core.schema import BlockInstance, Field, FieldType
from chaincode_builder.codegen.languages.go import ChaincodeGenerator
from chaincode_builder.project import ChaincodeProject, default_fields


@pytest.fixture
def generator():
    """Go chaincode generator with default configuration."""
    return ChaincodeGenerator()


@pytest.fixture
def item_fields():
    return [
        Field("ID", FieldType.STRING, "id"),
        Field("Value", FieldType.INTEGER, "value"),
    ]


@pytest.fixture
def asset_fields():
    """The schema a new project starts with."""
    return default_fields()


@pytest.fixture
def all_type_fields():
    """One field of every type, plus a tag the generator does not know."""
    return [
        Field("ID", FieldType.STRING, "id"),
        Field("Count", FieldType.INTEGER, "count"),
        Field("Price", FieldType.FLOAT, "price"),
        Field("Active", FieldType.BOOLEAN, "active"),
        Field("Tags", FieldType.STRING_LIST, "tags"),
        Field("Labels", FieldType.STRING_MAP, "labels"),
        Field.from_tag("Extra", "uint64", "extra"),
    ]


def block(instance_id, kind_tag, name=None):
    return BlockInstance(instance_id=instance_id, kind_tag=kind_tag, name=name)


@pytest.fixture
def make_block():
    return block


@pytest.fixture
def sample_project():
    project = ChaincodeProject(name="AssetTransfer", version="2.1")
    for block_id in ("init", "createAsset", "readAsset", "updateAsset", "deleteAsset"):
        project = project.add_block(block_id)
    return project
