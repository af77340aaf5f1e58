"""
Core schema representation for chaincode generation.

Holds the asset field schema and the placed operation blocks in a
normalized form that the language generators work with consistently.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, List, Mapping, Optional
from enum import Enum


class FieldType(Enum):
    """Field types an asset record can declare."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING_LIST = "stringList"
    STRING_MAP = "stringMap"
    UNKNOWN = "unknown"  # Anything outside the closed set

    @classmethod
    def from_tag(cls, tag: str) -> "FieldType":
        """
        Parse a type tag.

        Accepts the canonical tag names as well as the Go spellings
        stored by the block editor (``int``, ``float64``, ``[]string`` ...).

        Args:
            tag: Type tag as found in a project file

        Returns:
            Matching FieldType, or FieldType.UNKNOWN
        """
        if isinstance(tag, FieldType):
            return tag
        return _TYPE_TAGS.get(str(tag).strip(), cls.UNKNOWN)


_TYPE_TAGS = {
    "string": FieldType.STRING,
    "integer": FieldType.INTEGER,
    "int": FieldType.INTEGER,
    "float": FieldType.FLOAT,
    "float64": FieldType.FLOAT,
    "boolean": FieldType.BOOLEAN,
    "bool": FieldType.BOOLEAN,
    "stringList": FieldType.STRING_LIST,
    "[]string": FieldType.STRING_LIST,
    "stringMap": FieldType.STRING_MAP,
    "map[string]string": FieldType.STRING_MAP,
}


@dataclass(frozen=True)
class Field:
    """A single field of the asset record."""

    name: str
    type: FieldType
    serialized_name: str  # JSON tag used on the ledger
    raw_type: Optional[str] = dataclass_field(default=None, compare=False)  # Tag as written

    @classmethod
    def from_tag(cls, name: str, type_tag: str, serialized_name: str) -> "Field":
        """Build a field from a raw type tag, remembering the tag as written."""
        return cls(
            name=name,
            type=FieldType.from_tag(type_tag),
            serialized_name=serialized_name,
            raw_type=str(type_tag),
        )


class BlockKind(Enum):
    """Operation kinds the generator knows how to emit."""

    INIT = "init"
    CREATE_RECORD = "createRecord"
    READ_RECORD = "readRecord"
    UPDATE_RECORD = "updateRecord"
    DELETE_RECORD = "deleteRecord"
    LIST_RECORDS = "listRecords"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str) -> "BlockKind":
        """Resolve a block tag (canonical or editor alias) to a kind."""
        return _BLOCK_TAGS.get(tag, cls.UNKNOWN)

    @property
    def is_asset_block(self) -> bool:
        """Whether blocks of this kind may name the ambient asset type."""
        return self in _ASSET_BLOCKS

    @property
    def uses_record_type(self) -> bool:
        """Whether emitted code for this kind references the record struct."""
        return self in _ASSET_BLOCKS or self == BlockKind.LIST_RECORDS


_BLOCK_TAGS = {kind.value: kind for kind in BlockKind if kind != BlockKind.UNKNOWN}
_BLOCK_TAGS.update(
    {
        "createAsset": BlockKind.CREATE_RECORD,
        "readAsset": BlockKind.READ_RECORD,
        "updateAsset": BlockKind.UPDATE_RECORD,
        "deleteAsset": BlockKind.DELETE_RECORD,
        "query": BlockKind.LIST_RECORDS,
    }
)

_ASSET_BLOCKS = frozenset(
    {
        BlockKind.CREATE_RECORD,
        BlockKind.READ_RECORD,
        BlockKind.UPDATE_RECORD,
        BlockKind.DELETE_RECORD,
    }
)


@dataclass(frozen=True)
class BlockInstance:
    """One placed, configured occurrence of an operation block."""

    instance_id: str
    kind_tag: str
    name: Optional[str] = None  # Display name from the palette

    @property
    def kind(self) -> BlockKind:
        return BlockKind.from_tag(self.kind_tag)

    @property
    def display_name(self) -> str:
        return self.name or self.kind_tag


def fields_from_dicts(raw_fields: List[Mapping[str, Any]]) -> List[Field]:
    """
    Convert editor-style field dicts into Field objects.

    Both ``serializedName`` and the editor's ``jsonTag`` key are accepted.

    Args:
        raw_fields: List of ``{"name", "type", "jsonTag"}`` mappings

    Returns:
        Fields in the same order
    """
    fields = []
    for raw in raw_fields:
        if isinstance(raw, Field):
            fields.append(raw)
            continue
        serialized = raw.get("serializedName", raw.get("jsonTag", ""))
        fields.append(Field.from_tag(raw["name"], raw.get("type", "string"), serialized))
    return fields


def field_to_dict(field: Field) -> Dict[str, str]:
    """Convert a Field back into the editor's dict form."""
    type_tag = field.raw_type or field.type.value
    return {"name": field.name, "type": type_tag, "jsonTag": field.serialized_name}


def blocks_from_dicts(raw_blocks: List[Mapping[str, Any]]) -> List[BlockInstance]:
    """Convert editor-style canvas entries into BlockInstance objects."""
    blocks = []
    for raw in raw_blocks:
        if isinstance(raw, BlockInstance):
            blocks.append(raw)
            continue
        kind_tag = raw.get("blockId", raw.get("kind"))
        blocks.append(
            BlockInstance(
                instance_id=str(raw["instanceId"]),
                kind_tag=str(kind_tag),
                name=raw.get("name"),
            )
        )
    return blocks


def block_to_dict(block: BlockInstance) -> Dict[str, Any]:
    """Convert a BlockInstance back into the editor's canvas entry form."""
    data = {"instanceId": block.instance_id, "blockId": block.kind_tag}
    if block.name:
        data["name"] = block.name
    return data
