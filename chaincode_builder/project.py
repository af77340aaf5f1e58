"""Chaincode projects: the placed blocks, their settings and the asset schema.

A project is what the block editor saves and what the generator consumes.
The JSON layout uses the editor's export keys (``chaincodeName``,
``chaincodeVersion``, ``canvas``, ``blockProps``, ``assetFields``).

The editing helpers mirror the editor's actions. They never mutate the
project they are given; each returns a new one.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .codegen.core.schema import (
    BlockInstance,
    Field,
    block_to_dict,
    blocks_from_dicts,
    field_to_dict,
    fields_from_dicts,
)
from .logging_config import get_logger
from .utils import JSONLoaderError, load_json, write_json_file

logger = get_logger(__name__)

DEFAULT_NAME = "MyChaincode"
DEFAULT_VERSION = "1.0"


class ProjectError(Exception):
    """Raised for malformed or unreadable project files."""

    pass


@dataclass(frozen=True)
class PaletteBlock:
    """A block the editor offers for placement."""

    block_id: str
    name: str
    category: str


BLOCK_PALETTE: tuple[PaletteBlock, ...] = (
    PaletteBlock("init", "Init Function", "core"),
    PaletteBlock("createAsset", "Create Asset", "assets"),
    PaletteBlock("readAsset", "Read Asset", "assets"),
    PaletteBlock("updateAsset", "Update Asset", "assets"),
    PaletteBlock("deleteAsset", "Delete Asset", "assets"),
    PaletteBlock("query", "Query Assets", "assets"),
    PaletteBlock("putState", "Put State", "state"),
    PaletteBlock("getState", "Get State", "state"),
    PaletteBlock("delState", "Delete State", "state"),
    PaletteBlock("getStateByRange", "Get State Range", "state"),
    PaletteBlock("createCompositeKey", "Composite Key", "state"),
    PaletteBlock("verifySignature", "Verify Signature", "crypto"),
    PaletteBlock("getCreator", "Get Creator", "identity"),
    PaletteBlock("checkACL", "Check ACL", "identity"),
    PaletteBlock("emitEvent", "Emit Event", "events"),
)

PALETTE_CATEGORIES: dict[str, str] = {
    "core": "Core Functions",
    "assets": "Asset Operations",
    "state": "State Management",
    "crypto": "Cryptography",
    "identity": "Identity & Access",
    "events": "Events",
}

_DEFAULT_PROPS: dict[str, dict[str, Any]] = {
    "init": {"message": "Initializing the chaincode"},
    "createAsset": {"assetType": "Asset"},
    "emitEvent": {"eventName": "NewEvent", "payload": "{}"},
}

# Block that owns the shared asset type setting
_ASSET_TYPE_OWNER = "createAsset"


def default_fields() -> list[Field]:
    """The schema a new project starts with."""
    return fields_from_dicts(
        [
            {"name": "ID", "type": "string", "jsonTag": "id"},
            {"name": "Description", "type": "string", "jsonTag": "description"},
            {"name": "Owner", "type": "string", "jsonTag": "owner"},
            {"name": "Value", "type": "int", "jsonTag": "value"},
        ]
    )


def default_props_for_block(block_id: str) -> dict[str, Any]:
    """Settings a freshly placed block starts with."""
    return dict(_DEFAULT_PROPS.get(block_id, {}))


def palette_block(block_id: str) -> PaletteBlock | None:
    """Look up a palette entry by its block id."""
    for entry in BLOCK_PALETTE:
        if entry.block_id == block_id:
            return entry
    return None


@dataclass
class ChaincodeProject:
    """Everything needed to generate one chaincode file."""

    name: str = DEFAULT_NAME
    version: str = DEFAULT_VERSION
    blocks: list[BlockInstance] = field(default_factory=list)
    block_props: dict[str, dict[str, Any]] = field(default_factory=dict)
    fields: list[Field] = field(default_factory=default_fields)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChaincodeProject:
        """Build a project from its exported JSON form.

        Missing keys take the editor's defaults.

        Raises:
            ProjectError: If the data does not have the expected shape.
        """
        if not isinstance(data, dict):
            raise ProjectError(
                f"Project must be a JSON object, got {type(data).__name__}"
            )

        canvas = data.get("canvas", [])
        block_props = data.get("blockProps", {})
        raw_fields = data.get("assetFields")

        if not isinstance(canvas, list):
            raise ProjectError("'canvas' must be a list of blocks")
        if not isinstance(block_props, dict):
            raise ProjectError("'blockProps' must be an object keyed by instance id")
        if raw_fields is not None and not isinstance(raw_fields, list):
            raise ProjectError("'assetFields' must be a list of fields")

        try:
            blocks = blocks_from_dicts(canvas)
            fields = default_fields() if raw_fields is None else fields_from_dicts(raw_fields)
        except (KeyError, AttributeError, TypeError) as e:
            raise ProjectError(f"Malformed project entry: {e!r}") from e

        props = {}
        for instance_id, value in block_props.items():
            if not isinstance(value, dict):
                raise ProjectError(f"Settings for block {instance_id} must be an object")
            props[str(instance_id)] = dict(value)

        return cls(
            name=str(data.get("chaincodeName") or DEFAULT_NAME),
            version=str(data.get("chaincodeVersion") or DEFAULT_VERSION),
            blocks=blocks,
            block_props=props,
            fields=fields,
        )

    def to_dict(self) -> dict[str, Any]:
        """Export the project in the editor's JSON form."""
        return {
            "chaincodeName": self.name,
            "chaincodeVersion": self.version,
            "canvas": [block_to_dict(block) for block in self.blocks],
            "blockProps": copy.deepcopy(self.block_props),
            "assetFields": [field_to_dict(f) for f in self.fields],
        }

    # Editing helpers

    def add_block(self, block_id: str, name: str | None = None) -> ChaincodeProject:
        """Place a block at the end of the canvas with its default settings."""
        entry = palette_block(block_id)
        display_name = name or (entry.name if entry else block_id)
        instance_id = self._next_instance_id(block_id)

        block = BlockInstance(instance_id=instance_id, kind_tag=block_id, name=display_name)
        block_props = copy.deepcopy(self.block_props)
        block_props[instance_id] = default_props_for_block(block_id)

        logger.debug("Added block %s", instance_id)
        return replace(self, blocks=[*self.blocks, block], block_props=block_props)

    def remove_block(self, instance_id: str) -> ChaincodeProject:
        """Remove a placed block and its settings."""
        block_props = copy.deepcopy(self.block_props)
        block_props.pop(instance_id, None)
        return replace(
            self,
            blocks=[b for b in self.blocks if b.instance_id != instance_id],
            block_props=block_props,
        )

    def update_block_props(
        self, instance_id: str, props: dict[str, Any]
    ) -> ChaincodeProject:
        """Merge new settings into a block's settings.

        Changing the asset type on a create block changes it on every
        create block, so the whole project keeps one asset type.
        """
        block_props = copy.deepcopy(self.block_props)
        block = next((b for b in self.blocks if b.instance_id == instance_id), None)

        new_type = props.get("assetType")
        current_type = block_props.get(instance_id, {}).get("assetType")
        if (
            block is not None
            and block.kind_tag == _ASSET_TYPE_OWNER
            and new_type
            and new_type != current_type
        ):
            for other in self.blocks:
                if other.kind_tag == _ASSET_TYPE_OWNER and other.instance_id in block_props:
                    block_props[other.instance_id]["assetType"] = new_type

        block_props[instance_id] = {**block_props.get(instance_id, {}), **props}
        return replace(self, block_props=block_props)

    def add_field(self, new_field: Field | dict[str, Any]) -> ChaincodeProject:
        """Append a field; ignored if unnamed, untagged or the name is taken."""
        (new_field,) = fields_from_dicts([new_field])
        if not new_field.name or not new_field.serialized_name:
            logger.debug("Ignoring field without name or tag")
            return self
        if any(f.name == new_field.name for f in self.fields):
            logger.debug("Ignoring duplicate field %s", new_field.name)
            return self
        return replace(self, fields=[*self.fields, new_field])

    def remove_field(self, name: str) -> ChaincodeProject:
        """Drop every field with the given name."""
        return replace(self, fields=[f for f in self.fields if f.name != name])

    def _next_instance_id(self, block_id: str) -> str:
        taken = {b.instance_id for b in self.blocks}
        index = 1
        while f"{block_id}_{index}" in taken:
            index += 1
        return f"{block_id}_{index}"


def load_project(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> ChaincodeProject:
    """Load a project from a JSON file or URL.

    Raises:
        ProjectError: If the document cannot be loaded or is malformed.
    """
    try:
        source, data = load_json(file_path=file_path, url=url, timeout=timeout)
    except (JSONLoaderError, FileNotFoundError) as e:
        raise ProjectError(str(e)) from e

    project = ChaincodeProject.from_dict(data)
    logger.info(
        "Loaded project %s from %s (%d blocks, %d fields)",
        project.name,
        source,
        len(project.blocks),
        len(project.fields),
    )
    return project


def save_project(project: ChaincodeProject, file_path: str | Path) -> Path:
    """Write a project as JSON.

    Raises:
        ProjectError: If the file cannot be written.
    """
    try:
        return write_json_file(file_path, project.to_dict())
    except JSONLoaderError as e:
        raise ProjectError(str(e)) from e


def starter_project(
    name: str = DEFAULT_NAME, version: str = DEFAULT_VERSION
) -> ChaincodeProject:
    """A project with the default schema and one block of each generated kind."""
    project = ChaincodeProject(name=name, version=version)
    for block_id in ("init", "createAsset", "readAsset", "updateAsset", "deleteAsset", "query"):
        project = project.add_block(block_id)
    return project
