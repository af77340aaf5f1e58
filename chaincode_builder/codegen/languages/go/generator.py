"""
Go chaincode generator implementation.

Generates a Hyperledger Fabric contract (contractapi) from placed blocks
and the asset field schema.
"""

from collections import Counter
from typing import Any, Dict, List, Mapping, Optional, Sequence
from pathlib import Path

from ...core.config import GeneratorConfig, load_config
from ...core.generator import BlockProps, CodeGenerator
from ...core.naming import lowercased_noun, param_name, var_name
from ...core.schema import (
    BlockInstance,
    BlockKind,
    Field,
    blocks_from_dicts,
    fields_from_dicts,
)
from ....logging_config import get_logger
from .emitters import BlockEmitter, EmitContext
from .naming import create_go_name_checker, is_exported
from .types import GoTypeMapper

logger = get_logger(__name__)

# Function a block of each kind declares, by asset type
_FUNCTION_PATTERNS = {
    BlockKind.INIT: "InitLedger",
    BlockKind.CREATE_RECORD: "Create{}",
    BlockKind.READ_RECORD: "Read{}",
    BlockKind.UPDATE_RECORD: "Update{}",
    BlockKind.DELETE_RECORD: "Delete{}",
    BlockKind.LIST_RECORDS: "Query{}s",
}


class ChaincodeGenerator(CodeGenerator):
    """Code generator for Go chaincode on the Fabric contract API."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)

        self.name_checker = create_go_name_checker()
        self.type_mapper = GoTypeMapper()
        self.emitter = BlockEmitter(self.template_engine, self.config, self.type_mapper)

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def generate(
        self,
        name: str,
        version: str,
        blocks: Sequence[BlockInstance],
        block_props: BlockProps,
        fields: Sequence[Field],
    ) -> str:
        """Generate the complete chaincode file."""
        blocks = blocks_from_dicts(list(blocks))
        fields = fields_from_dicts(list(fields))
        block_props = block_props or {}

        asset_type = self.resolve_asset_type(blocks, block_props)
        has_create_block = any(b.kind == BlockKind.CREATE_RECORD for b in blocks)
        # Per-run state: asset types whose existence helper is already emitted
        emitted_helpers = set()

        logger.debug(
            "Generating %s v%s: %d blocks, %d fields, asset type %s",
            name,
            version,
            len(blocks),
            len(fields),
            asset_type,
        )

        parts = [self.render_template("header.go.j2", {"name": name, "version": version})]

        if any(block.kind.uses_record_type for block in blocks):
            parts.append(self._render_record_struct(asset_type, fields))

        parts.append(
            self.render_template(
                "contract.go.j2", {"collection_noun": lowercased_noun(asset_type) + "s"}
            )
        )

        for block in blocks:
            context = EmitContext(
                asset_type=asset_type,
                fields=fields,
                props=block_props.get(block.instance_id) or {},
                has_create_block=has_create_block,
                emitted_helpers=emitted_helpers,
            )
            parts.extend(self.emitter.emit(block, context))

        parts.append(self.render_template("main.go.j2", {"name": name}))

        return "".join(parts)

    def _render_record_struct(self, asset_type: str, fields: Sequence[Field]) -> str:
        """Render the asset record struct, fields in schema order."""
        field_data = [
            {
                "name": f.name,
                "go_type": self.type_mapper.map_field_type(f),
                "json_tag": f.serialized_name,
            }
            for f in fields
        ]
        return self.render_template(
            "struct.go.j2", {"asset_type": asset_type, "fields": field_data}
        )

    def function_names(
        self, blocks: Sequence[BlockInstance], block_props: BlockProps
    ) -> List[str]:
        """Names of the contract functions the blocks declare, in order."""
        blocks = blocks_from_dicts(list(blocks))
        block_props = block_props or {}
        asset_type = self.resolve_asset_type(blocks, block_props)

        names = []
        for block in blocks:
            pattern = _FUNCTION_PATTERNS.get(block.kind)
            if pattern is None:
                continue
            props = block_props.get(block.instance_id) or {}
            block_type = asset_type
            if block.kind != BlockKind.INIT:
                block_type = props.get("assetType") or asset_type
            names.append(pattern.format(block_type))
        return names

    def validate(
        self,
        blocks: Sequence[BlockInstance],
        block_props: BlockProps,
        fields: Sequence[Field],
    ) -> List[str]:
        """Validate generation input for Go using the base checks plus naming."""
        warnings = super().validate(blocks, block_props, fields)
        blocks = blocks_from_dicts(list(blocks))
        fields = fields_from_dicts(list(fields))
        block_props = block_props or {}

        for field in fields:
            if not is_exported(field.name):
                warnings.append(
                    f"Field {field.name} is not exported; encoding/json will skip it"
                )
            problem = self.name_checker.problem(param_name(field))
            if problem:
                warnings.append(
                    f"Parameter '{param_name(field)}' for field {field.name} {problem}"
                )

        if any(block.kind.uses_record_type for block in blocks):
            asset_type = self.resolve_asset_type(blocks, block_props)
            problem = self.name_checker.problem(asset_type)
            if problem:
                warnings.append(f"Asset type '{asset_type}' {problem}")
            elif self.name_checker.problem(var_name(asset_type)):
                warnings.append(
                    f"Variable name '{var_name(asset_type)}' derived from asset type "
                    f"'{asset_type}' {self.name_checker.problem(var_name(asset_type))}"
                )

        counts = Counter(self.function_names(blocks, block_props))
        for function_name, count in counts.items():
            if count > 1:
                warnings.append(f"Function {function_name} is declared {count} times")

        return warnings


# Factory functions
def create_chaincode_generator(
    config: Optional[Dict[str, Any]] = None,
) -> ChaincodeGenerator:
    """Create a Go chaincode generator, applying config overrides to defaults."""
    return ChaincodeGenerator(load_config(custom_config=config))


def generate_chaincode(
    name: str,
    version: str,
    blocks: Sequence[Any],
    block_props: Optional[Mapping[str, Mapping[str, Any]]],
    fields: Sequence[Any],
) -> str:
    """
    Generate Go chaincode source text.

    Args:
        name: Chaincode name
        version: Chaincode version
        blocks: Placed blocks (BlockInstance or editor dicts), in order
        block_props: Configuration per block instance id
        fields: Asset schema (Field or editor dicts), in order

    Returns:
        The complete Go source file
    """
    return ChaincodeGenerator().generate(name, version, blocks, block_props, fields)
