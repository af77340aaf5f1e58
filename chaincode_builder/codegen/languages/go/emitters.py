"""
Block emitters for Go chaincode.

One emitter per operation kind. Each takes the placed block and an
EmitContext and returns the Go declarations to append, in order.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Sequence, Set

from ...core.generator import GeneratorError
from ...core.naming import (
    key_member_name,
    key_param_name,
    lowercased_noun,
    plural_collection_name,
    var_name,
)
from ...core.schema import BlockInstance, BlockKind, Field
from ...core.templates import TemplateEngine
from ...core.config import GeneratorConfig
from ....logging_config import get_logger
from .samples import synthesize_sample_value
from .types import GoTypeMapper, SAMPLE_MEMBER_WIDTH, build_function_params

logger = get_logger(__name__)


@dataclass
class EmitContext:
    """Everything an emitter may read while rendering one block."""

    asset_type: str  # Resolved once per run
    fields: Sequence[Field]
    props: Mapping[str, Any] = field(default_factory=dict)
    has_create_block: bool = False
    # Asset types whose existence helper is already in the output; owned by
    # one generate() call and shared by all of its emitters
    emitted_helpers: Set[str] = field(default_factory=set)

    @property
    def block_asset_type(self) -> str:
        """Asset type for this block: its own ``assetType`` or the run's."""
        return self.props.get("assetType") or self.asset_type


class BlockEmitter:
    """Dispatches placed blocks to the emitter for their kind."""

    def __init__(
        self,
        template_engine: TemplateEngine,
        config: GeneratorConfig,
        type_mapper: GoTypeMapper = None,
    ):
        self.templates = template_engine
        self.config = config
        self.type_mapper = type_mapper or GoTypeMapper()
        self._emitters: Dict[BlockKind, Callable[[BlockInstance, EmitContext], List[str]]] = {
            BlockKind.INIT: self.emit_init,
            BlockKind.CREATE_RECORD: self.emit_create,
            BlockKind.READ_RECORD: self.emit_read,
            BlockKind.UPDATE_RECORD: self.emit_update,
            BlockKind.DELETE_RECORD: self.emit_delete,
            BlockKind.LIST_RECORDS: self.emit_list,
            BlockKind.UNKNOWN: self.emit_unknown,
        }
        missing = set(BlockKind) - set(self._emitters)
        if missing:
            raise GeneratorError(f"No emitter for block kinds: {sorted(k.value for k in missing)}")

    def emit(self, block: BlockInstance, context: EmitContext) -> List[str]:
        """Render all declarations for one block."""
        logger.debug("Emitting %s block %s", block.kind.value, block.instance_id)
        return self._emitters[block.kind](block, context)

    def _names(self, asset_type: str) -> Dict[str, str]:
        return {
            "asset_type": asset_type,
            "var": var_name(asset_type),
            "plural_var": plural_collection_name(asset_type),
            "noun": lowercased_noun(asset_type),
            "collection_noun": lowercased_noun(asset_type) + "s",
        }

    def _record_params(self, context: EmitContext) -> Dict[str, Any]:
        params = build_function_params(context.fields, self.type_mapper)
        return {
            "params_suffix": f", {params.signature}" if params.parameters else "",
            "initializers": params.initializer_lines(),
            "key_param": key_param_name(context.fields),
        }

    def _exists_helper(self, asset_type: str, context: EmitContext) -> List[str]:
        """Existence helper for an asset type, unless already emitted this run."""
        if asset_type in context.emitted_helpers:
            return []
        context.emitted_helpers.add(asset_type)
        return [
            self.templates.render_template(
                "exists.go.j2",
                {**self._names(asset_type), "helper_name": exists_helper_name(asset_type)},
            )
        ]

    def emit_init(self, block: BlockInstance, context: EmitContext) -> List[str]:
        """InitLedger, seeding sample records when a create block is placed."""
        samples = []
        if context.has_create_block:
            for index in range(1, self.config.sample_record_count + 1):
                samples.append(
                    [
                        f"\t\t\t{f.name}:".ljust(SAMPLE_MEMBER_WIDTH)
                        + synthesize_sample_value(f, index)
                        for f in context.fields
                    ]
                )

        template_context = {
            **self._names(context.asset_type),
            "message": context.props.get("message") or self.config.default_init_message,
            "samples": samples,
            "key_member": key_member_name(context.fields),
        }
        return [self.templates.render_template("init.go.j2", template_context)]

    def emit_create(self, block: BlockInstance, context: EmitContext) -> List[str]:
        asset_type = context.block_asset_type
        template_context = {**self._names(asset_type), **self._record_params(context)}
        return [self.templates.render_template("create.go.j2", template_context)]

    def emit_read(self, block: BlockInstance, context: EmitContext) -> List[str]:
        asset_type = context.block_asset_type
        return [self.templates.render_template("read.go.j2", self._names(asset_type))]

    def emit_update(self, block: BlockInstance, context: EmitContext) -> List[str]:
        asset_type = context.block_asset_type
        template_context = {
            **self._names(asset_type),
            **self._record_params(context),
            "helper_name": exists_helper_name(asset_type),
        }
        declarations = [self.templates.render_template("update.go.j2", template_context)]
        return declarations + self._exists_helper(asset_type, context)

    def emit_delete(self, block: BlockInstance, context: EmitContext) -> List[str]:
        asset_type = context.block_asset_type
        template_context = {
            **self._names(asset_type),
            "helper_name": exists_helper_name(asset_type),
        }
        declarations = [self.templates.render_template("delete.go.j2", template_context)]
        return declarations + self._exists_helper(asset_type, context)

    def emit_list(self, block: BlockInstance, context: EmitContext) -> List[str]:
        asset_type = context.block_asset_type
        return [self.templates.render_template("list.go.j2", self._names(asset_type))]

    def emit_unknown(self, block: BlockInstance, context: EmitContext) -> List[str]:
        """Placeholder comment for a block the generator cannot implement."""
        logger.warning(
            "No emitter for block kind '%s'; emitting placeholder", block.kind_tag
        )
        return [
            self.templates.render_template(
                "unknown.go.j2", {"block_name": block.display_name}
            )
        ]


def exists_helper_name(asset_type: str) -> str:
    return f"{asset_type}Exists"
