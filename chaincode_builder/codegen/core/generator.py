"""
Base generator interface for all chaincode generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Mapping, Optional, Sequence
from pathlib import Path

from .config import GeneratorConfig, load_config
from .schema import (
    BlockInstance,
    BlockKind,
    Field,
    FieldType,
    blocks_from_dicts,
    fields_from_dicts,
)
from .naming import find_key_field
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)

BlockProps = Mapping[str, Mapping[str, Any]]


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all chaincode generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config if config is not None else load_config()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(
        self,
        name: str,
        version: str,
        blocks: Sequence[BlockInstance],
        block_props: BlockProps,
        fields: Sequence[Field],
    ) -> str:
        """
        Generate the complete chaincode source.

        Args:
            name: Chaincode name, embedded in comments and error strings
            version: Chaincode version, embedded in the header comment
            blocks: Placed blocks in emission order
            block_props: Per-instance configuration keyed by instance id
            fields: Asset field schema in declaration order

        Returns:
            Generated source text
        """
        pass

    def resolve_asset_type(
        self, blocks: Sequence[BlockInstance], block_props: Optional[BlockProps]
    ) -> str:
        """
        Resolve the asset type name shared by a whole generation run.

        The first asset block decides: its ``assetType`` configuration wins
        when non-empty, otherwise the configured default is used.
        """
        block_props = block_props or {}
        default = self.config.default_asset_type
        for block in blocks_from_dicts(list(blocks)):
            if block.kind.is_asset_block:
                props = block_props.get(block.instance_id) or {}
                return props.get("assetType") or default
        return default

    def validate(
        self,
        blocks: Sequence[BlockInstance],
        block_props: BlockProps,
        fields: Sequence[Field],
    ) -> List[str]:
        """
        Check generation input for language-independent issues.

        Language generators should extend this with their own checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        blocks = blocks_from_dicts(list(blocks))
        fields = fields_from_dicts(list(fields))
        warnings = []

        if not fields:
            warnings.append("Asset schema has no fields")

        # InitLedger keys records only alongside a create block; listing never does
        uses_key = any(block.kind.is_asset_block for block in blocks)
        if uses_key and not find_key_field(fields):
            warnings.append(
                "No identifying field (named or tagged 'id'); generated functions "
                "fall back to an undeclared key parameter 'id'"
            )

        for field in fields:
            if field.type == FieldType.UNKNOWN:
                warnings.append(
                    f"Unknown type '{field.raw_type}' for field {field.name}; "
                    "it is emitted verbatim"
                )

        seen_ids = set()
        for block in blocks:
            if block.instance_id in seen_ids:
                warnings.append(f"Duplicate block instance id: {block.instance_id}")
            seen_ids.add(block.instance_id)

            if block.kind == BlockKind.UNKNOWN:
                warnings.append(
                    f"Block '{block.display_name}' ({block.kind_tag}) has no "
                    "generator; a placeholder is emitted"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace and collapses runs of blank lines.
        Comment lines are kept as rendered so user-supplied names stay verbatim.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= self.config.max_blank_lines:
                    formatted_lines.append("")
            else:
                blank_count = 0
                if stripped.lstrip().startswith("//"):
                    formatted_lines.append(line)
                else:
                    formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    name: str,
    version: str,
    blocks: Sequence[Any],
    block_props: Optional[BlockProps],
    fields: Sequence[Any],
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Blocks and fields may be given as model objects or as the editor's
    dict form.

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        blocks = blocks_from_dicts(list(blocks))
        fields = fields_from_dicts(list(fields))
        block_props = block_props or {}

        warnings = generator.validate(blocks, block_props, fields)
        for warning in warnings:
            logger.warning(warning)

        code = generator.generate(name, version, blocks, block_props, fields)
        formatted_code = generator.format_code(code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "chaincode_name": name,
            "chaincode_version": version,
            "asset_type": generator.resolve_asset_type(blocks, block_props),
            "block_count": len(blocks),
            "field_count": len(fields),
            "unknown_blocks": sum(1 for b in blocks if b.kind == BlockKind.UNKNOWN),
            "has_key_field": find_key_field(fields) is not None,
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
