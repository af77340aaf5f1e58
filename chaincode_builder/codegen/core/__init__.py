"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    BlockInstance,
    BlockKind,
    Field,
    FieldType,
    blocks_from_dicts,
    fields_from_dicts,
)
from .naming import (
    NameChecker,
    find_key_field,
    is_key_field,
    is_owner_field,
    key_param_name,
    lowercased_noun,
    plural_collection_name,
    var_name,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "BlockInstance",
    "BlockKind",
    "Field",
    "FieldType",
    "blocks_from_dicts",
    "fields_from_dicts",
    # Naming utilities - language-agnostic
    "NameChecker",
    "find_key_field",
    "is_key_field",
    "is_owner_field",
    "key_param_name",
    "lowercased_noun",
    "plural_collection_name",
    "var_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
