"""
Chaincode Builder Code Generation Module

Generates smart-contract source from placed blocks and an asset schema.
"""

from .registry import (
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.schema import BlockInstance, BlockKind, Field, FieldType
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .languages.go import ChaincodeGenerator, generate_chaincode, synthesize_sample_value


def generate_from_project(project, language="go", config=None):
    """
    Generate code for a ChaincodeProject.

    Args:
        project: chaincode_builder.project.ChaincodeProject
        language: Target language name
        config: Generator configuration (GeneratorConfig, dict or path)

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, config)
    return generate_code(
        generator,
        project.name,
        project.version,
        project.blocks,
        project.block_props,
        project.fields,
    )


__all__ = [
    "RegistryError",
    "CodeGenerator",
    "ChaincodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "BlockInstance",
    "BlockKind",
    "Field",
    "FieldType",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "generate_code",
    "generate_chaincode",
    "generate_from_project",
    "synthesize_sample_value",
    "get_generator",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
]
