"""
Lookup of chaincode generators by target language.

Go is the only target; ``golang`` is accepted as an alias.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path
from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]

ALIASES = {"golang": "go"}


class RegistryError(Exception):
    """Exception raised for unknown languages or unusable generator configs."""

    pass


def _generator_classes() -> Dict[str, Type[CodeGenerator]]:
    # Imported lazily so the languages package can import codegen.core freely
    from .languages.go import ChaincodeGenerator

    return {"go": ChaincodeGenerator}


def _canonical(language: str) -> str:
    key = language.lower()
    return ALIASES.get(key, key)


def _generator_class(language: str) -> Type[CodeGenerator]:
    classes = _generator_classes()
    try:
        return classes[_canonical(language)]
    except KeyError:
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(sorted(classes))}"
        ) from None


def _coerce_config(config: ConfigSource) -> GeneratorConfig:
    if isinstance(config, GeneratorConfig):
        return config
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    if isinstance(config, dict):
        return load_config(custom_config=config)
    if config is None:
        return load_config()
    raise RegistryError(f"Invalid config type: {type(config)}")


def get_generator(language: str = "go", config: ConfigSource = None) -> CodeGenerator:
    """
    Create a generator for ``language``.

    Args:
        language: Language name or alias, case-insensitive
        config: GeneratorConfig, dict of overrides, config file path or None

    Raises:
        RegistryError: If the language is unknown or the config is unusable
    """
    generator_class = _generator_class(language)
    generator = generator_class(_coerce_config(config))
    logger.debug("Created %s for %s", generator_class.__name__, _canonical(language))
    return generator


def list_supported_languages() -> List[str]:
    """Primary names of every supported language."""
    return sorted(_generator_classes())


def is_language_supported(language: str) -> bool:
    return _canonical(language) in _generator_classes()


def get_language_info(language: str) -> Dict[str, Any]:
    """
    Describe a language for ``--language-info`` and ``--list-languages``.

    Raises:
        RegistryError: If the language is unknown
    """
    generator_class = _generator_class(language)
    generator = generator_class(load_config())
    name = _canonical(language)

    return {
        "name": generator.language_name,
        "class": generator_class.__name__,
        "file_extension": generator.file_extension,
        "aliases": sorted(alias for alias, target in ALIASES.items() if target == name),
        "module": generator_class.__module__,
    }


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    return {language: get_language_info(language) for language in list_supported_languages()}
