"""
Go-specific type mapping for chaincode generation.

Maps schema field types to Go types and builds the parameter lists and
struct initializers shared by the create and update functions.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ...core.schema import Field, FieldType
from ...core.naming import param_name

GO_TYPE_MAP: Dict[FieldType, str] = {
    FieldType.STRING: "string",
    FieldType.INTEGER: "int",
    FieldType.FLOAT: "float64",
    FieldType.BOOLEAN: "bool",
    FieldType.STRING_LIST: "[]string",
    FieldType.STRING_MAP: "map[string]string",
}

# Fallback for an unknown tag that was not even written down
UNKNOWN_GO_TYPE = "interface{}"

# Column widths of the aligned member lines, tabs counted as one
SAMPLE_MEMBER_WIDTH = 22
INITIALIZER_MEMBER_WIDTH = 20


class GoTypeMapper:
    """Maps schema fields to Go type expressions."""

    def __init__(self, type_overrides: Optional[Dict[FieldType, str]] = None):
        self.type_map = dict(GO_TYPE_MAP)
        if type_overrides:
            self.type_map.update(type_overrides)

    def map_field_type(self, field: Field) -> str:
        """
        Map a schema field to a Go type.

        Unknown tags are emitted as written so the caller's intent survives.
        """
        if field.type in self.type_map:
            return self.type_map[field.type]
        return field.raw_type or UNKNOWN_GO_TYPE


@dataclass(frozen=True)
class FunctionParams:
    """Parameters and matching struct initializers for one schema."""

    parameters: List[Tuple[str, str]] = field(default_factory=list)  # (param, go type)
    initializers: List[Tuple[str, str]] = field(default_factory=list)  # (member, param)

    @property
    def signature(self) -> str:
        """Parameters as Go text: ``id string, value int``."""
        return ", ".join(f"{name} {go_type}" for name, go_type in self.parameters)

    def initializer_lines(self) -> List[str]:
        """Aligned ``Member: param,`` lines for a two-tab-deep literal."""
        return [
            f"\t\t{member}:".ljust(INITIALIZER_MEMBER_WIDTH) + f"{param},"
            for member, param in self.initializers
        ]


def build_function_params(
    fields: Sequence[Field], type_mapper: Optional[GoTypeMapper] = None
) -> FunctionParams:
    """
    Build the parameter list and struct initializers for a schema.

    Both lists follow schema order, so a signature and the record literal
    built from it always line up positionally.

    Args:
        fields: Asset schema
        type_mapper: Mapper for Go types (default mapping if None)

    Returns:
        FunctionParams for the schema
    """
    mapper = type_mapper or GoTypeMapper()
    parameters = []
    initializers = []

    for schema_field in fields:
        name = param_name(schema_field)
        parameters.append((name, mapper.map_field_type(schema_field)))
        initializers.append((schema_field.name, name))

    return FunctionParams(parameters=parameters, initializers=initializers)
