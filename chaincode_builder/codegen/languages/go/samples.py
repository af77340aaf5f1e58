"""Sample record values seeded into the ledger by InitLedger."""

from ...core.schema import Field, FieldType
from ...core.naming import is_key_field, is_owner_field


def _format_number(value: float) -> str:
    # 21.0 renders as 21, matching how the values read in the editor
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


def synthesize_sample_value(field: Field, index: int) -> str:
    """
    Produce a deterministic Go literal for a field.

    Args:
        field: Schema field the value is for
        index: 1-based sample number

    Returns:
        Go source text of the literal
    """
    if field.type == FieldType.STRING:
        if is_key_field(field):
            return f'"asset{index}"'
        if is_owner_field(field):
            return f'"User{index}"'
        return f'"Sample {field.name} {index}"'
    if field.type == FieldType.INTEGER:
        return str(index * 100)
    if field.type == FieldType.FLOAT:
        return _format_number(index * 10.5)
    if field.type == FieldType.BOOLEAN:
        return "true" if index % 2 == 0 else "false"
    if field.type == FieldType.STRING_LIST:
        return f'[]string{{"item{index}-1", "item{index}-2"}}'
    if field.type == FieldType.STRING_MAP:
        return f'map[string]string{{"key{index}": "value{index}"}}'
    return f'"{field.name}{index}"'
