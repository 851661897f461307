"""Native type tag to TypeScript display type mapping."""

ANY_TYPE = "any"

NATIVE_TYPE_DISPLAY: dict[str, str] = {
    "bool": "boolean",
    "int": "number",
    "int32": "number",
    "float": "number",
    "string": "string",
    "pin": "Pin",
}


def display_type(type_tag: str | None) -> str:
    """Map a native type tag to its display type. Unknown or absent tags map to ``any``."""
    if not type_tag:
        return ANY_TYPE
    return NATIVE_TYPE_DISPLAY.get(type_tag, ANY_TYPE)
