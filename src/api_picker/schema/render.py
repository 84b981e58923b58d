"""One-line type descriptions for schema nodes.

Examples::

    {"type": "array", "items": {"type": "string"}}       -> string[]
    {"type": "integer", "format": "int64"}                -> string
    {"oneOf": [{"type": "string"}, {"type": "integer"}]}  -> string | integer
    {"type": "object", "additionalProperties": {...}}     -> map<string, ...>
"""

from .resolver import get_members, get_ref, get_type, ref_to_name, resolve_schema

# 64-bit integers are sent as strings so clients don't lose precision.
STRING_INT_FORMATS = ("int64", "uint64")


def schema_to_type_text(doc: dict, schema: dict | None, _seen: frozenset = frozenset()) -> str:
    """Render a schema as a display type. Never raises.

    ``_seen`` holds the references already followed on the current rendering
    path; a reference met again renders as its name instead of recursing.
    """
    if not isinstance(schema, dict):
        return "unknown"

    s = schema
    ref = get_ref(schema)
    if ref:
        if ref in _seen:
            return ref_to_name(ref)
        _seen = _seen | {ref}
        resolved = resolve_schema(doc, schema)
        if resolved is not schema:
            if get_ref(resolved):
                return schema_to_type_text(doc, resolved, _seen)
            s = resolved

    schema_type = get_type(s)
    if not schema_type:
        return _untyped_text(doc, s, _seen)

    fmt = s.get("format") if isinstance(s.get("format"), str) else None

    if schema_type == "integer" and fmt in STRING_INT_FORMATS:
        return "string"
    if schema_type == "array":
        return f"{schema_to_type_text(doc, s.get('items'), _seen)}[]"
    if schema_type == "object":
        additional = s.get("additionalProperties")
        if isinstance(additional, dict):
            return f"map<string, {schema_to_type_text(doc, additional, _seen)}>"
        return "object"
    enum = s.get("enum")
    if schema_type == "string" and isinstance(enum, list) and enum:
        return f"string(enum: {', '.join(_literal(v) for v in enum)})"
    return f"{schema_type}({fmt})" if fmt else schema_type


def _untyped_text(doc: dict, s: dict, seen: frozenset) -> str:
    for key, sep in (("allOf", " & "), ("oneOf", " | "), ("anyOf", " | ")):
        members = get_members(s, key)
        if members:
            return sep.join(schema_to_type_text(doc, m, seen) for m in members)
    if isinstance(s.get("properties"), dict):
        return "object"
    ref = get_ref(s)
    if ref:
        return ref_to_name(ref)
    return "unknown"


def _literal(value) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)
