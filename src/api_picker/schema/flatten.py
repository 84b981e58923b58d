"""Flatten nested object schemas into dotted field paths.

A body like::

    {"type": "object", "required": ["user"], "properties": {
        "user": {"$ref": "#/components/schemas/User"}}}

becomes ``user.id``, ``user.name``, ``user.tags`` ... with each field's
required flag ANDed down the containment chain. Arrays and unions are
never expanded; their element/member types are folded into the type text.
"""

from api_picker.parser.base import FieldInfo

from .render import schema_to_type_text
from .resolver import get_members, get_ref, get_type, resolve_schema

ROOT_NAME = "(root)"


def flatten_schema_fields(doc: dict, schema: dict, required: bool = True) -> list[FieldInfo]:
    """Return the leaf fields reachable from ``schema`` in declaration order.

    ``required`` says whether the caller treats the schema itself as
    required; a nested field is only required if every container is.
    """
    fields: list[FieldInfo] = []
    _walk(doc, schema, "", required, fields, frozenset())
    return fields


def _walk(
    doc: dict,
    schema: dict,
    prefix: str,
    required: bool,
    out: list[FieldInfo],
    visited: frozenset,
) -> None:
    if not isinstance(schema, dict):
        return

    ref = get_ref(schema)
    if ref:
        # visited only holds refs on the path from the root to this node
        if ref in visited:
            return
        resolved = resolve_schema(doc, schema)
        if resolved is schema:
            # external refs contribute no fields; callers render the bare type
            return
        _walk(doc, resolved, prefix, required, out, visited | {ref})
        return

    all_of = get_members(schema, "allOf")
    if all_of:
        for part in all_of:
            _walk(doc, part, prefix, required, out, visited)
        return

    union = get_members(schema, "oneOf") or get_members(schema, "anyOf")
    if union:
        out.append(
            FieldInfo(
                name=prefix or ROOT_NAME,
                type=" | ".join(schema_to_type_text(doc, member) for member in union),
                required=required,
                description=_description(schema),
            )
        )
        return

    schema_type = get_type(schema)
    properties = schema.get("properties")
    if schema_type == "object" or (not schema_type and isinstance(properties, dict)):
        if not isinstance(properties, dict) or not properties:
            _emit(out, doc, schema, prefix, required)
            return

        required_names = _required_names(schema)
        for key, child in properties.items():
            # YAML loads unquoted keys like `on` or `404` as bool/int
            name = str(key)
            child_prefix = f"{prefix}.{name}" if prefix else name
            child_required = required and name in required_names
            resolved_child = resolve_schema(doc, child)
            if _is_leaf(resolved_child) or get_type(resolved_child) == "array":
                _emit(out, doc, resolved_child, child_prefix, child_required)
            else:
                # recurse on the unresolved child so its $ref is tracked
                _walk(doc, child, child_prefix, child_required, out, visited)
        return

    _emit(out, doc, schema, prefix, required)


def _emit(out: list[FieldInfo], doc: dict, schema: dict, name: str, required: bool) -> None:
    out.append(
        FieldInfo(
            name=name or ROOT_NAME,
            type=schema_to_type_text(doc, schema),
            required=required,
            description=_description(schema),
        )
    )


def _is_leaf(schema: dict) -> bool:
    return (
        not get_ref(schema)
        and not isinstance(schema.get("properties"), dict)
        and get_type(schema) not in ("object", "array")
    )


def _required_names(schema: dict) -> set[str]:
    names = schema.get("required")
    if not isinstance(names, list):
        return set()
    return {str(n) for n in names if isinstance(n, (str, int))}


def _description(schema: dict) -> str | None:
    description = schema.get("description")
    return description if isinstance(description, str) and description else None
