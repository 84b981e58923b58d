"""$ref resolution against the document root.

Only document-internal pointers (``#/components/schemas/User``,
``#/definitions/User``) are followed. Anything else is left in place and
later rendered by name.
"""


def resolve_ref(doc: dict, ref: str) -> dict | None:
    """Return the dict a ``#/...`` pointer targets, or None."""
    if not isinstance(ref, str) or not ref.startswith("#/"):
        return None

    current = doc
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]

    return current if isinstance(current, dict) else None


def resolve_schema(doc: dict, schema: dict) -> dict:
    """Resolve one $ref hop, letting sibling keys override the target.

    The result is a new dict carrying the target's own ``$ref`` only when the
    target is itself an alias. Unresolvable pointers return the node
    unchanged so callers can still see the reference.
    """
    if not isinstance(schema, dict):
        return {}
    ref = schema.get("$ref")
    if not ref:
        return schema

    target = resolve_ref(doc, ref)
    if target is None:
        return schema

    overrides = {k: v for k, v in schema.items() if k != "$ref"}
    return {**target, **overrides}


def ref_to_name(ref: str) -> str:
    """``#/components/schemas/User`` -> ``User``."""
    return ref.rsplit("/", 1)[-1]


def get_ref(schema: dict) -> str | None:
    ref = schema.get("$ref")
    return ref if isinstance(ref, str) and ref else None


def get_type(schema: dict) -> str | None:
    schema_type = schema.get("type")
    return schema_type if isinstance(schema_type, str) and schema_type else None


def get_members(schema: dict, key: str) -> list[dict]:
    """Members of an allOf/oneOf/anyOf list, ignoring non-dict entries."""
    members = schema.get(key)
    if not isinstance(members, list):
        return []
    return [m for m in members if isinstance(m, dict)]
