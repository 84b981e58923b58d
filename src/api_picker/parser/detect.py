"""Detect which API description dialect a loaded document uses."""


def detect_version(doc: dict) -> str | None:
    """Detect the dialect of a parsed document.

    Returns: 'openapi' (3.x), 'swagger' (2.0), or None when neither
    version marker is present.
    """
    if not isinstance(doc, dict):
        return None
    if "openapi" in doc:
        return "openapi"
    if "swagger" in doc:
        return "swagger"
    return None
