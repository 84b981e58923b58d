"""OpenAPI / Swagger operation extraction.

Turns the ``paths`` table of an OpenAPI 3.x or Swagger 2.0 document into a
sorted list of ApiOperation, plus the helpers used to narrow that list down
to the operations a user wants in a report.
"""

from fnmatch import fnmatch

from .base import ApiOperation

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options", "trace")


def extract_operations(doc: dict) -> list[ApiOperation]:
    """List every (path, method) pair, sorted by path then method."""
    operations = []
    paths = doc.get("paths") if isinstance(doc, dict) else None
    if not isinstance(paths, dict):
        return operations

    for path, methods in paths.items():
        if not isinstance(methods, dict):
            continue
        for method, operation in methods.items():
            if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                continue
            if not isinstance(operation, dict):
                continue

            operation_id = operation.get("operationId")
            op_id = f"{method}:{path}:{operation_id}" if operation_id else f"{method}:{path}"
            tags = operation.get("tags")
            summary = operation.get("summary")

            operations.append(
                ApiOperation(
                    id=op_id,
                    path=str(path),
                    method=method.lower(),
                    tags=[str(t) for t in tags] if isinstance(tags, list) else None,
                    summary=summary if isinstance(summary, str) else None,
                    operation=operation,
                )
            )

    operations.sort(key=lambda op: (op.path, op.method))
    return operations


def filter_operations(operations: list[ApiOperation], query: str | None) -> list[ApiOperation]:
    """Case-insensitive search over path, method, summary and tags."""
    q = (query or "").strip().lower()
    if not q:
        return list(operations)

    result = []
    for op in operations:
        haystacks = (op.path, op.method, op.summary or "", " ".join(op.tags or []))
        if any(q in h.lower() for h in haystacks):
            result.append(op)
    return result


def select_operations(operations: list[ApiOperation], selected: dict[str, bool]) -> list[ApiOperation]:
    """Keep operations whose id is checked in ``selected``, in list order."""
    return [op for op in operations if selected.get(op.id)]


def match_operations(operations: list[ApiOperation], patterns: tuple[str, ...]) -> list[ApiOperation]:
    """Select operations by patterns like ``"POST /pets"`` or ``"/pets/*"``."""
    result = []
    for op in operations:
        for pattern in patterns:
            parts = pattern.strip().split(None, 1)
            if len(parts) == 2:
                method, path_pattern = parts
                if op.method == method.lower() and fnmatch(op.path, path_pattern):
                    result.append(op)
                    break
            elif parts and fnmatch(op.path, parts[0]):
                result.append(op)
                break
    return result
