"""Data models for operations and flattened fields.

The document itself and its schema nodes stay plain dicts; these models
describe what the extractor and flattener produce from them.
"""

from pydantic import BaseModel


class ApiOperation(BaseModel):
    """A single (path, method) pair found in the document."""

    id: str  # method:path or method:path:operationId
    path: str  # /users/{id}
    method: str  # get / post / put / delete / patch / head / options / trace
    tags: list[str] | None = None
    summary: str | None = None
    operation: dict  # raw operation object: parameters, requestBody, responses


class FieldInfo(BaseModel):
    """One flattened field: dotted name, rendered type, required flag."""

    name: str  # user.address.city, or (root)
    type: str
    required: bool
    description: str | None = None
