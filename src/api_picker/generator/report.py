"""Report generator: renders selected operations as plain-text field lists.

The output is meant to be pasted into a chat with an AI assistant, so it
lists each operation's request parameters and response fields one per line.
"""

from api_picker.parser.base import ApiOperation, FieldInfo
from api_picker.schema.flatten import flatten_schema_fields
from api_picker.schema.render import schema_to_type_text
from api_picker.schema.resolver import resolve_schema

JSON_CONTENT_TYPES = ("application/json", "*/*", "application/*+json")
PREFERRED_RESPONSES = ("200", "201", "default")

LABEL_SUMMARY = "摘要"
LABEL_TAGS = "标签"
LABEL_REQUEST = "请求参数"
LABEL_RESPONSE = "响应参数"
LABEL_NONE = "无"
LABEL_REQUIRED = "(必填)"


class ReportGenerator:
    """Builds the text report for operations of one loaded document."""

    def __init__(self, doc: dict):
        self.doc = doc

    def generate(self, operations: list[ApiOperation]) -> str:
        """Render each operation as a block; blocks are separated by a blank line."""
        blocks = [self._render_operation(op) for op in operations]
        return "\n\n".join(blocks).rstrip()

    def _render_operation(self, op: ApiOperation) -> str:
        lines = [f"[{op.method.upper()}] {op.path}"]
        if op.summary:
            lines.append(f"{LABEL_SUMMARY}: {op.summary}")
        if op.tags:
            lines.append(f"{LABEL_TAGS}: {', '.join(op.tags)}")

        lines.append(f"{LABEL_REQUEST}:")
        lines.extend(self._request_lines(op.operation) or [f"- {LABEL_NONE}"])

        lines.append(f"{LABEL_RESPONSE}:")
        lines.extend(self._response_lines(op.operation) or [f"- {LABEL_NONE}"])
        return "\n".join(lines)

    # -- request --------------------------------------------------------------

    def _request_lines(self, operation: dict) -> list[str]:
        lines = []

        groups: dict[str, list[dict]] = {}
        for param in _as_list(operation.get("parameters")):
            param = resolve_schema(self.doc, param)
            if not param:
                continue
            location = param.get("in") if isinstance(param.get("in"), str) else "unknown"
            groups.setdefault(location, []).append(param)

        for location in sorted(groups):
            lines.append(f"- {location}:")
            for param in groups[location]:
                name = param.get("name") or "(unnamed)"
                type_text = schema_to_type_text(self.doc, _parameter_schema(param))
                lines.append(f"  - {_field_text(name, type_text, param.get('required') is True, param.get('description'))}")

        body_schema = self._request_body_schema(operation)
        if body_schema is not None:
            lines.append("- body:")
            lines.extend(f"  {line}" for line in self._schema_lines(body_schema))

        return lines

    def _request_body_schema(self, operation: dict) -> dict | None:
        body = operation.get("requestBody")
        if not isinstance(body, dict):
            return None
        body = resolve_schema(self.doc, body)
        return _json_schema(body.get("content"))

    # -- response -------------------------------------------------------------

    def _response_lines(self, operation: dict) -> list[str]:
        response = self._preferred_response(operation.get("responses"))
        if response is None:
            return []

        schema = _json_schema(response.get("content"))
        if schema is None and isinstance(response.get("schema"), dict):
            schema = response["schema"]
        if schema is None:
            return []
        return self._schema_lines(schema)

    def _preferred_response(self, responses) -> dict | None:
        if not isinstance(responses, dict) or not responses:
            return None
        # YAML loads unquoted status codes as ints
        by_code = {str(code): resp for code, resp in responses.items()}
        # an empty `200:` entry loads as None and falls through
        for code in PREFERRED_RESPONSES:
            if isinstance(by_code.get(code), dict):
                return resolve_schema(self.doc, by_code[code])
        for response in by_code.values():
            if isinstance(response, dict):
                return resolve_schema(self.doc, response)
        return None

    # -- shared ---------------------------------------------------------------

    def _schema_lines(self, schema: dict) -> list[str]:
        fields = flatten_schema_fields(self.doc, schema)
        if not fields:
            return [f"- {schema_to_type_text(self.doc, schema)}"]
        return [f"- {_format_field(f)}" for f in fields]


def build_report(doc: dict, operations: list[ApiOperation]) -> str:
    """Render the report for ``operations``; empty input gives ``""``."""
    if not operations:
        return ""
    return ReportGenerator(doc).generate(operations)


def _format_field(field: FieldInfo) -> str:
    return _field_text(field.name, field.type, field.required, field.description)


def _field_text(name: str, type_text: str, required: bool, description) -> str:
    text = f"{name}: {type_text}"
    if required:
        text += f" {LABEL_REQUIRED}"
    if isinstance(description, str) and description:
        text += f" {description}"
    return text


def _parameter_schema(param: dict) -> dict | None:
    """OpenAPI 3 ``schema``, or the Swagger 2 inline type/format/items."""
    if isinstance(param.get("schema"), dict):
        return param["schema"]
    if param.get("type"):
        schema = {"type": param["type"]}
        for key in ("format", "items", "enum"):
            if key in param:
                schema[key] = param[key]
        return schema
    return None


def _json_schema(content) -> dict | None:
    if not isinstance(content, dict):
        return None
    for content_type in JSON_CONTENT_TYPES:
        media = content.get(content_type)
        if isinstance(media, dict) and isinstance(media.get("schema"), dict):
            return media["schema"]
    return None


def _as_list(value) -> list:
    return value if isinstance(value, list) else []
