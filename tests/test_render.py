from api_picker.schema.render import schema_to_type_text

DOC = {
    "components": {
        "schemas": {
            "Pet": {"type": "object", "properties": {"name": {"type": "string"}}},
            "Id": {"type": "integer", "format": "int64"},
            "Alias": {"$ref": "#/components/schemas/Id"},
            "Loop": {"$ref": "#/components/schemas/Loop"},
            "Tree": {"type": "array", "items": {"$ref": "#/components/schemas/Tree"}},
        }
    }
}


def render(schema):
    return schema_to_type_text(DOC, schema)


class TestPrimitives:
    def test_int64_renders_as_string(self):
        assert render({"type": "integer", "format": "int64"}) == "string"

    def test_uint64_renders_as_string(self):
        assert render({"type": "integer", "format": "uint64"}) == "string"

    def test_int32_keeps_format(self):
        assert render({"type": "integer", "format": "int32"}) == "integer(int32)"

    def test_bare_type(self):
        assert render({"type": "boolean"}) == "boolean"

    def test_string_with_format(self):
        assert render({"type": "string", "format": "date-time"}) == "string(date-time)"

    def test_string_enum_in_document_order(self):
        assert render({"type": "string", "enum": ["b", "a", 3, True, None]}) == "string(enum: b, a, 3, true, null)"

    def test_empty_enum_ignored(self):
        assert render({"type": "string", "enum": []}) == "string"


class TestContainers:
    def test_array_of_strings(self):
        assert render({"type": "array", "items": {"type": "string"}}) == "string[]"

    def test_array_without_items(self):
        assert render({"type": "array"}) == "unknown[]"

    def test_array_of_refs(self):
        assert render({"type": "array", "items": {"$ref": "#/components/schemas/Id"}}) == "string[]"

    def test_map(self):
        schema = {"type": "object", "additionalProperties": {"type": "integer"}}
        assert render(schema) == "map<string, integer>"

    def test_object_with_boolean_additional_properties(self):
        assert render({"type": "object", "additionalProperties": True}) == "object"

    def test_untyped_with_properties(self):
        assert render({"properties": {}}) == "object"


class TestCompositions:
    def test_one_of(self):
        assert render({"oneOf": [{"type": "string"}, {"type": "integer"}]}) == "string | integer"

    def test_any_of(self):
        assert render({"anyOf": [{"type": "string"}, {"type": "boolean"}]}) == "string | boolean"

    def test_all_of(self):
        schema = {"allOf": [{"$ref": "#/components/schemas/Pet"}, {"type": "object"}]}
        assert render(schema) == "object & object"


class TestReferences:
    def test_ref_is_resolved(self):
        assert render({"$ref": "#/components/schemas/Pet"}) == "object"

    def test_alias_chain(self):
        assert render({"$ref": "#/components/schemas/Alias"}) == "string"

    def test_external_ref_renders_name(self):
        assert render({"$ref": "https://example.com/common.json#/Money"}) == "Money"

    def test_self_alias_terminates(self):
        assert render({"$ref": "#/components/schemas/Loop"}) == "Loop"

    def test_recursive_array_terminates(self):
        assert render({"$ref": "#/components/schemas/Tree"}) == "Tree[]"


class TestMalformed:
    def test_none(self):
        assert render(None) == "unknown"

    def test_empty(self):
        assert render({}) == "unknown"

    def test_not_a_dict(self):
        assert render("string") == "unknown"

    def test_non_string_type(self):
        assert render({"type": ["string", "null"]}) == "unknown"
