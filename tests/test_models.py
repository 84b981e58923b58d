from api_picker.parser.base import ApiOperation, FieldInfo


class TestFieldInfo:
    def test_create_required_field(self):
        f = FieldInfo(name="user.id", type="string", required=True)
        assert f.name == "user.id"
        assert f.required is True
        assert f.description is None

    def test_create_field_with_description(self):
        f = FieldInfo(name="age", type="integer", required=False, description="User age")
        assert f.description == "User age"


class TestApiOperation:
    def test_create_minimal_operation(self):
        op = ApiOperation(
            id="get:/api/users",
            path="/api/users",
            method="get",
            operation={"responses": {}},
        )
        assert op.tags is None
        assert op.summary is None

    def test_operation_serialization_roundtrip(self):
        op = ApiOperation(
            id="delete:/api/users/{id}:deleteUser",
            path="/api/users/{id}",
            method="delete",
            tags=["users"],
            summary="Delete user",
            operation={"operationId": "deleteUser"},
        )
        data = op.model_dump()
        op2 = ApiOperation(**data)
        assert op2 == op
        assert op2.operation["operationId"] == "deleteUser"
