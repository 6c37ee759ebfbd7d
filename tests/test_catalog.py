from core.catalog import TRIGGER_VAPI_CALL, list_tools, tool_names


def test_catalog_lists_exactly_one_tool() -> None:
    tools = list_tools()

    assert len(tools) == 1
    assert tools[0].name == TRIGGER_VAPI_CALL == "trigger_vapi_call"
    assert tool_names() == ["trigger_vapi_call"]


def test_input_schema_requires_string_phone_number() -> None:
    schema = list_tools()[0].input_schema

    assert schema["type"] == "object"
    assert schema["properties"]["phoneNumber"]["type"] == "string"
    assert schema["required"] == ["phoneNumber"]


def test_descriptor_serializes_with_protocol_field_names() -> None:
    descriptor = list_tools()[0].to_dict()

    assert set(descriptor) == {"name", "description", "inputSchema"}
    assert "Vapi" in descriptor["description"]


def test_list_tools_returns_a_fresh_list() -> None:
    list_tools().clear()

    assert len(list_tools()) == 1
