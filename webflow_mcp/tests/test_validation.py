import pytest

from webflow_mcp.core.exceptions import UnknownToolError, ValidationError
from webflow_mcp.mcp import schemas
from webflow_mcp.mcp.validation import validate


def test_get_site_requires_site_id():
    with pytest.raises(ValidationError) as excinfo:
        validate("get_site", {})

    assert excinfo.value.tool_name == "get_site"
    assert excinfo.value.violations == ("siteId: missing required field",)


def test_get_site_rejects_empty_site_id():
    with pytest.raises(ValidationError) as excinfo:
        validate("get_site", {"siteId": ""})

    assert excinfo.value.violations == ("siteId: empty string where non-empty required",)


def test_get_site_rejects_non_string_site_id():
    with pytest.raises(ValidationError) as excinfo:
        validate("get_collections", {"siteId": 42})

    assert excinfo.value.violations == ("siteId: wrong type, expected string",)
    assert "Invalid arguments for get_collections" in str(excinfo.value)


def test_get_site_accepts_non_empty_site_id():
    params = validate("get_site", {"siteId": "abc"})

    assert isinstance(params, schemas.GetSiteInput)
    assert params.site_id == "abc"


@pytest.mark.parametrize(
    ("tool_name", "arguments"),
    [
        ("get_sites", {"extra": 1}),
        ("test_connection", {"extra": 1}),
        ("get_site", {"siteId": "abc", "extra": 1}),
        ("get_collections", {"siteId": "abc", "extra": 1}),
    ],
)
def test_extra_fields_are_ignored_for_every_tool(tool_name, arguments):
    params = validate(tool_name, arguments)

    assert "extra" not in params.model_dump()


def test_missing_arguments_are_treated_as_empty_object():
    assert validate("get_sites", None).model_dump() == {}
    assert validate("test_connection", None).message is None


def test_non_mapping_arguments_are_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate("get_sites", ["siteId"])

    assert excinfo.value.violations == ("arguments: expected an object",)


def test_test_connection_message_must_be_a_string():
    assert validate("test_connection", {"message": "hi"}).message == "hi"

    with pytest.raises(ValidationError) as excinfo:
        validate("test_connection", {"message": 5})

    assert excinfo.value.violations == ("message: wrong type, expected string",)


def test_test_connection_message_may_be_omitted_but_not_null():
    assert validate("test_connection", {}).message is None

    with pytest.raises(ValidationError) as excinfo:
        validate("test_connection", {"message": None})

    assert excinfo.value.violations == ("message: wrong type, expected string",)


def test_unknown_tool_has_no_shape():
    with pytest.raises(UnknownToolError) as excinfo:
        validate("delete_site", {"siteId": "abc"})

    assert str(excinfo.value) == "Unknown tool: delete_site"
