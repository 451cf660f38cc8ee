import json

import pytest

from plugin_options.constants import OptionFieldType
from plugin_options.errors import NotFoundError, ValidationError
from plugin_options.forms import OptionSchemaBuilder
from plugin_options.services.plugin_options import PluginOptionFormService


def _build_twitter_schema() -> OptionSchemaBuilder:
    builder = OptionSchemaBuilder()
    builder.add_field(OptionFieldType.TEXT, {"name": "email"})
    builder.add_field_header("email", "Please add an email address for this plugin")
    builder.add_field(OptionFieldType.TEXT, {"name": "Location", "default_value": "New York"})
    builder.add_field(OptionFieldType.TEXT, {"name": "Bio"})
    builder.set_field_optional("Bio")
    builder.add_field(
        OptionFieldType.RADIO,
        {"name": "Gender", "values": [{"value": "F"}, {"value": "M"}, {"value": "O", "is_default": True}]},
    )
    return builder


@pytest.mark.unit
def test_build_context_is_noop_without_fields(plugin_lookup, option_store) -> None:
    service = PluginOptionFormService(plugin_lookup, option_store)

    context = service.build_context(OptionSchemaBuilder(), "twitter")

    assert context == {}
    assert plugin_lookup.calls == []
    assert option_store.calls == []


@pytest.mark.unit
def test_build_context_raises_for_unknown_plugin(plugin_lookup, option_store) -> None:
    service = PluginOptionFormService(plugin_lookup, option_store)

    with pytest.raises(NotFoundError) as exc_info:
        service.build_context(_build_twitter_schema(), "missing")

    assert exc_info.value.message_key == "PLUGIN_NOT_FOUND"
    assert exc_info.value.status_code == 404
    assert option_store.calls == []


@pytest.mark.unit
def test_build_context_merges_persisted_values(plugin_lookup, option_store) -> None:
    service = PluginOptionFormService(plugin_lookup, option_store)

    context = service.build_context(_build_twitter_schema(), "twitter", is_admin=True)

    elements = context["option_elements"]
    assert list(elements) == ["email", "Location", "Bio", "Gender"]
    assert elements["email"]["value"] == "a@b.com"
    assert elements["email"]["id"] == 7
    assert elements["Location"]["value"] == "New York"
    assert "value" not in elements["Bio"]
    assert elements["Gender"]["value"] == "F"
    assert context["option_headers"] == {"email": "Please add an email address for this plugin"}
    assert context["option_not_required"] == {"Bio": True}
    assert context["plugin_id"] == 1
    assert context["is_admin"] is True
    assert option_store.calls == [1]


@pytest.mark.unit
def test_build_context_json_mirrors_match_description(plugin_lookup, option_store) -> None:
    service = PluginOptionFormService(plugin_lookup, option_store)

    context = service.build_context(_build_twitter_schema(), "twitter")

    assert json.loads(context["option_elements_json"]) == context["option_elements"]
    assert json.loads(context["option_not_required_json"]) == {"Bio": True}
    assert json.loads(context["option_required_message_json"]) == context["option_required_message"]


@pytest.mark.unit
def test_build_context_tolerates_store_without_options(plugin_lookup, option_store) -> None:
    service = PluginOptionFormService(plugin_lookup, option_store)

    context = service.build_context(_build_twitter_schema(), "facebook")

    assert context["plugin_id"] == 2
    assert "value" not in context["option_elements"]["email"]
    assert context["option_elements"]["Gender"]["default_selection"] == ["O"]


@pytest.mark.unit
def test_validate_submission_raises_with_field_errors(plugin_lookup, option_store) -> None:
    service = PluginOptionFormService(plugin_lookup, option_store)

    with pytest.raises(ValidationError) as exc_info:
        service.validate_submission(_build_twitter_schema(), {"email": "a@b.com", "Gender": "X"})

    errors = exc_info.value.extra["errors"]
    assert errors == {
        "Location": "Please enter a value for the field 'Location'",
        "Gender": "The value for the field 'Gender' is invalid",
    }
    assert exc_info.value.message_key == "OPTION_VALUES_INVALID"


@pytest.mark.unit
def test_validate_submission_returns_cleaned_values(plugin_lookup, option_store) -> None:
    service = PluginOptionFormService(plugin_lookup, option_store)

    result = service.validate_submission(
        _build_twitter_schema(),
        {"email": " a@b.com ", "Location": "Boston", "Gender": "O"},
    )

    assert result.values == {"email": "a@b.com", "Location": "Boston", "Gender": "O"}
