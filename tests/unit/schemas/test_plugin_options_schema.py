from types import SimpleNamespace

import pytest

from plugin_options.errors import SchemaError, ValidationError
from plugin_options.schemas import OptionFieldArgs, OptionValuePayload, PersistedOption, validate_or_raise


@pytest.mark.unit
def test_option_value_accepts_default_selection_alias() -> None:
    parsed = OptionValuePayload.model_validate({"value": "O", "display_value": "Other", "default_selection": True})

    assert parsed.is_default is True


@pytest.mark.unit
def test_option_value_expands_scalars_and_fills_display_value() -> None:
    parsed = OptionValuePayload.model_validate(3)

    assert parsed.value == "3"
    assert parsed.display_value == "3"
    assert parsed.is_default is False


@pytest.mark.unit
def test_option_field_args_keep_name_verbatim_and_ignore_unknown_keys() -> None:
    parsed = OptionFieldArgs.model_validate({"name": "  email ", "placeholder": "ignored"})

    assert parsed.name == "  email "
    assert parsed.values is None


@pytest.mark.unit
def test_validate_or_raise_uses_requested_error_type() -> None:
    with pytest.raises(SchemaError) as exc_info:
        validate_or_raise(OptionFieldArgs, {"name": "   "}, message_key="OPTION_SCHEMA_INVALID", error_cls=SchemaError)

    assert exc_info.value.message == "配置项 name 不能为空"
    assert exc_info.value.extra == {"field": "name"}


@pytest.mark.unit
def test_validate_or_raise_defaults_to_validation_error() -> None:
    with pytest.raises(ValidationError):
        validate_or_raise(PersistedOption, {"option_value": "x"})


@pytest.mark.unit
def test_persisted_option_coerces_mappings_and_objects() -> None:
    from_mapping = PersistedOption.coerce({"id": 7, "option_name": "email", "option_value": "a@b.com"})
    from_object = PersistedOption.coerce(SimpleNamespace(id=8, option_name="Gender", option_value="F"))

    assert from_mapping.id == 7
    assert from_object.option_name == "Gender"
    assert PersistedOption.coerce(from_mapping) is from_mapping


@pytest.mark.unit
def test_invalid_regex_reports_field_name() -> None:
    with pytest.raises(SchemaError) as exc_info:
        validate_or_raise(
            OptionFieldArgs,
            {"name": "service_id", "validation_regex": "(\\d+"},
            error_cls=SchemaError,
        )

    assert exc_info.value.message == "配置项 'service_id' 的 validation_regex 无法编译"
    assert exc_info.value.extra == {"field": "validation_regex"}


@pytest.mark.unit
def test_persisted_option_accepts_multi_select_list() -> None:
    parsed = PersistedOption.coerce({"id": 1, "option_name": "City", "option_value": ["NYC", "LA"]})

    assert parsed.option_value == ["NYC", "LA"]
