import pytest
from pydantic import ValidationError as PydanticValidationError

from plugin_options.constants import OptionFieldType
from plugin_options.forms import OptionSchemaBuilder
from plugin_options.settings import Settings, get_settings


@pytest.mark.unit
def test_settings_defaults() -> None:
    settings = Settings.load()

    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.option_required_message == "Please enter a value for the field '{name}'"
    assert settings.option_default_visible_rows == 1


@pytest.mark.unit
def test_settings_normalizes_log_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings.load().log_level == "DEBUG"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("LOG_LEVEL", "verbose"),
        ("LOG_FORMAT", "xml"),
        ("OPTION_REQUIRED_MESSAGE", "missing placeholder"),
        ("OPTION_DEFAULT_VISIBLE_ROWS", "0"),
    ],
)
def test_settings_rejects_invalid_values(monkeypatch, key, value) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(PydanticValidationError):
        Settings.load()


@pytest.mark.unit
def test_builder_reads_required_message_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("OPTION_REQUIRED_MESSAGE", "{name} 为必填项")
    monkeypatch.setenv("OPTION_DEFAULT_VISIBLE_ROWS", "4")
    get_settings.cache_clear()

    builder = OptionSchemaBuilder()
    builder.add_field(OptionFieldType.SELECT, {"name": "City", "values": ["NYC"]})

    assert builder.get_required_message("City") == "City 为必填项"
    assert builder.get_visible_rows("City") == 4
