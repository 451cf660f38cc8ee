import pytest

from plugin_options.constants import ErrorCategory, ErrorSeverity
from plugin_options.errors import AppError, NotFoundError, SchemaError, ValidationError, map_exception_to_status


@pytest.mark.unit
def test_schema_error_metadata() -> None:
    error = SchemaError()

    assert error.message == "配置项定义无效"
    assert error.category is ErrorCategory.VALIDATION
    assert error.severity is ErrorSeverity.MEDIUM
    assert error.status_code == 400
    assert error.recoverable is True


@pytest.mark.unit
def test_app_error_resolves_message_from_key() -> None:
    error = AppError(message_key="RESOURCE_NOT_FOUND")

    assert error.message == "资源不存在"
    assert error.recoverable is False


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (SchemaError(), 400),
        (ValidationError(), 400),
        (NotFoundError(), 404),
        (RuntimeError("boom"), 500),
    ],
)
def test_map_exception_to_status(error, expected) -> None:
    assert map_exception_to_status(error) == expected
