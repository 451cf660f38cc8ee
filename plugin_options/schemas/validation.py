"""Schema 校验与错误映射."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from plugin_options.errors import AppError, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_or_raise(
    model: type[ModelT],
    payload: object,
    *,
    message_key: str | None = None,
    error_cls: type[AppError] = ValidationError,
) -> ModelT:
    """执行 schema 校验并抛出项目异常.

    Args:
        model: pydantic model.
        payload: 待校验的 payload.
        message_key: 失败时使用的 message_key.
        error_cls: 抛出的异常类型,默认 ValidationError.

    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        message, field = _extract_first_error(exc)
        extra = {"field": field} if field else None
        raise error_cls(message, message_key=message_key, extra=extra) from None


def _extract_first_error(exc: PydanticValidationError) -> tuple[str, str | None]:
    errors = exc.errors()
    if not errors:
        return "参数校验失败", None

    first = errors[0]
    loc = first.get("loc")
    field = ".".join(str(part) for part in loc) if loc else None

    ctx = first.get("ctx")
    if isinstance(ctx, dict):
        raw_error = ctx.get("error")
        if isinstance(raw_error, BaseException):
            return str(raw_error), field

    msg = first.get("msg")
    if isinstance(msg, str) and msg.strip():
        return msg, field

    return "参数校验失败", field
