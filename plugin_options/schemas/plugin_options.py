"""插件配置项声明与持久化取值的 schema."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_validator,
)

from plugin_options.constants import ErrorMessages
from plugin_options.schemas.base import PayloadSchema
from plugin_options.types import OptionValueData


def _as_choice_text(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    return value


class OptionValuePayload(PayloadSchema):
    """单选/下拉可选项的声明.

    `default_selection` 作为 `is_default` 的别名保留.
    """

    value: StrictStr
    display_value: StrictStr | None = None
    is_default: bool = Field(default=False, validation_alias=AliasChoices("is_default", "default_selection"))

    @model_validator(mode="before")
    @classmethod
    def _expand_scalar(cls, data: Any) -> Any:
        if isinstance(data, str | int | float) and not isinstance(data, bool):
            return {"value": str(data)}
        return data

    @field_validator("value", "display_value", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_choice_text(value)

    @model_validator(mode="after")
    def _fill_display_value(self) -> OptionValuePayload:
        if self.display_value is None:
            self.display_value = self.value
        return self


class OptionFieldArgs(PayloadSchema):
    """`add_field` 的参数集合."""

    name: StrictStr
    values: list[OptionValuePayload] | None = None
    default_value: OptionValueData = None
    label: StrictStr | None = None
    id: int | None = None
    value: OptionValueData = None
    validation_regex: StrictStr | None = None

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        # name 作为元数据与已保存取值的匹配键,原样保留
        if not value.strip():
            raise ValueError("配置项 name 不能为空")
        return value

    @field_validator("validation_regex")
    @classmethod
    def _validate_regex(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None:
            return None
        try:
            re.compile(value)
        except re.error as exc:
            name = info.data.get("name", "")
            raise ValueError(ErrorMessages.OPTION_REGEX_INVALID.format(name=name)) from exc
        return value


class PersistedOption(BaseModel):
    """已保存的插件配置项."""

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    id: int | None = None
    option_name: StrictStr
    option_value: OptionValueData = None

    @classmethod
    def coerce(cls, item: PersistedOption | Mapping[str, Any] | object) -> PersistedOption:
        """将存储层返回的 Mapping 或 ORM 对象统一转换为 PersistedOption."""
        if isinstance(item, PersistedOption):
            return item
        return cls.model_validate(item)
