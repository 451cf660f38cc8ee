"""插件配置项提交取值校验.

按构建器登记的元数据校验提交的表单取值:
- 必填字段为空时返回字段的必填提示
- 可选字段为空时跳过
- 文本字段按 validation_regex 校验
- 单选/下拉字段取值必须在声明的 values 中,多选下拉接受列表
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from plugin_options.constants import DEFAULT_INVALID_MESSAGE
from plugin_options.forms.definitions.base import ChoiceOptionField, SelectOptionField
from plugin_options.utils.structlog_config import log_debug

if TYPE_CHECKING:
    from plugin_options.forms.definitions.base import OptionField
    from plugin_options.forms.schema_builder import OptionSchemaBuilder
    from plugin_options.types import JsonValue


@dataclass(slots=True)
class OptionValidationResult:
    """校验结果.

    Attributes:
        values: 通过校验并规范化后的取值.
        errors: 字段名到错误提示.

    """

    values: dict[str, JsonValue] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_blank(raw: Any) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str):
        return not raw.strip()
    if isinstance(raw, Sequence):
        return len(raw) == 0
    return False


class OptionValuesValidator:
    """插件配置项取值校验器."""

    def __init__(self, invalid_message: str = DEFAULT_INVALID_MESSAGE) -> None:
        self._invalid_message = invalid_message

    def validate(self, builder: OptionSchemaBuilder, payload: Mapping[str, Any]) -> OptionValidationResult:
        """校验提交的取值,未声明的键会被忽略.

        Args:
            builder: 已声明字段的表单构建器.
            payload: 提交的表单数据.

        Returns:
            OptionValidationResult.

        """
        result = OptionValidationResult()
        for name, record in builder.fields.items():
            raw = payload.get(name)
            if _is_blank(raw):
                if builder.is_required(name):
                    result.errors[name] = builder.get_required_message(name)
                continue

            if isinstance(record, ChoiceOptionField):
                multiple = isinstance(record, SelectOptionField) and builder.is_select_multiple(name)
                cleaned = self._clean_choice(record, raw, multiple=multiple)
            else:
                cleaned = self._clean_text(record, raw)

            if cleaned is None:
                result.errors[name] = self._invalid_message.format(name=name)
            else:
                result.values[name] = cleaned

        log_debug(
            "插件配置项取值校验完成",
            module="plugin_options.services",
            field_count=len(builder.fields),
            error_fields=sorted(result.errors),
        )
        return result

    @staticmethod
    def _clean_text(record: OptionField, raw: Any) -> str | None:
        if isinstance(raw, Mapping | list | tuple):
            return None
        text = str(raw).strip()
        if record.validation_regex and re.search(record.validation_regex, text) is None:
            return None
        return text

    @staticmethod
    def _clean_choice(record: ChoiceOptionField, raw: Any, *, multiple: bool) -> str | list[str] | None:
        if isinstance(raw, Mapping):
            return None
        if isinstance(raw, list | tuple):
            if not multiple:
                return None
            items = [str(item) for item in raw]
        else:
            items = [str(raw)]

        allowed = set(record.allowed_values)
        if any(item not in allowed for item in items):
            return None
        return items if multiple else items[0]


__all__ = ["OptionValidationResult", "OptionValuesValidator"]
