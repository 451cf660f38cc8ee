"""插件配置项的基础字段定义模型.

这些定义由表单构建器生成,并被服务层与前端渲染共享,确保字段描述只有唯一来源.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias

from plugin_options.constants import DEFAULT_VISIBLE_ROWS, OptionFieldType
from plugin_options.types import JsonDict, OptionValueData


@dataclass(slots=True, frozen=True)
class OptionValue:
    """单选/下拉的可选项描述."""

    value: str
    display_value: str
    is_default: bool = False

    def to_payload(self) -> JsonDict:
        return {
            "value": self.value,
            "display_value": self.display_value,
            "is_default": self.is_default,
        }


@dataclass(slots=True, kw_only=True)
class BaseOptionField:
    """所有配置项共享的身份与取值信息.

    Attributes:
        name: 配置项名称,在同一表单内唯一.
        label: 展示用标签,缺省时由渲染端使用 name.
        default_value: 未保存过取值时使用的默认值.
        id: 已保存配置项的主键,合并后写入.
        value: 当前生效的取值,合并后写入.
        validation_regex: 文本取值需要匹配的正则.

    """

    field_type: ClassVar[OptionFieldType]

    name: str
    label: str | None = None
    default_value: OptionValueData = None
    id: int | None = None
    value: OptionValueData = None
    validation_regex: str | None = None

    def to_payload(self, *, required: bool = True) -> JsonDict:
        """转换为渲染端使用的字典,未设置的可选属性不输出."""
        payload: JsonDict = {"name": self.name, "type": self.field_type.value, "required": required}
        for key in ("label", "default_value", "id", "value", "validation_regex"):
            attr = getattr(self, key)
            if attr is not None:
                payload[key] = attr
        return payload


@dataclass(slots=True, kw_only=True)
class TextOptionField(BaseOptionField):
    """文本配置项."""

    field_type: ClassVar[OptionFieldType] = OptionFieldType.TEXT


@dataclass(slots=True, kw_only=True)
class ChoiceOptionField(BaseOptionField):
    """带可选项的配置项基类."""

    values: list[OptionValue] = field(default_factory=list)

    @property
    def allowed_values(self) -> list[str]:
        return [item.value for item in self.values]

    @property
    def default_selection(self) -> list[str]:
        """按声明顺序返回标记为默认选中的取值."""
        return [item.value for item in self.values if item.is_default]

    def to_payload(self, *, required: bool = True) -> JsonDict:
        payload = BaseOptionField.to_payload(self, required=required)
        payload["values"] = [item.to_payload() for item in self.values]
        payload["default_selection"] = self.default_selection
        return payload


@dataclass(slots=True, kw_only=True)
class RadioOptionField(ChoiceOptionField):
    """单选配置项."""

    field_type: ClassVar[OptionFieldType] = OptionFieldType.RADIO


@dataclass(slots=True, kw_only=True)
class SelectOptionField(ChoiceOptionField):
    """下拉配置项,可通过元数据开启多选."""

    field_type: ClassVar[OptionFieldType] = OptionFieldType.SELECT


OptionField: TypeAlias = TextOptionField | RadioOptionField | SelectOptionField

FIELD_CLASSES: dict[OptionFieldType, type[OptionField]] = {
    OptionFieldType.TEXT: TextOptionField,
    OptionFieldType.RADIO: RadioOptionField,
    OptionFieldType.SELECT: SelectOptionField,
}


@dataclass(slots=True)
class FieldMetadata:
    """按字段名登记的渲染与校验元数据.

    可以先于字段声明登记;字段未声明时,标题、自定义必填提示与多选设置仍按名称原样输出到表单描述.
    """

    header: str | None = None
    required_message: str | None = None
    required: bool = True
    select_multiple: bool = False
    visible_rows: int = DEFAULT_VISIBLE_ROWS
