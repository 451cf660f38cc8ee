"""插件配置项表单构建器.

插件在渲染配置页前通过构建器声明字段及其元数据,构建器再与已保存的取值合并,
最终输出供渲染端使用的表单描述.

示例::

    builder = OptionSchemaBuilder()
    builder.add_field(OptionFieldType.TEXT, {"name": "email"})
    builder.add_field_header("email", "Please add an email address for this plugin")
    builder.add_field(OptionFieldType.TEXT, {"name": "Location", "default_value": "New York"})
    builder.set_field_optional("Bio")
    builder.add_field(
        OptionFieldType.RADIO,
        {
            "name": "Gender",
            "values": [
                {"value": "F", "display_value": "Female"},
                {"value": "M", "display_value": "Male"},
                {"value": "O", "display_value": "Other", "is_default": True},
            ],
        },
    )
    builder.set_select_multiple("City", True, 3)
    builder.resolve_values(store.get_options(plugin_id), plugin_id)
    description = builder.build_description(is_admin=True)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, NoReturn

from plugin_options.constants import ErrorMessages, OptionFieldType
from plugin_options.errors import SchemaError
from plugin_options.forms.definitions.base import (
    FIELD_CLASSES,
    FieldMetadata,
    OptionField,
    OptionValue,
    SelectOptionField,
)
from plugin_options.schemas.plugin_options import OptionFieldArgs, PersistedOption
from plugin_options.schemas.validation import validate_or_raise
from plugin_options.settings import get_settings
from plugin_options.types import JsonDict, PersistedOptionLike
from plugin_options.utils.structlog_config import log_debug, log_info, log_warning

MODULE = "plugin_options.forms"


@dataclass(slots=True)
class OptionFormDescription:
    """渲染端使用的完整表单描述.

    Attributes:
        fields: 按声明顺序排列的字段字典.
        headers: 字段名到标题文案.
        not_required: 被标记为可选的字段名,按标记顺序.
        required_messages: 字段名到必填提示.
        select_multiple: 字段名到是否多选.
        select_visible_rows: 字段名到可见行数.
        plugin_id: 合并时使用的插件 ID.
        is_admin: 调用方传入的管理员标记.

    """

    fields: list[JsonDict] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    not_required: list[str] = field(default_factory=list)
    required_messages: dict[str, str] = field(default_factory=dict)
    select_multiple: dict[str, bool] = field(default_factory=dict)
    select_visible_rows: dict[str, int] = field(default_factory=dict)
    plugin_id: int | None = None
    is_admin: bool = False

    def to_dict(self) -> JsonDict:
        return {
            "fields": [dict(item) for item in self.fields],
            "headers": dict(self.headers),
            "not_required": list(self.not_required),
            "required_messages": dict(self.required_messages),
            "select_multiple": dict(self.select_multiple),
            "select_visible_rows": dict(self.select_visible_rows),
            "plugin_id": self.plugin_id,
            "is_admin": self.is_admin,
        }


def options_by_name(options: Iterable[PersistedOptionLike] | None) -> dict[str, PersistedOption]:
    """按 option_name 建立已保存配置项索引,同名时后出现者覆盖先出现者.

    Args:
        options: 存储层返回的配置项列表,可为 None.

    Returns:
        option_name 到 PersistedOption 的字典.

    """
    indexed: dict[str, PersistedOption] = {}
    for item in options or ():
        option = PersistedOption.coerce(item)
        indexed[option.option_name] = option
    return indexed


class OptionSchemaBuilder:
    """插件配置项表单构建器.

    字段按名称登记,重复声明同名字段时以最后一次为准;元数据同样按名称登记,
    与字段声明的先后顺序无关.
    """

    def __init__(self, *, required_message: str | None = None, default_visible_rows: int | None = None) -> None:
        settings = get_settings()
        self._required_message_template = required_message or settings.option_required_message
        self._default_visible_rows = default_visible_rows or settings.option_default_visible_rows
        self._declarations: dict[str, OptionField] = {}
        self._fields: dict[str, OptionField] = {}
        self._metadata: dict[str, FieldMetadata] = {}
        self._not_required: list[str] = []
        self.plugin_id: int | None = None

    # ------------------------------------------------------------------ #
    # 字段声明
    # ------------------------------------------------------------------ #
    def add_field(self, field_type: OptionFieldType | str, args: Mapping[str, Any]) -> OptionField:
        """声明一个配置项.

        Args:
            field_type: 控件类型,接受 OptionFieldType 或其取值字符串.
            args: 字段参数,必须包含 name;单选/下拉必须包含 values.

        Returns:
            新登记的字段记录.

        Raises:
            SchemaError: 参数缺失或不合法时抛出,此时不会登记任何内容.

        """
        resolved_type = self._resolve_type(field_type)
        name = args.get("name") if isinstance(args, Mapping) else None
        if name is None:
            self._reject(ErrorMessages.OPTION_NAME_REQUIRED, message_key="OPTION_NAME_REQUIRED")
        if resolved_type.has_choices and args.get("values") is None:
            self._reject(
                ErrorMessages.OPTION_VALUES_REQUIRED.format(name=name),
                message_key="OPTION_VALUES_REQUIRED",
                name=str(name),
            )

        parsed = validate_or_raise(
            OptionFieldArgs,
            args,
            message_key="OPTION_SCHEMA_INVALID",
            error_cls=SchemaError,
        )
        common = {
            "name": parsed.name,
            "label": parsed.label,
            "default_value": parsed.default_value,
            "id": parsed.id,
            "value": parsed.value,
            "validation_regex": parsed.validation_regex,
        }
        if resolved_type.has_choices:
            values = [
                OptionValue(
                    value=item.value,
                    display_value=item.display_value or item.value,
                    is_default=item.is_default,
                )
                for item in parsed.values or []
            ]
            record = FIELD_CLASSES[resolved_type](values=values, **common)
        else:
            record = FIELD_CLASSES[resolved_type](**common)

        replaced = parsed.name in self._declarations
        self._declarations[parsed.name] = record
        self._fields[parsed.name] = replace(record)
        log_debug(
            "登记插件配置项",
            module=MODULE,
            option_name=parsed.name,
            option_type=resolved_type.value,
            replaced=replaced,
        )
        return self._fields[parsed.name]

    def add_field_header(self, name: str, text: str) -> None:
        """为字段登记标题文案."""
        self._meta(name).header = text

    def set_field_optional(self, name: str) -> None:
        """将字段标记为可选(默认必填)."""
        self._meta(name).required = False
        if name not in self._not_required:
            self._not_required.append(name)

    def add_required_message(self, name: str, text: str) -> None:
        """覆盖字段的必填提示."""
        self._meta(name).required_message = text

    def set_select_multiple(self, name: str, enabled: bool, visible_rows: int | None = None) -> None:
        """设置下拉字段是否多选以及可见行数.

        Args:
            name: 字段名.
            enabled: 是否允许多选.
            visible_rows: 渲染时的可见行数,缺省为默认行数.

        Raises:
            SchemaError: 可见行数小于 1 时抛出.

        """
        rows = self._default_visible_rows if visible_rows is None else visible_rows
        if rows < 1:
            self._reject(
                ErrorMessages.OPTION_VISIBLE_ROWS_INVALID.format(name=name),
                message_key="OPTION_VISIBLE_ROWS_INVALID",
                name=name,
            )
        metadata = self._meta(name)
        metadata.select_multiple = bool(enabled)
        metadata.visible_rows = rows

    # ------------------------------------------------------------------ #
    # 查询
    # ------------------------------------------------------------------ #
    @property
    def fields(self) -> dict[str, OptionField]:
        """按声明顺序返回字段字典(浅拷贝)."""
        return dict(self._fields)

    @property
    def has_fields(self) -> bool:
        return bool(self._fields)

    def get_field(self, name: str) -> OptionField | None:
        return self._fields.get(name)

    def is_required(self, name: str) -> bool:
        metadata = self._metadata.get(name)
        return metadata.required if metadata else True

    def get_required_message(self, name: str) -> str:
        metadata = self._metadata.get(name)
        if metadata and metadata.required_message:
            return metadata.required_message
        return self._required_message_template.format(name=name)

    def is_select_multiple(self, name: str) -> bool:
        metadata = self._metadata.get(name)
        return metadata.select_multiple if metadata else False

    def get_visible_rows(self, name: str) -> int:
        metadata = self._metadata.get(name)
        return metadata.visible_rows if metadata else self._default_visible_rows

    # ------------------------------------------------------------------ #
    # 合并与输出
    # ------------------------------------------------------------------ #
    def resolve_values(self, persisted_options: Iterable[PersistedOptionLike] | None, plugin_id: int | None) -> None:
        """将已保存的取值合并到字段上.

        已保存的取值优先,否则使用字段的 default_value,两者都没有时保留声明时的取值.
        每次合并都从字段声明重新计算,结果只取决于本次输入.

        Args:
            persisted_options: 存储层返回的配置项列表.
            plugin_id: 当前插件 ID.

        """
        indexed = options_by_name(persisted_options)
        matched = 0
        defaulted = 0
        for name, declared in self._declarations.items():
            record = replace(declared)
            self._fields[name] = record
            persisted = indexed.get(name)
            if persisted is not None:
                record.id = persisted.id
                record.value = persisted.option_value
                matched += 1
            elif record.default_value is not None:
                record.value = record.default_value
                defaulted += 1
        self.plugin_id = plugin_id
        log_info(
            "插件配置项取值合并完成",
            module=MODULE,
            plugin_id=plugin_id,
            field_count=len(self._fields),
            persisted_count=matched,
            default_count=defaulted,
        )

    def build_description(self, *, is_admin: bool = False) -> OptionFormDescription:
        """输出完整的表单描述.

        Args:
            is_admin: 调用方的管理员标记,原样透传.

        Returns:
            OptionFormDescription.

        """
        description = OptionFormDescription(plugin_id=self.plugin_id, is_admin=bool(is_admin))
        for name, record in self._fields.items():
            required = self.is_required(name)
            description.fields.append(record.to_payload(required=required))
            if required:
                description.required_messages[name] = self.get_required_message(name)
            if isinstance(record, SelectOptionField):
                description.select_multiple[name] = self.is_select_multiple(name)
                description.select_visible_rows[name] = self.get_visible_rows(name)

        for name, metadata in self._metadata.items():
            if metadata.header is not None:
                description.headers[name] = metadata.header
            if metadata.required_message:
                description.required_messages.setdefault(name, metadata.required_message)
            if metadata.select_multiple and name not in description.select_multiple:
                description.select_multiple[name] = metadata.select_multiple
                description.select_visible_rows[name] = metadata.visible_rows
        description.not_required = list(self._not_required)
        return description

    # ------------------------------------------------------------------ #
    # 内部工具
    # ------------------------------------------------------------------ #
    def _meta(self, name: str) -> FieldMetadata:
        metadata = self._metadata.get(name)
        if metadata is None:
            metadata = FieldMetadata(visible_rows=self._default_visible_rows)
            self._metadata[name] = metadata
        return metadata

    def _resolve_type(self, field_type: OptionFieldType | str) -> OptionFieldType:
        try:
            return OptionFieldType(field_type)
        except ValueError:
            self._reject(
                ErrorMessages.OPTION_TYPE_UNSUPPORTED.format(field_type=field_type),
                message_key="OPTION_TYPE_UNSUPPORTED",
                field_type=str(field_type),
            )

    @staticmethod
    def _reject(message: str, *, message_key: str, **extra: str) -> NoReturn:
        log_warning("插件配置项定义无效", module=MODULE, message_key=message_key, **extra)
        raise SchemaError(message, message_key=message_key, extra=extra)


__all__ = ["OptionFormDescription", "OptionSchemaBuilder", "options_by_name"]
