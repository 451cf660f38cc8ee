"""插件配置页服务.

职责:
- 查询插件 ID 与已保存的配置项,合并到表单构建器
- 生成渲染端需要的上下文(包括供前端脚本使用的 JSON 镜像)
- 校验提交的配置项取值
- 不负责模板渲染与持久化
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from plugin_options.constants import ErrorMessages
from plugin_options.errors import NotFoundError, ValidationError
from plugin_options.services.plugin_options.option_values_validator import (
    OptionValidationResult,
    OptionValuesValidator,
)
from plugin_options.utils.structlog_config import log_debug, log_info, log_warning

if TYPE_CHECKING:
    from plugin_options.forms.schema_builder import OptionSchemaBuilder
    from plugin_options.types import ContextDict, PluginLookup, PluginOptionStore

MODULE = "plugin_options.services"


class PluginOptionFormService:
    """插件配置页渲染上下文与取值校验服务."""

    def __init__(
        self,
        plugin_lookup: PluginLookup,
        option_store: PluginOptionStore,
        validator: OptionValuesValidator | None = None,
    ) -> None:
        """初始化服务并注入插件查询与配置项存储."""
        self._plugin_lookup = plugin_lookup
        self._option_store = option_store
        self._validator = validator or OptionValuesValidator()

    def resolve_plugin_id(self, folder_name: str) -> int:
        """根据插件目录名获取插件 ID.

        Raises:
            NotFoundError: 插件不存在时抛出.

        """
        plugin_id = self._plugin_lookup.get_plugin_id(folder_name)
        if plugin_id is None:
            log_warning("插件不存在", module=MODULE, folder_name=folder_name)
            raise NotFoundError(
                ErrorMessages.PLUGIN_NOT_FOUND.format(folder_name=folder_name),
                message_key="PLUGIN_NOT_FOUND",
                extra={"folder_name": folder_name},
            )
        return plugin_id

    def build_context(
        self,
        builder: OptionSchemaBuilder,
        folder_name: str,
        *,
        is_admin: bool = False,
    ) -> ContextDict:
        """合并已保存取值并生成渲染上下文.

        没有声明任何字段时返回空上下文,不查询插件与存储.

        Args:
            builder: 已声明字段的表单构建器.
            folder_name: 插件目录名.
            is_admin: 当前用户是否为管理员,原样透传给渲染端.

        Returns:
            渲染上下文字典.

        Raises:
            NotFoundError: 插件不存在时抛出.

        """
        if not builder.has_fields:
            log_debug("插件未声明配置项,跳过渲染", module=MODULE, folder_name=folder_name)
            return {}

        plugin_id = self.resolve_plugin_id(folder_name)
        options = self._option_store.get_options(plugin_id)
        builder.resolve_values(options, plugin_id)
        description = builder.build_description(is_admin=is_admin)

        option_elements = {item["name"]: item for item in description.fields}
        # 前端脚本按字段名查表判断是否可选
        not_required = dict.fromkeys(description.not_required, True)
        context: ContextDict = {
            "option_elements": option_elements,
            "option_elements_json": json.dumps(option_elements),
            "option_headers": description.headers,
            "option_not_required": not_required,
            "option_not_required_json": json.dumps(not_required),
            "option_required_message": description.required_messages,
            "option_required_message_json": json.dumps(description.required_messages),
            "option_select_multiple": description.select_multiple,
            "option_select_visible": description.select_visible_rows,
            "plugin_id": plugin_id,
            "is_admin": description.is_admin,
        }
        log_info(
            "插件配置页上下文生成完成",
            module=MODULE,
            folder_name=folder_name,
            plugin_id=plugin_id,
            field_count=len(option_elements),
        )
        return context

    def validate_submission(self, builder: OptionSchemaBuilder, payload: Mapping[str, Any]) -> OptionValidationResult:
        """校验提交的配置项取值.

        Raises:
            ValidationError: 任一字段校验失败时抛出,字段错误位于 ``extra["errors"]``.

        """
        result = self._validator.validate(builder, payload)
        if not result.is_valid:
            first_message = next(iter(result.errors.values()))
            raise ValidationError(
                first_message,
                message_key="OPTION_VALUES_INVALID",
                extra={"errors": dict(result.errors)},
            )
        return result


__all__ = ["PluginOptionFormService"]
