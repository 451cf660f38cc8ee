"""插件配置项 - 表单定义、取值合并与校验.

插件声明配置字段(文本、单选、下拉),与已保存的取值合并后输出渲染端使用的表单描述及校验元数据.
"""

from plugin_options.constants import OptionFieldType
from plugin_options.errors import AppError, NotFoundError, SchemaError, ValidationError
from plugin_options.forms import OptionFormDescription, OptionSchemaBuilder
from plugin_options.services.plugin_options import OptionValuesValidator, PluginOptionFormService

__all__ = [
    "AppError",
    "NotFoundError",
    "OptionFieldType",
    "OptionFormDescription",
    "OptionSchemaBuilder",
    "OptionValuesValidator",
    "PluginOptionFormService",
    "SchemaError",
    "ValidationError",
]
