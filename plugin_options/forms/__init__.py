"""
插件配置项表单包

集中管理配置项字段定义与表单构建器。
"""

from .definitions.base import (
    FieldMetadata,
    OptionField,
    OptionValue,
    RadioOptionField,
    SelectOptionField,
    TextOptionField,
)
from .schema_builder import OptionFormDescription, OptionSchemaBuilder, options_by_name

__all__ = [
    "FieldMetadata",
    "OptionField",
    "OptionFormDescription",
    "OptionSchemaBuilder",
    "OptionValue",
    "RadioOptionField",
    "SelectOptionField",
    "TextOptionField",
    "options_by_name",
]
