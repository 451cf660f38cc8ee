"""常量模块。

集中管理插件配置项相关的系统常量。

主要常量：
- OptionFieldType: 配置项控件类型
- ErrorMessages: 错误消息常量
- HttpStatus: HTTP 状态码常量
"""

# 导入HTTP状态码常量（使用Python标准库）
from http import HTTPStatus as HttpStatus

from .option_types import (
    DEFAULT_INVALID_MESSAGE,
    DEFAULT_REQUIRED_MESSAGE,
    DEFAULT_VISIBLE_ROWS,
    OptionFieldType,
)
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    LogLevel,
)

__all__ = [
    "DEFAULT_INVALID_MESSAGE",
    "DEFAULT_REQUIRED_MESSAGE",
    "DEFAULT_VISIBLE_ROWS",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "HttpStatus",
    "LogLevel",
    "OptionFieldType",
]
