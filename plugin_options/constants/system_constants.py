"""插件配置项 - 系统常量定义

统一管理日志级别、错误分类与错误文案.
"""

from enum import Enum


class LogLevel(Enum):
    """日志级别枚举."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    EXTERNAL = "external"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    RESOURCE_NOT_FOUND = "资源不存在"

    # 配置项定义错误
    OPTION_SCHEMA_INVALID = "配置项定义无效"
    OPTION_NAME_REQUIRED = "配置项缺少 name"
    OPTION_VALUES_REQUIRED = "单选/下拉配置项 '{name}' 必须提供 values"
    OPTION_TYPE_UNSUPPORTED = "不支持的配置项类型: {field_type}"
    OPTION_REGEX_INVALID = "配置项 '{name}' 的 validation_regex 无法编译"
    OPTION_VISIBLE_ROWS_INVALID = "配置项 '{name}' 的可见行数必须大于等于 1"

    # 插件
    PLUGIN_NOT_FOUND = "插件不存在: {folder_name}"
    OPTION_VALUES_INVALID = "插件配置项校验失败"
