"""插件配置项的结构化日志配置与辅助函数."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, cast

import structlog

from plugin_options.settings import APP_VERSION, Settings, get_settings
from plugin_options.types import ContextDict, JsonValue, LoggerExtra, StructlogEventDict

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

LogField = JsonValue | ContextDict | LoggerExtra


class DebugFilter:
    """根据配置决定是否丢弃 DEBUG 日志的处理器.

    Attributes:
        enabled: 是否启用 DEBUG 日志.

    """

    def __init__(self, *, enabled: bool = False) -> None:
        self.enabled = enabled

    def set_enabled(self, *, enabled: bool) -> None:
        """设置是否启用 DEBUG 日志."""
        self.enabled = enabled

    def __call__(self, logger: BindableLogger, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """处理日志事件,未启用时丢弃 DEBUG 日志.

        Raises:
            structlog.DropEvent: 当事件为 DEBUG 且未启用调试日志时抛出.

        """
        del logger
        if method_name == "debug" and not self.enabled:
            raise structlog.DropEvent
        return event_dict


class StructlogConfig:
    """structlog 配置核心类.

    负责配置处理器链、调试日志过滤与输出格式.

    Attributes:
        debug_filter: 调试日志过滤器.
        configured: 是否已配置标志.

    Example:
        >>> config = StructlogConfig()
        >>> config.configure()
        >>> logger = get_logger('my_module')

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.app_name = "plugin-options"
        self.app_version = APP_VERSION
        self.configured = False

    def configure(self, settings: Settings | None = None) -> None:
        """初始化 structlog 处理器(幂等).

        可以多次调用,处理器链只会配置一次;传入 settings 时会刷新调试开关与全局上下文.

        Args:
            settings: 运行时设置,缺省时读取 `get_settings()`.

        Returns:
            None.

        """
        if settings is None and self.configured:
            return
        resolved = settings or get_settings()
        self.app_name = resolved.app_name
        self.app_version = resolved.app_version
        self.debug_filter.set_enabled(enabled=resolved.enable_debug_log)

        if self.configured:
            return

        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=resolved.log_level)
        processors = [
            self.debug_filter,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            self._add_global_context,
            self._get_renderer(resolved.log_format),
        ]
        structlog.configure(
            processors=cast("list[Processor]", processors),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        self.configured = True

    def _add_global_context(
        self,
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """附加应用名、版本等全局上下文."""
        event_dict["app_name"] = self.app_name
        event_dict["app_version"] = self.app_version
        event_dict["logger_name"] = getattr(_logger, "name", "unknown")
        return event_dict

    @staticmethod
    def _get_renderer(log_format: str) -> Processor:
        """根据配置返回渲染器.

        Args:
            log_format: `console` 或 `json`.

        Returns:
            structlog renderer.

        """
        if log_format == "json":
            return structlog.processors.JSONRenderer()
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.BoundLogger:
    """获取结构化日志记录器.

    Args:
        name: 日志记录器名称,通常使用模块名.

    Returns:
        绑定的 structlog 日志记录器实例.

    Example:
        >>> logger = get_logger('plugin_options')
        >>> logger.info('表单渲染完成', plugin_id=3)

    """
    structlog_config.configure()
    return structlog.get_logger(name)


def configure_structlog(settings: Settings | None = None) -> None:
    """按给定设置配置 structlog."""
    structlog_config.configure(settings)


def should_log_debug() -> bool:
    """检查是否应该记录调试日志."""
    return structlog_config.debug_filter.enabled


def log_info(message: str, module: str = "plugin_options", **kwargs: LogField) -> None:
    """记录信息级别日志.

    Args:
        message: 日志消息.
        module: 模块名称.
        **kwargs: 额外的上下文信息.

    Example:
        >>> log_info('配置项合并完成', module='forms', plugin_id=3)

    """
    logger = get_logger("plugin_options")
    logger.info(message, module=module, **kwargs)


def log_warning(
    message: str,
    module: str = "plugin_options",
    exception: Exception | None = None,
    **kwargs: LogField,
) -> None:
    """记录警告级别日志.

    Args:
        message: 日志消息.
        module: 模块名称.
        exception: 可选的异常对象.
        **kwargs: 额外的上下文信息.

    """
    logger = get_logger("plugin_options")
    if exception:
        logger.warning(message, module=module, exception=str(exception), **kwargs)
    else:
        logger.warning(message, module=module, **kwargs)


def log_error(
    message: str,
    module: str = "plugin_options",
    exception: Exception | None = None,
    **kwargs: LogField,
) -> None:
    """记录错误级别日志,传入异常时附带堆栈信息."""
    logger = get_logger("plugin_options")
    if exception:
        logger.exception(message, module=module, error=str(exception), **kwargs)
    else:
        logger.error(message, module=module, **kwargs)


def log_debug(message: str, module: str = "plugin_options", **kwargs: LogField) -> None:
    """记录调试级别日志.

    仅在启用调试日志时记录.

    """
    if not should_log_debug():
        return
    logger = get_logger("plugin_options")
    logger.debug(message, module=module, **kwargs)


__all__ = [
    "StructlogConfig",
    "configure_structlog",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "should_log_debug",
    "structlog_config",
]
