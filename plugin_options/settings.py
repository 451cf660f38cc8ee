"""插件配置项 - 统一配置读取与校验.

目标:
- 将环境变量读取、默认值、校验集中到单一入口,避免散落在各模块中重复解析.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量与本地 `.env`(可选)读取配置.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from plugin_options.constants import DEFAULT_REQUIRED_MESSAGE, DEFAULT_VISIBLE_ROWS, LogLevel

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

APP_VERSION = "1.0.0"
DEFAULT_APP_NAME = "plugin-options"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"

_LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    """运行时设置集合."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    app_name: str = Field(default=DEFAULT_APP_NAME, validation_alias="APP_NAME")
    app_version: str = APP_VERSION

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="LOG_LEVEL")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, validation_alias="LOG_FORMAT")
    enable_debug_log: bool = Field(default=False, validation_alias="ENABLE_DEBUG_LOG")

    # 必填字段未填写时的默认提示, `{name}` 会被替换为字段名
    option_required_message: str = Field(
        default=DEFAULT_REQUIRED_MESSAGE,
        validation_alias="OPTION_REQUIRED_MESSAGE",
    )
    option_default_visible_rows: int = Field(
        default=DEFAULT_VISIBLE_ROWS,
        validation_alias="OPTION_DEFAULT_VISIBLE_ROWS",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in LogLevel.__members__:
            raise ValueError(f"LOG_LEVEL 不合法: {value}")
        return normalized

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        normalized = value.lower()
        if normalized not in _LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT 仅支持 {', '.join(_LOG_FORMATS)}")
        return normalized

    @field_validator("option_required_message")
    @classmethod
    def _validate_required_message(cls, value: str) -> str:
        if "{name}" not in value:
            raise ValueError("OPTION_REQUIRED_MESSAGE 必须包含 {name} 占位符")
        return value

    @field_validator("option_default_visible_rows")
    @classmethod
    def _validate_visible_rows(cls, value: int) -> int:
        if value < 1:
            raise ValueError("OPTION_DEFAULT_VISIBLE_ROWS 必须大于等于 1")
        return value

    @classmethod
    def load(cls) -> Settings:
        """从环境变量加载 Settings 并执行必要校验."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """返回进程内共享的 Settings 实例."""
    return Settings.load()


__all__ = ["APP_VERSION", "Settings", "get_settings"]
