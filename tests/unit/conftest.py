# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供环境隔离与插件查询/配置项存储的内存替身。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import pytest

from plugin_options.settings import Settings, get_settings
from plugin_options.utils.structlog_config import structlog_config


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - 避免开发者本机环境变量或 `.env` 影响测试稳定性
    - 每个用例重新读取 Settings
    """
    for key in ("OPTION_REQUIRED_MESSAGE", "OPTION_DEFAULT_VISIBLE_ROWS", "LOG_LEVEL", "APP_NAME"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOG_FORMAT", "console")
    monkeypatch.setenv("ENABLE_DEBUG_LOG", "false")
    get_settings.cache_clear()
    structlog_config.configure(Settings.load())
    yield
    get_settings.cache_clear()


class FakePluginLookup:
    """按目录名返回插件 ID 的内存替身."""

    def __init__(self, plugins: Mapping[str, int]) -> None:
        self.plugins = dict(plugins)
        self.calls: list[str] = []

    def get_plugin_id(self, folder_name: str) -> int | None:
        self.calls.append(folder_name)
        return self.plugins.get(folder_name)


class FakeOptionStore:
    """按插件 ID 返回已保存配置项的内存替身."""

    def __init__(self, options: Mapping[int, Iterable[object]] | None = None) -> None:
        self.options = {key: list(value) for key, value in (options or {}).items()}
        self.calls: list[int] = []

    def get_options(self, plugin_id: int) -> list[object] | None:
        self.calls.append(plugin_id)
        return self.options.get(plugin_id)


@pytest.fixture
def plugin_lookup() -> FakePluginLookup:
    return FakePluginLookup({"twitter": 1, "facebook": 2})


@pytest.fixture
def option_store() -> FakeOptionStore:
    return FakeOptionStore(
        {
            1: [
                {"id": 7, "option_name": "email", "option_value": "a@b.com"},
                {"id": 8, "option_name": "Gender", "option_value": "F"},
            ],
        },
    )
