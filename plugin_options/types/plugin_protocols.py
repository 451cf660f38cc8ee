"""插件查询与配置项存储的协议类型.

具体的持久化实现由宿主应用提供,这里只约定最小接口.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol, TypeAlias

from .structures import OptionValueData


class _PersistedOptionRecord(Protocol):
    """已持久化配置项的最小属性集合."""

    @property
    def id(self) -> int | None: ...

    @property
    def option_name(self) -> str: ...

    @property
    def option_value(self) -> OptionValueData: ...


PersistedOptionLike: TypeAlias = _PersistedOptionRecord | Mapping[str, OptionValueData]


class PluginLookup(Protocol):
    """插件查询协议."""

    def get_plugin_id(self, folder_name: str) -> int | None:
        """协议方法: 根据插件目录名返回插件 ID,不存在时返回 None."""
        ...


class PluginOptionStore(Protocol):
    """插件配置项存储协议."""

    def get_options(self, plugin_id: int) -> Iterable[PersistedOptionLike] | None:
        """协议方法: 返回插件已保存的全部配置项."""
        ...


__all__ = ["PersistedOptionLike", "PluginLookup", "PluginOptionStore"]
