"""插件配置项共享类型定义."""

from .plugin_protocols import PersistedOptionLike, PluginLookup, PluginOptionStore
from .structures import (
    ContextDict,
    JsonDict,
    JsonValue,
    LoggerExtra,
    OptionValueData,
    PayloadMapping,
    PayloadValue,
    ScalarValue,
    StructlogEventDict,
)

__all__ = [
    "ContextDict",
    "JsonDict",
    "JsonValue",
    "LoggerExtra",
    "OptionValueData",
    "PayloadMapping",
    "PayloadValue",
    "PersistedOptionLike",
    "PluginLookup",
    "PluginOptionStore",
    "ScalarValue",
    "StructlogEventDict",
]
