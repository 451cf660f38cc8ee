"""配置项相关的 pydantic schema."""

from .plugin_options import OptionFieldArgs, OptionValuePayload, PersistedOption
from .validation import validate_or_raise

__all__ = [
    "OptionFieldArgs",
    "OptionValuePayload",
    "PersistedOption",
    "validate_or_raise",
]
