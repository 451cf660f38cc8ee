"""配置项字段定义."""

from .base import (
    FIELD_CLASSES,
    BaseOptionField,
    ChoiceOptionField,
    FieldMetadata,
    OptionField,
    OptionValue,
    RadioOptionField,
    SelectOptionField,
    TextOptionField,
)

__all__ = [
    "FIELD_CLASSES",
    "BaseOptionField",
    "ChoiceOptionField",
    "FieldMetadata",
    "OptionField",
    "OptionValue",
    "RadioOptionField",
    "SelectOptionField",
    "TextOptionField",
]
