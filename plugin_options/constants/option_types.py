"""配置项控件类型与默认值常量."""

from enum import Enum


class OptionFieldType(str, Enum):
    """配置项控件类型.

    取值与插件声明时使用的元素常量保持一致.
    """

    TEXT = "text_element"
    RADIO = "radio_element"
    SELECT = "select_element"

    @property
    def has_choices(self) -> bool:
        """是否为需要 values 的选择型控件."""
        return self in (OptionFieldType.RADIO, OptionFieldType.SELECT)


DEFAULT_REQUIRED_MESSAGE = "Please enter a value for the field '{name}'"
DEFAULT_INVALID_MESSAGE = "The value for the field '{name}' is invalid"
DEFAULT_VISIBLE_ROWS = 1
