"""插件配置项服务."""

from .option_form_service import PluginOptionFormService
from .option_values_validator import OptionValidationResult, OptionValuesValidator

__all__ = ["OptionValidationResult", "OptionValuesValidator", "PluginOptionFormService"]
