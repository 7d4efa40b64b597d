"""配置模块"""

from .config import CommandmentsConfig, commandments_config
from .constants import CONFIG_PATH, DEFAULT_PERMISSION_MESSAGE

__all__ = [
    "CommandmentsConfig",
    "commandments_config",
    "CONFIG_PATH",
    "DEFAULT_PERMISSION_MESSAGE",
]
