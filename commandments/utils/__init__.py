"""Commandments 工具包"""

from commandments.utils.logger import get_log, setup_logging
from commandments.utils.error import (
    CommandmentsError,
    CommandmentsValueError,
    ManifestError,
    PluginStateError,
    CommandExecutionError,
)
from commandments.utils.config import commandments_config
from commandments.utils.config import commandments_config as config

__all__ = [
    "commandments_config", "config", "get_log", "setup_logging",
    "CommandmentsError", "CommandmentsValueError", "ManifestError",
    "PluginStateError", "CommandExecutionError",
]
