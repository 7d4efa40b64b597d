"""Commandments: 带权限检查的子命令注册与分发"""

from commandments.core import (
    Command,
    CommandExecutor,
    MainCommand,
    SubCommand,
    CommandSender,
    SimpleSender,
    ConsoleSender,
)
from commandments.plugin_system import Plugin, PluginManager, PluginManifest
from commandments.utils import (
    commandments_config,
    get_log,
    setup_logging,
    CommandmentsError,
    CommandmentsValueError,
    ManifestError,
    PluginStateError,
    CommandExecutionError,
)

__version__ = "1.0.0"

__all__ = [
    "Command",
    "CommandExecutor",
    "MainCommand",
    "SubCommand",
    "CommandSender",
    "SimpleSender",
    "ConsoleSender",
    "Plugin",
    "PluginManager",
    "PluginManifest",
    "commandments_config",
    "get_log",
    "setup_logging",
    "CommandmentsError",
    "CommandmentsValueError",
    "ManifestError",
    "PluginStateError",
    "CommandExecutionError",
]
