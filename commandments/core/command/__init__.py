"""命令子系统"""

from .base import Command, CommandExecutor
from .main_command import MainCommand
from .sub_command import SubCommand

__all__ = [
    "Command",
    "CommandExecutor",
    "MainCommand",
    "SubCommand",
]
