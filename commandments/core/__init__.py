from .command import Command, CommandExecutor, MainCommand, SubCommand
from .sender import CommandSender, SimpleSender, ConsoleSender

__all__ = [
    "Command",
    "CommandExecutor",
    "MainCommand",
    "SubCommand",
    "CommandSender",
    "SimpleSender",
    "ConsoleSender",
]
