"""
主命令

持有 名称 -> 子命令 的映射。按名称路由到具体子命令的逻辑由子类的 on_command 实现。
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from commandments.utils import get_log, commandments_config
from .base import CommandExecutor

if TYPE_CHECKING:
    from .sub_command import SubCommand

LOG = get_log("MainCommand")


class MainCommand(CommandExecutor):
    """
    主命令基类

    子命令映射通过 sub_commands 原样暴露（不是副本），调用方可以绕过
    register_sub_command 直接增删。
    """

    def __init__(self, plugin: Any):
        """
        Args:
            plugin: 宿主插件，原样传递给子命令
        """
        self._plugin = plugin
        self._sub_commands: Dict[str, "SubCommand"] = {}

    def register_sub_command(self, sub_command: "SubCommand") -> None:
        """注册子命令，同名子命令会被覆盖"""
        name = sub_command.name
        previous = self._sub_commands.get(name)
        if (
            previous is not None
            and previous is not sub_command
            and commandments_config.warn_on_overwrite
        ):
            LOG.warning(f"子命令 {name} 已存在，{previous!r} 将被 {sub_command!r} 覆盖")
        self._sub_commands[name] = sub_command

    def get_sub_command(self, name: str) -> Optional["SubCommand"]:
        """按名称查找子命令（不区分大小写）"""
        return self._sub_commands.get(name.lower())

    @property
    def plugin(self) -> Any:
        return self._plugin

    @property
    def sub_commands(self) -> Dict[str, "SubCommand"]:
        return self._sub_commands
