"""
子命令

子命令是挂在某个 MainCommand 之下的“伪命令”：它们不在插件清单中声明，
也不直接绑定执行器，而是由 MainCommand 的路由逻辑按名称查找后调用。
"""

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Optional

from commandments.utils import get_log

if TYPE_CHECKING:
    from commandments.core.sender import CommandSender
    from .base import Command
    from .main_command import MainCommand

LOG = get_log("SubCommand")


class SubCommand(ABC):
    """
    带权限的子命令基类

    构造后所有属性只读，name 与 permission 统一转为小写，
    保证按名称查找和权限比较都不区分大小写。

    使用示例：
        ```python
        class SetWarp(SubCommand):
            def __init__(self, parent):
                super().__init__(parent.plugin, parent, "set", "/warp set <name>", "warp.set")

            def execute(self, sender, command, label, args):
                ...
                return True

        main.register_sub_command(SetWarp(main))
        ```
    """

    def __init__(
        self,
        plugin: Any,
        parent: "MainCommand",
        name: str,
        usage: str,
        permission: str,
    ):
        """
        Args:
            plugin: 宿主插件，通常来自 MainCommand.plugin
            parent: 持有此子命令的 MainCommand（弱引用，不持有所有权）
            name: 子命令名称，用作查找键
            usage: 展示给发送者的用法说明
            permission: 使用此子命令所需的权限
        """
        self._plugin = plugin
        self._parent = weakref.ref(parent)
        self._name = name.lower()
        self._usage = usage
        self._permission = permission.lower()

    def execute_if_permissible(
        self,
        sender: "CommandSender",
        command: "Command",
        label: str,
        args: List[str],
    ) -> bool:
        """
        发送者拥有所需权限时执行子命令

        Returns:
            发送者是否拥有所需权限
        """
        if sender.has_permission(self._permission):
            self.execute(sender, command, label, args)
            return True
        LOG.debug(f"{sender.name} 缺少权限 {self._permission}，拒绝执行 {self._name}")
        return False

    @abstractmethod
    def execute(
        self,
        sender: "CommandSender",
        command: "Command",
        label: str,
        args: List[str],
    ) -> bool:
        """子命令逻辑，返回值含义由实现自行决定"""

    @property
    def plugin(self) -> Any:
        return self._plugin

    @property
    def parent(self) -> Optional["MainCommand"]:
        """所属 MainCommand，已被回收时为 None"""
        return self._parent()

    @property
    def name(self) -> str:
        return self._name

    @property
    def usage(self) -> str:
        return self._usage

    @property
    def permission(self) -> str:
        return self._permission

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, "
            f"permission={self._permission!r})"
        )
