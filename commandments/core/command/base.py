"""
宿主命令对象与执行器接口

Command 描述插件清单中声明的一个顶层命令，CommandExecutor 是宿主在命令被调用时
回调的接口：on_command(sender, command, label, args)。
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from commandments.utils import (
    get_log,
    commandments_config,
    CommandExecutionError,
    PluginStateError,
)

if TYPE_CHECKING:
    from commandments.core.sender import CommandSender
    from commandments.plugin_system import Plugin

LOG = get_log("Command")


class CommandExecutor(ABC):
    """命令执行器"""

    @abstractmethod
    def on_command(
        self,
        sender: "CommandSender",
        command: "Command",
        label: str,
        args: List[str],
    ) -> bool:
        """
        处理一次命令调用

        Args:
            sender: 命令发送者
            command: 被调用的命令对象
            label: 调用时使用的名称（可能是别名）
            args: 命令参数

        Returns:
            命令是否被正确使用，返回 False 时宿主会向发送者回送 usage
        """


class Command(BaseModel):
    """插件清单中声明的顶层命令"""

    name: str
    description: str = ""
    usage: str = "/<command>"
    aliases: List[str] = Field(default_factory=list)
    permission: Optional[str] = None
    permission_message: Optional[str] = None

    _plugin: Optional["Plugin"] = PrivateAttr(default=None)
    _executor: Optional[CommandExecutor] = PrivateAttr(default=None)

    @field_validator("name", mode="before")
    def _lower_name(cls, v): return str(v).lower()

    @field_validator("aliases", mode="before")
    def _lower_aliases(cls, v):
        if isinstance(v, str):
            v = [v]
        return [str(a).lower() for a in (v or [])]

    @field_validator("permission", mode="before")
    def _lower_permission(cls, v): return str(v).lower() if v else None

    @property
    def labels(self) -> List[str]:
        return [self.name, *self.aliases]

    @property
    def plugin(self) -> Optional["Plugin"]:
        return self._plugin

    @property
    def executor(self) -> Optional[CommandExecutor]:
        """绑定的执行器，未绑定时回退到所属插件"""
        return self._executor if self._executor is not None else self._plugin

    def bind_plugin(self, plugin: "Plugin") -> None:
        self._plugin = plugin

    def set_executor(self, executor: Optional[CommandExecutor]) -> None:
        self._executor = executor

    def test_permission(self, sender: "CommandSender") -> bool:
        """检查发送者是否可以使用此命令，不可用时向其回送权限提示"""
        if not self.permission or sender.has_permission(self.permission):
            return True
        message = self.permission_message or commandments_config.permission_message
        if message:
            sender.send_message(message)
        return False

    def execute(self, sender: "CommandSender", label: str, args: List[str]) -> bool:
        """
        执行命令

        Returns:
            执行器的返回值；权限不足时返回 True（提示已回送）

        Raises:
            PluginStateError: 所属插件未启用
            CommandExecutionError: 执行器抛出异常
        """
        plugin = self._plugin
        if plugin is not None and not plugin.enabled:
            raise PluginStateError(
                f"无法执行命令 '{label}'：插件 {plugin.name} 未启用"
            )

        if not self.test_permission(sender):
            LOG.debug(f"{sender.name} 无权使用命令 {self.name}")
            return True

        executor = self.executor
        if executor is None:
            LOG.warning(f"命令 {self.name} 没有绑定执行器")
            return False

        try:
            result = executor.on_command(sender, self, label, args)
        except Exception as e:
            raise CommandExecutionError(
                label, plugin.name if plugin is not None else None, e
            ) from e

        if not result and self.usage:
            for line in self.usage.replace("<command>", label).split("\n"):
                sender.send_message(line)
        return bool(result)
