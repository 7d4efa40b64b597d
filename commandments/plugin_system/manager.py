"""
插件管理器

负责插件的注册、启用、停用，以及维护 标签 -> 命令 的映射并分发命令调用。
"""

from typing import Dict, List, Optional, TYPE_CHECKING

from commandments.utils import get_log, CommandmentsValueError
from .base_plugin import Plugin

if TYPE_CHECKING:
    from commandments.core.command import Command
    from commandments.core.sender import CommandSender

LOG = get_log("PluginManager")


class PluginManager:
    """
    插件管理器

    每个命令以 名称、别名 和 "<插件名>:<名称>" 三种标签注册。
    普通标签先到先得，冲突时后来者只保留带插件前缀的标签。

    使用示例：
        ```python
        manager = PluginManager()
        manager.register(WarpPlugin(PluginManifest.load("plugins/warp")))
        manager.enable_all()

        manager.dispatch(sender, "warp", ["set", "home"])
        ```
    """

    def __init__(self):
        self._plugins: Dict[str, Plugin] = {}
        self._known_commands: Dict[str, "Command"] = {}

    # -------------------------------------------------------------------------
    # 插件管理
    # -------------------------------------------------------------------------

    def register(self, plugin: Plugin) -> None:
        """注册插件并登记其命令"""
        if plugin.name.lower() in {name.lower() for name in self._plugins}:
            raise CommandmentsValueError("plugin", f"插件 {plugin.name} 已注册")

        self._plugins[plugin.name] = plugin
        prefix = plugin.name.lower()
        for command in plugin.commands:
            self._known_commands[f"{prefix}:{command.name}"] = command
            for label in command.labels:
                existing = self._known_commands.get(label)
                if existing is not None:
                    LOG.warning(
                        f"插件 {plugin.name} 的命令标签 {label} 已被 "
                        f"{existing.plugin.name if existing.plugin else '未知插件'} 占用，"
                        f"请使用 {prefix}:{command.name}"
                    )
                    continue
                self._known_commands[label] = command
        LOG.info(f"已注册插件 {plugin.name} {plugin.version}")

    def enable(self, name: str) -> Plugin:
        """启用插件"""
        if name not in self._plugins:
            raise KeyError(f"插件 {name} 未注册")
        plugin = self._plugins[name]
        if not plugin.enabled:
            plugin._set_enabled(True)
            LOG.info(f"插件 {name} 已启用")
        return plugin

    def disable(self, name: str) -> None:
        """停用插件"""
        plugin = self._plugins.get(name)
        if plugin is None or not plugin.enabled:
            return
        plugin._set_enabled(False)
        LOG.info(f"插件 {name} 已停用")

    def enable_all(self) -> None:
        for name in self._plugins:
            self.enable(name)

    def disable_all(self) -> None:
        for name in list(self._plugins.keys()):
            self.disable(name)

    def get(self, name: str) -> Optional[Plugin]:
        return self._plugins.get(name)

    def has(self, name: str) -> bool:
        return name in self._plugins

    def list_plugins(self) -> List[str]:
        return list(self._plugins.keys())

    # -------------------------------------------------------------------------
    # 命令分发
    # -------------------------------------------------------------------------

    def get_command(self, label: str) -> Optional["Command"]:
        """按标签查找命令（不区分大小写）"""
        return self._known_commands.get(label.lower())

    def dispatch(self, sender: "CommandSender", label: str, args: List[str]) -> bool:
        """
        分发一次命令调用

        Args:
            sender: 命令发送者
            label: 调用时使用的命令标签
            args: 已拆分好的参数

        Returns:
            是否找到对应命令并被正确使用
        """
        command = self.get_command(label)
        if command is None:
            LOG.debug(f"未知命令: {label}")
            return False
        return command.execute(sender, label, args)
