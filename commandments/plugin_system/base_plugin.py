"""
插件基类
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from commandments.utils import get_log
from commandments.core.command import Command, CommandExecutor
from .manifest import PluginManifest

if TYPE_CHECKING:
    from commandments.core.sender import CommandSender


class Plugin(CommandExecutor):
    """
    插件基类

    插件本身也是一个命令执行器：清单中声明的命令在未单独绑定执行器时
    回退到插件的 on_command。

    使用示例：
        ```python
        class WarpPlugin(Plugin):
            def on_enable(self):
                self.get_command("warp").set_executor(WarpCommand(self))
        ```
    """

    def __init__(
        self,
        manifest: PluginManifest,
        data_folder: Optional[Union[str, Path]] = None,
    ):
        self._manifest = manifest
        self._data_folder = Path(data_folder) if data_folder is not None else None
        self._logger = get_log(manifest.name)
        self._enabled = False
        for command in manifest.commands.values():
            command.bind_plugin(self)

    # -------------------------------------------------------------------------
    # 生命周期钩子
    # -------------------------------------------------------------------------

    def on_enable(self) -> None:
        """插件启用时调用"""

    def on_disable(self) -> None:
        """插件停用时调用"""

    def on_command(
        self,
        sender: "CommandSender",
        command: Command,
        label: str,
        args: List[str],
    ) -> bool:
        return False

    def _set_enabled(self, enabled: bool) -> None:
        """由 PluginManager 调用"""
        if enabled == self._enabled:
            return
        if enabled:
            self.on_enable()
            self._enabled = True
        else:
            try:
                self.on_disable()
            finally:
                self._enabled = False

    # -------------------------------------------------------------------------
    # 属性
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._manifest.name

    @property
    def version(self) -> str:
        return self._manifest.version

    @property
    def manifest(self) -> PluginManifest:
        return self._manifest

    @property
    def data_folder(self) -> Optional[Path]:
        return self._data_folder

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def commands(self) -> List[Command]:
        return list(self._manifest.commands.values())

    def get_command(self, name: str) -> Optional[Command]:
        """获取本插件清单中声明的命令（不区分大小写）"""
        return self._manifest.commands.get(name.lower())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, {self.version!r})"
