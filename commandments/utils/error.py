"""
错误类型定义
"""

from typing import Optional

from .logger import get_log

LOG = get_log("Commandments")


class CommandmentsError(Exception):
    """Commandments 基础异常，构造时记录错误日志"""

    logger = LOG

    def __init__(self, info: str, log: bool = True):
        if log:
            self.logger.error(f"{self.__class__.__name__}: {info}")
        self.info = info
        super().__init__(info)


class CommandmentsValueError(CommandmentsError, ValueError):
    """取值错误"""

    def __init__(self, var_name: str, reason: str, log: bool = True):
        self.var_name = var_name
        super().__init__(f"{var_name} 取值无效: {reason}", log=log)


class ManifestError(CommandmentsValueError):
    """插件清单文件错误"""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"插件清单 {path}", reason)


class PluginStateError(CommandmentsError):
    """插件状态错误（如向未启用的插件分发命令）"""


class CommandExecutionError(CommandmentsError):
    """命令执行器抛出了未处理的异常"""

    def __init__(self, label: str, plugin_name: Optional[str], cause: BaseException):
        self.label = label
        self.plugin_name = plugin_name
        self.cause = cause
        super().__init__(
            f"执行命令 '{label}' 时发生未处理的异常 (插件 {plugin_name}): {cause!r}"
        )
