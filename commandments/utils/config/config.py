"""
全局配置

从 YAML 文件加载，文件不存在时使用默认值。
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from ..error import CommandmentsValueError
from ..logger import get_log
from .constants import CONFIG_PATH, DEFAULT_PERMISSION_MESSAGE

LOG = get_log("Config")

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CommandmentsConfig(BaseModel):
    """
    全局配置

    配置项：
        - debug: 调试模式，开启后日志级别强制为 DEBUG
        - log_level: 日志级别
        - permission_message: 权限不足时发送给命令发送者的默认提示
        - warn_on_overwrite: 子命令重名覆盖时是否输出警告
    """

    debug: bool = False
    log_level: str = "INFO"
    permission_message: str = DEFAULT_PERMISSION_MESSAGE
    warn_on_overwrite: bool = True

    @field_validator("log_level", mode="before")
    def _upper_level(cls, v):
        v = str(v).upper()
        if v not in _LEVELS:
            raise ValueError(f"未知日志级别: {v}")
        return v

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CommandmentsConfig":
        """从字典构建配置，校验失败时抛出 CommandmentsValueError"""
        try:
            return cls(**(data or {}))
        except ValidationError as e:
            raise CommandmentsValueError("config", str(e)) from e

    @classmethod
    def load(cls, path: Union[str, Path] = CONFIG_PATH) -> "CommandmentsConfig":
        """
        从 YAML 文件加载配置

        Args:
            path: 配置文件路径

        Returns:
            配置实例，文件不存在时返回默认配置

        Raises:
            CommandmentsValueError: 文件内容不是合法的 YAML 映射或字段校验失败
        """
        path = Path(path)
        if not path.exists():
            LOG.debug(f"配置文件 {path} 不存在，使用默认配置")
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CommandmentsValueError(str(path), f"YAML 解析失败: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise CommandmentsValueError(str(path), "顶层必须是映射")

        LOG.debug(f"已加载配置文件 {path}")
        return cls.from_dict(data)


commandments_config = CommandmentsConfig.load()
