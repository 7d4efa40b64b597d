"""
插件清单

插件目录下的 manifest.toml 声明插件元数据和它拥有的顶层命令：

```toml
name = "WarpPlugin"
version = "1.0.0"

[commands.warp]
description = "传送点管理"
usage = "/<command> <set|go|list>"
aliases = ["w"]
permission = "warp.use"
```
"""

from pathlib import Path
from typing import Any, Dict, Union

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from commandments.utils import get_log, ManifestError
from commandments.core.command import Command

LOG = get_log("Manifest")

MANIFEST_NAME = "manifest.toml"


class PluginManifest(BaseModel):
    """插件清单"""

    name: str
    version: str
    author: str = ""
    description: str = ""
    commands: Dict[str, Command] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    def _version_str(cls, v): return str(v)

    @field_validator("commands", mode="before")
    def _inject_names(cls, v):
        # 表名即命令名
        if not isinstance(v, dict):
            return v
        commands = {}
        for key, body in v.items():
            if isinstance(body, dict):
                body = {**body, "name": key}
            commands[str(key).lower()] = body
        return commands

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<dict>") -> "PluginManifest":
        try:
            return cls(**data)
        except ValidationError as e:
            raise ManifestError(source, str(e)) from e

    @classmethod
    def load(cls, path: Union[str, Path]) -> "PluginManifest":
        """
        加载插件清单

        Args:
            path: manifest.toml 文件路径，或包含它的插件目录

        Raises:
            ManifestError: 文件不存在、TOML 解析失败或缺少必填字段
        """
        path = Path(path)
        if path.is_dir():
            path = path / MANIFEST_NAME
        if not path.exists():
            raise ManifestError(str(path), "文件不存在")

        try:
            data = toml.load(str(path))
        except toml.TomlDecodeError as e:
            raise ManifestError(str(path), f"TOML 解析失败: {e}") from e

        manifest = cls.from_dict(data, source=str(path))
        LOG.debug(
            "已加载插件清单 %s (%s)，声明命令: %s",
            manifest.name, manifest.version, ", ".join(manifest.commands) or "无",
        )
        return manifest
