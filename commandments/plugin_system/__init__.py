"""插件系统"""

from .manifest import PluginManifest, MANIFEST_NAME
from .base_plugin import Plugin
from .manager import PluginManager

__all__ = [
    "PluginManifest",
    "MANIFEST_NAME",
    "Plugin",
    "PluginManager",
]
