"""
Commandments 测试工具模块

提供用于插件与命令测试的辅助类：
```python
from commandments.utils.testing import RecordingSubCommand, RoutingMainCommand, make_plugin

plugin = make_plugin("Demo", commands={"demo": {"permission": "demo.use"}})
main = RoutingMainCommand(plugin)
main.register_sub_command(RecordingSubCommand(plugin, main, permission="demo.info"))
```
"""

from .commands import RecordingSubCommand, RoutingMainCommand
from .plugin import make_plugin

__all__ = [
    "RecordingSubCommand",
    "RoutingMainCommand",
    "make_plugin",
]
