"""
MainCommand 单元测试

测试：
- 子命令注册与查找
- 同名覆盖行为
- 子命令映射的原样暴露
- 路由子类示例
"""

import logging

import pytest
from unittest.mock import Mock

from commandments.core import MainCommand
from commandments.utils import commandments_config
from commandments.utils.testing import RecordingSubCommand


class TestMainCommandRegistry:
    """注册与查找测试"""

    def test_plugin_accessor(self, host_plugin, main_command):
        """测试宿主插件原样保存"""
        assert main_command.plugin is host_plugin

    def test_starts_empty(self, main_command):
        assert main_command.sub_commands == {}

    def test_register_uses_lowercase_name(self, host_plugin, main_command):
        """测试注册后可通过小写名称取回同一实例"""
        sub = RecordingSubCommand(host_plugin, main_command, name="Teleport")
        main_command.register_sub_command(sub)

        assert main_command.sub_commands["teleport"] is sub
        assert "Teleport" not in main_command.sub_commands

    def test_get_sub_command_case_insensitive(self, host_plugin, main_command):
        """测试查找不区分大小写"""
        sub = RecordingSubCommand(host_plugin, main_command, name="list")
        main_command.register_sub_command(sub)

        assert main_command.get_sub_command("LIST") is sub
        assert main_command.get_sub_command("missing") is None

    def test_duplicate_name_overwrites(self, host_plugin, main_command):
        """测试同名注册时后者覆盖前者"""
        first = RecordingSubCommand(host_plugin, main_command, name="info")
        second = RecordingSubCommand(host_plugin, main_command, name="INFO")

        main_command.register_sub_command(first)
        main_command.register_sub_command(second)

        assert len(main_command.sub_commands) == 1
        assert main_command.sub_commands["info"] is second

    def test_duplicate_name_logs_warning(self, host_plugin, main_command, caplog):
        """测试同名覆盖时记录警告"""
        main_command.register_sub_command(RecordingSubCommand(host_plugin, main_command))

        with caplog.at_level(logging.WARNING):
            main_command.register_sub_command(RecordingSubCommand(host_plugin, main_command))

        assert any("已存在" in record.message for record in caplog.records)

    def test_overwrite_warning_can_be_disabled(self, host_plugin, main_command, caplog,
                                               monkeypatch):
        """测试关闭覆盖警告后不再记录"""
        monkeypatch.setattr(commandments_config, "warn_on_overwrite", False)
        main_command.register_sub_command(RecordingSubCommand(host_plugin, main_command))

        with caplog.at_level(logging.WARNING):
            main_command.register_sub_command(RecordingSubCommand(host_plugin, main_command))

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_re_registering_same_instance_is_silent(self, host_plugin, main_command, caplog):
        sub = RecordingSubCommand(host_plugin, main_command)
        main_command.register_sub_command(sub)

        with caplog.at_level(logging.WARNING):
            main_command.register_sub_command(sub)

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert main_command.sub_commands == {"info": sub}

    def test_sub_commands_is_live_mapping(self, host_plugin, main_command):
        """测试直接修改返回的映射会反映到注册表"""
        sub = RecordingSubCommand(host_plugin, main_command, name="raw")
        main_command.sub_commands["raw"] = sub
        assert main_command.get_sub_command("raw") is sub

        main_command.sub_commands.pop("raw")
        assert main_command.get_sub_command("raw") is None
        assert main_command.sub_commands is main_command.sub_commands

    def test_on_command_is_abstract(self, host_plugin):
        """测试基类不提供路由逻辑"""
        with pytest.raises(TypeError):
            MainCommand(host_plugin)


class TestRoutingMainCommand:
    """路由示例测试"""

    @pytest.fixture
    def info(self, host_plugin, main_command):
        sub = RecordingSubCommand(host_plugin, main_command)
        main_command.register_sub_command(sub)
        return sub

    def test_routes_to_sub_command(self, main_command, info, admin):
        """测试按首个参数路由并去掉子命令名"""
        assert main_command.on_command(admin, Mock(), "main", ["info", "2"]) is True
        assert info.calls[0][3] == ["2"]

    def test_denied_sub_command_notifies_sender(self, main_command, info, guest):
        """测试权限不足时提示发送者"""
        assert main_command.on_command(guest, Mock(), "main", ["info"]) is True
        assert info.calls == []
        assert guest.messages == ["缺少权限: main.info"]

    def test_unknown_sub_command(self, main_command, info, admin):
        assert main_command.on_command(admin, Mock(), "main", ["nope"]) is False

    def test_no_args_lists_usage(self, main_command, info, admin):
        main_command.on_command(admin, Mock(), "main", [])
        assert admin.messages == ["/main info"]
