"""公共测试夹具"""

from unittest.mock import Mock

import pytest

from commandments.core import SimpleSender
from commandments.utils.testing import RoutingMainCommand


@pytest.fixture
def host_plugin():
    """模拟宿主插件上下文"""
    plugin = Mock()
    plugin.name = "HostPlugin"
    return plugin


@pytest.fixture
def main_command(host_plugin):
    return RoutingMainCommand(host_plugin)


@pytest.fixture
def admin():
    return SimpleSender("admin", permissions={"admin.use", "main.info"})


@pytest.fixture
def guest():
    return SimpleSender("guest")
