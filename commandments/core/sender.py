"""
命令发送者

宿主只向命令层暴露两个能力：权限查询和消息回送。
权限判断为精确匹配（忽略大小写），不做通配符展开或角色继承。
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Set

from commandments.utils import get_log

LOG = get_log("Sender")


class CommandSender(ABC):
    """命令发送者接口"""

    @property
    @abstractmethod
    def name(self) -> str:
        """发送者名称"""

    @abstractmethod
    def has_permission(self, permission: str) -> bool:
        """检查发送者是否拥有指定权限"""

    @abstractmethod
    def send_message(self, message: str) -> None:
        """向发送者回送消息"""


class SimpleSender(CommandSender):
    """
    持有固定权限集合的发送者

    已发送给该发送者的消息按顺序记录在 messages 中。
    """

    def __init__(self, name: str, permissions: Iterable[str] = (), op: bool = False):
        self._name = name
        self._permissions: Set[str] = {p.lower() for p in permissions}
        self.op = op
        self.messages: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def permissions(self) -> Set[str]:
        return set(self._permissions)

    def has_permission(self, permission: str) -> bool:
        if self.op:
            return True
        return permission.lower() in self._permissions

    def add_permission(self, permission: str) -> None:
        self._permissions.add(permission.lower())

    def remove_permission(self, permission: str) -> None:
        self._permissions.discard(permission.lower())

    def send_message(self, message: str) -> None:
        LOG.debug(f"-> {self._name}: {message}")
        self.messages.append(message)

    def __repr__(self) -> str:
        return f"SimpleSender({self._name!r}, op={self.op})"


class ConsoleSender(CommandSender):
    """控制台，拥有全部权限"""

    @property
    def name(self) -> str:
        return "CONSOLE"

    def has_permission(self, permission: str) -> bool:
        return True

    def send_message(self, message: str) -> None:
        LOG.info(message)
