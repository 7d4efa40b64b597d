"""
日志工具

所有模块通过 get_log 获取 "commandments" 命名空间下的标准库 logger，
由宿主在启动时调用 setup_logging 配置输出。
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER = "commandments"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log(name: str) -> logging.Logger:
    """获取指定组件的 logger"""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> logging.Logger:
    """
    配置控制台日志输出

    Args:
        level: 日志级别，None 则读取全局配置（debug 模式下强制为 DEBUG）
        log_format: 日志格式，None 则使用默认格式

    Returns:
        commandments 根 logger
    """
    from commandments.utils.config import commandments_config

    if level is None:
        level = "DEBUG" if commandments_config.debug else commandments_config.log_level

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(log_format or DEFAULT_FORMAT))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers = [handler]
    logger.setLevel(logging.getLevelName(level.upper()))
    return logger
