"""配置常量"""

CONFIG_PATH = "config.yaml"

DEFAULT_PERMISSION_MESSAGE = "你没有执行该命令的权限。"
