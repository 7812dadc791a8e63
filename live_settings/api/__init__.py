"""对外服务层：把外部 config source / sink 绑定到编辑核心。"""

from live_settings.api.service import ConfigSink, ConfigSource, ConfigState, SettingsService

__all__ = ["ConfigSink", "ConfigSource", "ConfigState", "SettingsService"]
