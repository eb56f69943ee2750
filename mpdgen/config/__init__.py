from mpdgen.config.app_config import AppConfig, ConfigManager, PackagerSettings, TranscoderSettings
from mpdgen.config.config_validator import ConfigValidator

__all__ = ["AppConfig", "ConfigManager", "ConfigValidator", "PackagerSettings", "TranscoderSettings"]
