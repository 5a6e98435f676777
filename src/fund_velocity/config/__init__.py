from .loader import ConfigError, load_config
from .models import AppConfig

# Config exports are intentionally small.
__all__ = ["AppConfig", "ConfigError", "load_config"]
