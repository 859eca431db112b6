"""Configuration layer - environment settings and strategy configuration"""

from .log_setup import configure_logging
from .settings import Settings, get_settings
from .strategy_config import StrategyConfig

__all__ = ["Settings", "StrategyConfig", "configure_logging", "get_settings"]
