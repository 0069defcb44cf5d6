"""
utils package.
=============

Does: Provide shared helpers for config loading and topic-filtered debug
      tracing.
"""

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import debug, reload_topics

__all__ = [
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    "debug",
    "reload_topics",
]

__docformat__ = "google"
