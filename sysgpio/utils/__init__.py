"""Utility modules: configuration loading."""

from sysgpio.utils.config_loader import (
    BlinkConfig,
    GpioConfig,
    SysfsConfig,
    clear_config_cache,
    get_config,
    load_config,
)

__all__ = [
    "BlinkConfig",
    "GpioConfig",
    "SysfsConfig",
    "clear_config_cache",
    "get_config",
    "load_config",
]
