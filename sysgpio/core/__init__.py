"""Core modules for sysgpio.

- gpio_enums: Direction and PinLevel enumerations
- paths: sysfs path kinds and their resolution
- exceptions: error taxonomy
- sysfs: SysfsGpio, the five pin operations
"""

from sysgpio.core.exceptions import (
    ConfigurationError,
    GpioError,
    GpioIOError,
    GpioParseError,
)
from sysgpio.core.gpio_enums import Direction, PinLevel
from sysgpio.core.paths import (
    DEFAULT_SYSFS_ROOT,
    DirectionPath,
    ExportPath,
    GpioPath,
    UnexportPath,
    ValuePath,
    resolve,
)
from sysgpio.core.sysfs import SysfsGpio

__all__ = [
    # Errors
    "GpioError",
    "GpioIOError",
    "GpioParseError",
    "ConfigurationError",
    # Enumerations
    "Direction",
    "PinLevel",
    # Paths
    "DEFAULT_SYSFS_ROOT",
    "GpioPath",
    "ExportPath",
    "UnexportPath",
    "ValuePath",
    "DirectionPath",
    "resolve",
    # Operations
    "SysfsGpio",
]
