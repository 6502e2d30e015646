"""Linux sysfs GPIO control.

Exports pins to userspace, configures their direction, writes and reads
logic levels, and releases them again through /sys/class/gpio.

Getting started:
    import sysgpio

    sysgpio.export(4)
    sysgpio.set_direction(4, sysgpio.Direction.OUTPUT)
    sysgpio.write(4, True)
    assert sysgpio.read(4)
    sysgpio.unexport(4)

The module-level functions act on the sysfs root from the bundled
configuration. Use SysfsGpio directly to target another root.
"""

from typing import Union

from sysgpio.core.exceptions import (
    ConfigurationError,
    GpioError,
    GpioIOError,
    GpioParseError,
)
from sysgpio.core.gpio_enums import Direction, PinLevel
from sysgpio.core.sysfs import SysfsGpio
from sysgpio.utils.config_loader import GpioConfig, get_config, load_config


def default_gpio() -> SysfsGpio:
    """Return a SysfsGpio built from the cached default configuration."""
    return SysfsGpio.from_config(get_config())


def export(pin: int) -> None:
    default_gpio().export(pin)


def unexport(pin: int) -> None:
    default_gpio().unexport(pin)


def set_direction(pin: int, direction: Union[Direction, str]) -> None:
    default_gpio().set_direction(pin, direction)


def write(pin: int, level: bool) -> None:
    default_gpio().write(pin, level)


def read(pin: int) -> bool:
    return default_gpio().read(pin)


__all__ = [
    # Operations
    "export",
    "unexport",
    "set_direction",
    "write",
    "read",
    "default_gpio",
    "SysfsGpio",
    # Types
    "Direction",
    "PinLevel",
    # Errors
    "GpioError",
    "GpioIOError",
    "GpioParseError",
    "ConfigurationError",
    # Configuration
    "GpioConfig",
    "get_config",
    "load_config",
]
