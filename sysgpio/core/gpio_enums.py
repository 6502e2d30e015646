"""GPIO enumeration types."""

from enum import Enum, IntEnum
from typing import Union


class Direction(str, Enum):
    """GPIO pin direction enumeration.

    The member values are the canonical strings the kernel expects in a
    pin's ``direction`` file.
    """

    INPUT = "in"
    """GPIO pin senses a signal."""

    OUTPUT = "out"
    """GPIO pin drives a signal."""

    def __str__(self) -> str:
        return self.value

    def as_bytes(self) -> bytes:
        """Return the direction as it is written to sysfs."""
        return self.value.encode("ascii")

    @classmethod
    def parse(cls, raw: Union["Direction", str]) -> "Direction":
        """Convert ``"in"``/``"out"`` or a member name into a Direction.

        Raises:
            ValueError: if raw names no direction.
        """
        if isinstance(raw, cls):
            return raw
        text = str(raw).strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise ValueError(f"Unknown direction {raw!r}; expected 'in' or 'out'")


class PinLevel(IntEnum):
    """GPIO pin logic level enumeration.

    Represents the digital logic level on a GPIO pin.
    """

    LOW = 0
    """Logic level LOW (deasserted, written as "0")."""

    HIGH = 1
    """Logic level HIGH (asserted, written as "1")."""

    @classmethod
    def from_bool(cls, level: bool) -> "PinLevel":
        return cls.HIGH if level else cls.LOW

    def as_bytes(self) -> bytes:
        """Return the ASCII decimal form written to a ``value`` file."""
        return str(int(self)).encode("ascii")
