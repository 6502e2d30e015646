"""GPIO control through the Linux sysfs interface.

Every operation is one synchronous round trip against a kernel file: open,
write or read, close. No pin state is kept between calls and nothing is
retried; failures are raised as GpioIOError or GpioParseError for the caller
to handle.
"""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING, Optional, Union

from sysgpio.core.exceptions import GpioIOError, GpioParseError
from sysgpio.core.gpio_enums import Direction, PinLevel
from sysgpio.core.paths import (
    DEFAULT_SYSFS_ROOT,
    DirectionPath,
    ExportPath,
    UnexportPath,
    ValuePath,
    pin_dir,
    resolve,
)

if TYPE_CHECKING:
    from sysgpio.utils.config_loader import GpioConfig

logger = logging.getLogger(__name__)

# "high"/"low" select output with an initial level; accept them on read-back too.
_OUTPUT_ALIASES = ("out", "high", "low")

# Plain ASCII decimal, as the kernel writes it; no underscores or other int() extras.
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _pin_payload(pin: int) -> bytes:
    """Encode a pin the way per-pin paths spell it: plain decimal."""
    return str(int(pin)).encode("ascii")


class SysfsGpio:
    """Export, configure, drive and sample GPIO pins via sysfs.

    Attributes:
        root: The GPIO class directory, /sys/class/gpio unless overridden.
        strict_levels: Reject values other than 0 and 1 on read instead of
            treating any positive value as high.
    """

    def __init__(self, root: str = DEFAULT_SYSFS_ROOT, strict_levels: bool = False) -> None:
        self.root = str(root)
        self.strict_levels = strict_levels

    @classmethod
    def from_config(cls, config: GpioConfig) -> SysfsGpio:
        return cls(root=config.sysfs.root, strict_levels=config.sysfs.strict_levels)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={self.root!r}, strict_levels={self.strict_levels})"

    # ==========================================================
    # Kernel file access
    # ==========================================================

    def _write(self, path: str, payload: bytes, pin: Optional[int] = None) -> None:
        """Write payload to an existing sysfs file.

        The file is never created: a missing per-pin file means the pin is
        not exported, and that must surface as an error.
        """
        logger.debug(f"write {payload!r} -> {path}")
        try:
            fd = os.open(path, os.O_WRONLY | os.O_TRUNC)
            with os.fdopen(fd, "wb", buffering=0) as fh:
                fh.write(payload)
        except OSError as exc:
            logger.debug(f"write to {path} failed: {exc}")
            raise GpioIOError(path, "write", exc, pin=pin) from exc

    def _read(self, path: str, pin: Optional[int] = None) -> str:
        try:
            with open(path, "rb") as fh:
                raw = fh.read()
        except OSError as exc:
            logger.debug(f"read of {path} failed: {exc}")
            raise GpioIOError(path, "read", exc, pin=pin) from exc

        content = raw.decode("ascii", errors="replace")
        logger.debug(f"read {content!r} <- {path}")
        return content

    # ==========================================================
    # Public operations
    # ==========================================================

    def export(self, pin: int) -> None:
        """Ask the kernel to expose ``pin`` to userspace.

        Creates ``{root}/gpio{pin}/``. Fails if the pin is already exported,
        out of the platform's range, or the export file is not writable.

        Raises:
            GpioIOError: if the export file cannot be opened or written.
        """
        self._write(resolve(ExportPath(), self.root), _pin_payload(pin), pin=pin)

    def unexport(self, pin: int) -> None:
        """Release ``pin``; the kernel removes its per-pin directory.

        Raises:
            GpioIOError: if the unexport file cannot be opened or written.
        """
        self._write(resolve(UnexportPath(), self.root), _pin_payload(pin), pin=pin)

    def set_direction(self, pin: int, direction: Union[Direction, str]) -> None:
        """Configure ``pin`` as input or output.

        Args:
            pin: An exported pin.
            direction: Direction.INPUT/OUTPUT or the text "in"/"out".

        Raises:
            ValueError: if direction names no direction.
            GpioIOError: if the pin is not exported or the kernel rejects
                the direction.
        """
        direction = Direction.parse(direction)
        self._write(resolve(DirectionPath(pin), self.root), direction.as_bytes(), pin=pin)

    def get_direction(self, pin: int) -> Direction:
        """Read back the direction of ``pin``.

        Raises:
            GpioIOError: if the direction file cannot be read.
            GpioParseError: if it holds an unknown direction.
        """
        path = resolve(DirectionPath(pin), self.root)
        content = self._read(path, pin=pin).strip()
        if content == Direction.INPUT.value:
            return Direction.INPUT
        if content in _OUTPUT_ALIASES:
            return Direction.OUTPUT
        raise GpioParseError(path, content, pin=pin, message=f"unknown direction {content!r}")

    def write(self, pin: int, level: bool) -> None:
        """Drive ``pin`` high (``True``) or low (``False``).

        The current direction is not checked; the kernel decides whether a
        write to an input pin is rejected or ignored.

        Raises:
            GpioIOError: if the value file cannot be opened or written.
        """
        payload = PinLevel.from_bool(bool(level)).as_bytes()
        self._write(resolve(ValuePath(pin), self.root), payload, pin=pin)

    def read(self, pin: int) -> bool:
        """Sample the logic level of ``pin``.

        The stripped content is parsed as a 32-bit decimal integer and any value
        greater than zero reads as high, unless strict_levels is set, in
        which case only 0 and 1 are accepted.

        Raises:
            GpioIOError: if the value file cannot be read.
            GpioParseError: if the content is not an integer (or, in strict
                mode, not 0 or 1).
        """
        path = resolve(ValuePath(pin), self.root)
        content = self._read(path, pin=pin)
        text = content.strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise GpioParseError(path, content, pin=pin)
        value = int(text)
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise GpioParseError(path, content, pin=pin, message=f"value {text} is out of range")

        if self.strict_levels and value not in (PinLevel.LOW, PinLevel.HIGH):
            raise GpioParseError(path, content, pin=pin, message=f"level {value} is not 0 or 1")
        return value > 0

    def is_exported(self, pin: int) -> bool:
        """Return whether the per-pin directory for ``pin`` exists."""
        return os.path.isdir(pin_dir(pin, self.root))
