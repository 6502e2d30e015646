"""Sysfs path kinds and their resolution to filesystem paths.

Each kernel file the library touches is named by one of four path kinds.
Resolution is a pure function of the kind and the sysfs root; nothing is
cached, so every operation computes its path afresh.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Union

DEFAULT_SYSFS_ROOT = "/sys/class/gpio"


@dataclass(frozen=True)
class ExportPath:
    """The file that asks the kernel to expose a pin to userspace."""


@dataclass(frozen=True)
class UnexportPath:
    """The file that releases a previously exported pin."""


@dataclass(frozen=True)
class ValuePath:
    """A pin's logic level file."""

    pin: int


@dataclass(frozen=True)
class DirectionPath:
    """A pin's direction file."""

    pin: int


GpioPath = Union[ExportPath, UnexportPath, ValuePath, DirectionPath]


def pin_dir(pin: int, root: str = DEFAULT_SYSFS_ROOT) -> str:
    """Return the per-pin directory the kernel creates on export."""
    return posixpath.join(root, f"gpio{int(pin)}")


def resolve(kind: GpioPath, root: str = DEFAULT_SYSFS_ROOT) -> str:
    """Map a path kind to the sysfs path it names.

    Args:
        kind: One of ExportPath, UnexportPath, ValuePath, DirectionPath.
        root: The sysfs GPIO class directory.

    Returns:
        The path as a newly built string.

    Raises:
        TypeError: if kind is not a known path kind.
    """
    if isinstance(kind, ExportPath):
        return posixpath.join(root, "export")
    if isinstance(kind, UnexportPath):
        return posixpath.join(root, "unexport")
    if isinstance(kind, ValuePath):
        return posixpath.join(pin_dir(kind.pin, root), "value")
    if isinstance(kind, DirectionPath):
        return posixpath.join(pin_dir(kind.pin, root), "direction")
    raise TypeError(f"Unknown GPIO path kind: {kind!r}")
