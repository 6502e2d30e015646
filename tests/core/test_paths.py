from dataclasses import FrozenInstanceError

import pytest

from sysgpio.core.paths import (
    DEFAULT_SYSFS_ROOT,
    DirectionPath,
    ExportPath,
    UnexportPath,
    ValuePath,
    pin_dir,
    resolve,
)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ExportPath(), "/sys/class/gpio/export"),
        (UnexportPath(), "/sys/class/gpio/unexport"),
        (ValuePath(4), "/sys/class/gpio/gpio4/value"),
        (DirectionPath(17), "/sys/class/gpio/gpio17/direction"),
    ],
)
def test_resolve_default_root(kind, expected):
    assert resolve(kind) == expected


def test_resolve_custom_root():
    assert resolve(ValuePath(4), "/tmp/gpio") == "/tmp/gpio/gpio4/value"
    assert resolve(ExportPath(), "/tmp/gpio/") == "/tmp/gpio/export"


def test_pin_is_formatted_without_range_checks():
    assert resolve(ValuePath(-1)) == "/sys/class/gpio/gpio-1/value"
    assert resolve(DirectionPath(1023)) == "/sys/class/gpio/gpio1023/direction"


def test_pin_dir():
    assert pin_dir(4) == "/sys/class/gpio/gpio4"
    assert DEFAULT_SYSFS_ROOT == "/sys/class/gpio"


def test_path_kinds_are_immutable_values():
    assert ValuePath(4) == ValuePath(4)
    assert ValuePath(4) != DirectionPath(4)
    with pytest.raises(FrozenInstanceError):
        ValuePath(4).pin = 5


def test_resolve_rejects_unknown_kind():
    with pytest.raises(TypeError):
        resolve("value")
