import pytest

import sysgpio
from sysgpio.utils.config_loader import GpioConfig, SysfsConfig


@pytest.fixture
def configured_root(monkeypatch, fake_sysfs):
    config = GpioConfig(sysfs=SysfsConfig(root=str(fake_sysfs.root)))
    monkeypatch.setattr(sysgpio, "get_config", lambda: config)
    return fake_sysfs


def test_default_gpio_uses_bundled_config():
    gpio = sysgpio.default_gpio()

    assert gpio.root == "/sys/class/gpio"
    assert gpio.strict_levels is False


def test_module_level_operations(configured_root):
    sysgpio.export(4)
    configured_root.sync()

    sysgpio.set_direction(4, sysgpio.Direction.OUTPUT)
    sysgpio.write(4, True)
    assert sysgpio.read(4) is True
    sysgpio.write(4, False)
    assert sysgpio.read(4) is False
    assert configured_root.direction(4) == "out"

    sysgpio.unexport(4)
    configured_root.sync()

    with pytest.raises(sysgpio.GpioIOError):
        sysgpio.read(4)


def test_module_level_parse_error(configured_root):
    configured_root.add_pin(4, value="abc\n")

    with pytest.raises(sysgpio.GpioParseError):
        sysgpio.read(4)
