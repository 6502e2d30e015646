"""
Pytest configuration and shared fixtures for the sysgpio test suite.
"""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'sysgpio' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sysgpio.core.sysfs import SysfsGpio  # noqa: E402
from sysgpio.utils.config_loader import clear_config_cache  # noqa: E402


class FakeSysfs:
    """A /sys/class/gpio look-alike made of regular files.

    Regular files do not react to writes, so sync() plays the kernel's
    part: it consumes the export/unexport files and creates or removes
    the per-pin directories they name.
    """

    def __init__(self, root: Path):
        self.root = root
        (root / "export").write_text("")
        (root / "unexport").write_text("")

    def pin_dir(self, pin: int) -> Path:
        return self.root / f"gpio{pin}"

    def add_pin(self, pin: int, value: str = "0\n", direction: str = "in\n") -> Path:
        pin_dir = self.pin_dir(pin)
        pin_dir.mkdir(exist_ok=True)
        (pin_dir / "value").write_text(value)
        (pin_dir / "direction").write_text(direction)
        return pin_dir

    def remove_pin(self, pin: int) -> None:
        shutil.rmtree(self.pin_dir(pin), ignore_errors=True)

    def set_value(self, pin: int, content: str) -> None:
        (self.pin_dir(pin) / "value").write_text(content)

    def value(self, pin: int) -> str:
        return (self.pin_dir(pin) / "value").read_text()

    def direction(self, pin: int) -> str:
        return (self.pin_dir(pin) / "direction").read_text()

    def sync(self) -> None:
        for name, handler in (("export", self.add_pin), ("unexport", self.remove_pin)):
            control = self.root / name
            payload = control.read_text().strip()
            if payload:
                handler(int(payload))
                control.write_text("")


@pytest.fixture
def fake_sysfs(tmp_path):
    """
    Fixture that provides an empty fake sysfs GPIO tree.

    Yields:
        FakeSysfs: The tree rooted in a temporary directory
    """
    root = tmp_path / "gpio"
    root.mkdir()
    yield FakeSysfs(root)


@pytest.fixture
def gpio(fake_sysfs):
    """SysfsGpio pointed at the fake tree."""
    return SysfsGpio(root=str(fake_sysfs.root))


@pytest.fixture
def exported_pin(fake_sysfs):
    """Pin 4, already exported in the fake tree."""
    fake_sysfs.add_pin(4)
    return 4


@pytest.fixture(autouse=True)
def _reset_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_gpio_config_dict():
    """
    Fixture providing a complete valid configuration dictionary.
    """
    return {
        "sysfs": {"root": "/tmp/gpio", "strict_levels": True},
        "blink": {"delay": 0.25, "on_export_failure": "abort"},
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_gpio_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_gpio_config_dict, f)

    yield temp_yaml_file


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
