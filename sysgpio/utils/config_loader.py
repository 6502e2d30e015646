"""Helpers for loading and validating sysgpio configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, Union
import threading

import yaml  # type: ignore[import-untyped]

from sysgpio.core.exceptions import ConfigurationError
from sysgpio.core.paths import DEFAULT_SYSFS_ROOT

ExportFailurePolicy = Literal["abort", "skip"]
EXPORT_FAILURE_POLICIES: tuple[str, ...] = ("abort", "skip")


@dataclass(frozen=True)
class SysfsConfig:
    root: str = DEFAULT_SYSFS_ROOT
    strict_levels: bool = False


@dataclass(frozen=True)
class BlinkConfig:
    delay: float = 0.5
    on_export_failure: ExportFailurePolicy = "skip"


@dataclass(frozen=True)
class GpioConfig:
    sysfs: SysfsConfig = field(default_factory=SysfsConfig)
    blink: BlinkConfig = field(default_factory=BlinkConfig)


# Configuration cache with thread safety
_DEFAULT_CONFIG: Optional[GpioConfig] = None
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    if path is None:
        # Bundled defaults live next to the package sources
        return Path(__file__).parent.parent / "config.yaml"
    return Path(path)


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigurationError(f"Failed to read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("config file must contain a mapping")
    return raw


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(name, "section must be a mapping")
    return section


def _build_sysfs_cfg(sysfs_raw: dict[str, Any]) -> SysfsConfig:
    root = sysfs_raw.get("root", DEFAULT_SYSFS_ROOT)
    if not isinstance(root, str) or not root:
        raise ConfigurationError("sysfs.root", "must be a non-empty path")

    strict = sysfs_raw.get("strict_levels", False)
    if not isinstance(strict, bool):
        raise ConfigurationError("sysfs.strict_levels", "must be true or false")

    return SysfsConfig(root=root, strict_levels=strict)


def _build_blink_cfg(blink_raw: dict[str, Any]) -> BlinkConfig:
    delay = blink_raw.get("delay", 0.5)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        raise ConfigurationError("blink.delay", "must be a number of seconds")
    if delay < 0:
        raise ConfigurationError("blink.delay", "must not be negative")

    policy = blink_raw.get("on_export_failure", "skip")
    if policy not in EXPORT_FAILURE_POLICIES:
        raise ConfigurationError(
            "blink.on_export_failure",
            f"must be one of {', '.join(EXPORT_FAILURE_POLICIES)}",
            details={"provided": policy},
        )

    return BlinkConfig(delay=float(delay), on_export_failure=policy)


def _parse_gpio_cfg_from_dict(raw: dict[str, Any]) -> GpioConfig:
    return GpioConfig(
        sysfs=_build_sysfs_cfg(_section(raw, "sysfs")),
        blink=_build_blink_cfg(_section(raw, "blink")),
    )


def load_config(path: Optional[Union[str, Path]] = None) -> GpioConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            sysgpio/config.yaml.

    Returns:
        GpioConfig instance

    Raises:
        ConfigurationError: on read, parse or validation errors
    """

    raw = _load_yaml_file(_get_config_path(path))
    return _parse_gpio_cfg_from_dict(raw)


def get_config() -> GpioConfig:
    """Return the bundled default config, loading and caching it if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    global _DEFAULT_CONFIG
    with _CACHE_LOCK:
        if _DEFAULT_CONFIG is None:
            _DEFAULT_CONFIG = load_config()
        return _DEFAULT_CONFIG


def clear_config_cache() -> None:
    """Clear the cached default configuration.

    Subsequent calls to get_config() will reload from disk.
    """
    global _DEFAULT_CONFIG
    with _CACHE_LOCK:
        _DEFAULT_CONFIG = None
