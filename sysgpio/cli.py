"""Command-line driver: export pins, toggle them high then low, release them.

Usage:
    sysgpio-blink 4 17                          # blink GPIO4 then GPIO17
    sysgpio-blink --on-export-failure abort 4   # stop at the first failure
    sysgpio-blink --root /tmp/fake-gpio 4       # target a mirrored sysfs tree
"""

import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from sysgpio.core.exceptions import ConfigurationError, GpioError
from sysgpio.core.gpio_enums import Direction
from sysgpio.core.sysfs import SysfsGpio
from sysgpio.utils.config_loader import (
    EXPORT_FAILURE_POLICIES,
    GpioConfig,
    get_config,
    load_config,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysgpio-blink",
        description="Toggle GPIO pins through /sys/class/gpio.",
    )
    parser.add_argument("pins", nargs="*", type=int, help="GPIO line numbers")
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to hold each level (default from config)",
    )
    parser.add_argument(
        "--on-export-failure",
        choices=EXPORT_FAILURE_POLICIES,
        default=None,
        help="abort the run or skip the pin when export fails (default from config)",
    )
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--root", default=None, help="Override the sysfs GPIO root")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _format_level(level: bool) -> str:
    return "high" if level else "low"


def blink_pin(gpio: SysfsGpio, pin: int, delay: float) -> None:
    """Drive an exported pin high, then low, reporting each level, then release it."""
    gpio.set_direction(pin, Direction.OUTPUT)

    gpio.write(pin, True)
    print(f"gpio{pin}: {_format_level(gpio.read(pin))}")
    time.sleep(delay)

    gpio.write(pin, False)
    time.sleep(delay)
    print(f"gpio{pin}: {_format_level(gpio.read(pin))}")

    gpio.unexport(pin)


def run(gpio: SysfsGpio, pins: Sequence[int], delay: float, on_export_failure: str) -> int:
    """Blink every pin in order.

    Returns:
        0 when every pin was blinked or skipped, 1 on an aborting failure.
    """
    for pin in pins:
        try:
            gpio.export(pin)
        except GpioError as exc:
            if on_export_failure == "skip":
                logger.warning(f"Skipping gpio{pin}: {exc}")
                continue
            logger.error(f"Aborting: {exc}")
            return 1

        try:
            blink_pin(gpio, pin, delay)
        except GpioError as exc:
            logger.error(f"Aborting on gpio{pin}: {exc}")
            return 1

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not args.pins:
        parser.print_usage()
        return 0

    try:
        config: GpioConfig = load_config(args.config) if args.config else get_config()
    except ConfigurationError as exc:
        logger.error(str(exc))
        return 2

    gpio = SysfsGpio.from_config(config)
    if args.root is not None:
        gpio.root = args.root

    delay = config.blink.delay if args.delay is None else args.delay
    if delay < 0:
        parser.error("--delay must not be negative")
    policy = args.on_export_failure or config.blink.on_export_failure

    return run(gpio, args.pins, delay, policy)


if __name__ == "__main__":
    sys.exit(main())
