import argparse
import sys
import time
from pathlib import Path

# Ensure local repo package is used even if another "sysgpio" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sysgpio import Direction, GpioError, SysfsGpio


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Blink an LED wired to a sysfs GPIO line.")
    parser.add_argument("--pin", type=int, default=4, help="GPIO line driving the LED")
    parser.add_argument(
        "--blinks",
        type=int,
        default=10,
        help="Number of on/off cycles",
    )
    parser.add_argument(
        "--period",
        type=float,
        default=1.0,
        help="Seconds per on/off cycle",
    )
    parser.add_argument("--root", default="/sys/class/gpio", help="sysfs GPIO root")
    return parser.parse_args()


def run(gpio: SysfsGpio, pin: int, blinks: int, period: float) -> int:
    """Blink the LED on pin, releasing the pin afterwards only if this run exported it."""
    status = 0
    exported_here = False
    try:
        if not gpio.is_exported(pin):
            gpio.export(pin)
            exported_here = True

        gpio.set_direction(pin, Direction.OUTPUT)
        for _ in range(blinks):
            for level in (True, False):
                gpio.write(pin, level)
                print("LED", "on " if gpio.read(pin) else "off")
                time.sleep(period / 2)
    except GpioError as exc:
        print(f"error: {exc}", file=sys.stderr)
        status = 1
    finally:
        if exported_here:
            try:
                gpio.unexport(pin)
            except GpioError as exc:
                print(f"error: cannot release gpio{pin}: {exc}", file=sys.stderr)
                status = 1

    return status


def main() -> int:
    args = parse_args()
    return run(SysfsGpio(root=args.root), args.pin, args.blinks, args.period)


if __name__ == "__main__":
    sys.exit(main())
