#!/usr/bin/env python
"""Run the project's formatting, lint, type and test checks locally.

Usage:
    python run_quality_checks.py                    # Run all checks (no fixes)
    python run_quality_checks.py --fix              # Reformat and sort imports first
    python run_quality_checks.py --skip lint type   # Leave out pylint and mypy
    python run_quality_checks.py --verbose          # Show every command's output
"""

import argparse
import subprocess
import sys
from typing import Callable, Optional

# Directories to check
PACKAGE_DIR = "sysgpio"
TESTS_DIR = "tests"
DIRS_TO_CHECK = [PACKAGE_DIR, TESTS_DIR, "examples"]


class CheckRunner:
    """Runs each check as a subprocess and collects pass/fail results."""

    def __init__(self, fix: bool = False, verbose: bool = False, skip_checks: Optional[list[str]] = None):
        self.fix = fix
        self.verbose = verbose
        self.skip_checks = skip_checks or []
        self.failed_checks: list[str] = []
        self.passed_checks: list[str] = []

    def run_command(self, cmd: list[str], name: str, show_output: bool = False) -> bool:
        """Run one tool and record whether it exited cleanly.

        Args:
            cmd: Command and arguments as list
            name: Label used in the summary
            show_output: Stream output even when not verbose

        Returns:
            True if the command exited with status 0
        """
        print(f"\n{'=' * 70}")
        print(f"Running: {name}")
        print(f"{'=' * 70}")

        try:
            if self.verbose or show_output:
                success = subprocess.run(cmd, check=False).returncode == 0
            else:
                result = subprocess.run(cmd, check=False, capture_output=True, text=True)
                success = result.returncode == 0
                if not success:
                    print(result.stdout)
                    print(result.stderr)
        except FileNotFoundError as e:
            print(f"Error: {e}")
            print("   Install the tools with: pip install -e '.[dev]'")
            self.failed_checks.append(name)
            return False

        if success:
            print(f"{name} passed")
            self.passed_checks.append(name)
        else:
            print(f"{name} FAILED")
            self.failed_checks.append(name)
        return success

    def check_formatting(self) -> bool:
        if self.fix:
            return self.run_command(["black", *DIRS_TO_CHECK], "Black (fixing)")
        return self.run_command(["black", "--check", *DIRS_TO_CHECK], "Black")

    def check_imports(self) -> bool:
        if self.fix:
            return self.run_command(["isort", *DIRS_TO_CHECK], "isort (fixing)")
        return self.run_command(["isort", "--check-only", *DIRS_TO_CHECK], "isort")

    def check_lint(self) -> bool:
        return self.run_command(["pylint", PACKAGE_DIR], "Pylint")

    def check_types(self) -> bool:
        return self.run_command(["mypy", PACKAGE_DIR], "Mypy")

    def check_deadcode(self) -> bool:
        return self.run_command(["vulture", PACKAGE_DIR], "Vulture")

    def check_complexity(self) -> bool:
        return self.run_command(["radon", "cc", PACKAGE_DIR, "-a"], "Radon", show_output=True)

    def run_tests(self) -> bool:
        return self.run_command(
            ["pytest", f"--cov={PACKAGE_DIR}", "--cov-report=term-missing", TESTS_DIR],
            "Pytest + Coverage",
            show_output=True,
        )

    def print_summary(self) -> None:
        print(f"\n{'=' * 70}")
        print("SUMMARY")
        print(f"{'=' * 70}")
        for check in self.passed_checks:
            print(f"   passed: {check}")
        for check in self.failed_checks:
            print(f"   FAILED: {check}")
        if not self.failed_checks:
            print("\nAll checks passed!")

    def run_all(self) -> int:
        """Run the checks in order.

        Returns:
            0 if all checks passed, non-zero otherwise
        """
        checks: list[tuple[str, Callable[[], bool]]] = [
            ("formatting", self.check_formatting),
            ("imports", self.check_imports),
            ("lint", self.check_lint),
            ("type", self.check_types),
            ("deadcode", self.check_deadcode),
            ("complexity", self.check_complexity),
            ("tests", self.run_tests),
        ]

        for check_name, check_func in checks:
            if check_name in self.skip_checks:
                print(f"Skipping {check_name}")
                continue
            check_func()

        self.print_summary()
        return 0 if not self.failed_checks else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Run local quality checks and tests")
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Reformat code and sort imports instead of only checking",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show output from all commands")
    parser.add_argument(
        "--skip",
        nargs="+",
        default=[],
        help="Skip specific checks (formatting, imports, lint, type, deadcode, complexity, tests)",
    )
    args = parser.parse_args()

    runner = CheckRunner(fix=args.fix, verbose=args.verbose, skip_checks=args.skip)
    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
