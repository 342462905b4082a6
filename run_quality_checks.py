#!/usr/bin/env python
"""Run the gpiosim quality gate: formatting, lint, types, dead code, tests.

Usage:
    python run_quality_checks.py                     # Check everything
    python run_quality_checks.py --fix               # Reformat, then check
    python run_quality_checks.py --skip lint type    # Leave out some checks
    python run_quality_checks.py --quiet             # Only show failing output
"""

import argparse
import subprocess
import sys
from dataclasses import dataclass
from typing import Callable

PACKAGE_DIR = "gpiosim"
TESTS_DIR = "tests"
EXAMPLES_DIR = "examples"
SOURCE_DIRS = [PACKAGE_DIR, TESTS_DIR, EXAMPLES_DIR]


@dataclass(frozen=True)
class Check:
    """One named tool invocation. `command` receives the --fix flag."""

    key: str
    title: str
    command: Callable[[bool], list[str]]


CHECKS = [
    Check(
        "formatting",
        "Black",
        lambda fix: ["black", *SOURCE_DIRS] if fix else ["black", "--check", *SOURCE_DIRS],
    ),
    Check(
        "imports",
        "isort",
        lambda fix: ["isort", *SOURCE_DIRS] if fix else ["isort", "--check-only", *SOURCE_DIRS],
    ),
    Check("lint", "Pylint", lambda fix: ["pylint", PACKAGE_DIR]),
    Check("type", "Mypy", lambda fix: ["mypy", PACKAGE_DIR]),
    Check("deadcode", "Vulture", lambda fix: ["vulture", PACKAGE_DIR, EXAMPLES_DIR]),
    Check("complexity", "Radon", lambda fix: ["radon", "cc", PACKAGE_DIR, "-a"]),
    Check(
        "tests",
        "Pytest + coverage",
        lambda fix: [
            "pytest",
            f"--cov={PACKAGE_DIR}",
            "--cov-report=term-missing",
            TESTS_DIR,
        ],
    ),
]


class CheckRunner:
    """Runs the quality checks in order and keeps score."""

    def __init__(self, fix: bool = False, quiet: bool = False, skip: list[str] | None = None):
        self.fix = fix
        self.quiet = quiet
        self.skip = set(skip or [])
        self.passed: list[str] = []
        self.failed: list[str] = []

    def run_check(self, check: Check) -> bool:
        if check.key in self.skip:
            print(f"-- skipping {check.title}")
            return True

        cmd = check.command(self.fix)
        print(f"\n== {check.title}: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, check=False, capture_output=self.quiet, text=True)
        except FileNotFoundError as exc:
            print(f"   {exc}; install the tools with: pip install -e .[dev,test]")
            self.failed.append(check.title)
            return False

        if result.returncode == 0:
            self.passed.append(check.title)
            return True

        if self.quiet:
            print(result.stdout)
            print(result.stderr)
        self.failed.append(check.title)
        return False

    def run_all(self) -> int:
        for check in CHECKS:
            self.run_check(check)

        print(f"\npassed: {', '.join(self.passed) or '-'}")
        print(f"failed: {', '.join(self.failed) or '-'}")
        return 1 if self.failed else 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Run gpiosim quality checks and tests")
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Apply black and isort before checking",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Capture tool output and print it only on failure",
    )
    parser.add_argument(
        "--skip",
        nargs="+",
        default=[],
        choices=[check.key for check in CHECKS],
        help="Checks to leave out",
    )
    args = parser.parse_args()

    return CheckRunner(fix=args.fix, quiet=args.quiet, skip=args.skip).run_all()


if __name__ == "__main__":
    sys.exit(main())
