#!/usr/bin/env python3
"""
parenlex Fixture Runner

Runs every source fixture through the parenlex command line and compares the
token dump against the expected output next to it.

Usage:
    python run_fixtures.py [options]

Examples:
    python run_fixtures.py
    python run_fixtures.py --verbose --fail-fast
    python run_fixtures.py --fixtures-dir ./custom_fixtures

Author: parenlex Team
Version: 1.0.0
"""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixtureResult:
    """Represents the result of a single fixture."""
    name: str
    passed: bool
    expected_output: str = ""
    actual_output: str = ""
    error_message: str = ""

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.name}"


@dataclass
class FixtureSuite:
    """Manages a collection of fixture results."""
    results: list[FixtureResult] = field(default_factory=list)

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    def add_result(self, result: FixtureResult) -> None:
        self.results.append(result)

    def print_summary(self) -> None:
        """Print a summary of all fixture results."""
        print("\n" + "=" * 50)
        print(f"Fixture Summary: {self.passed_count} passed, {self.failed_count} failed")
        print("=" * 50)

        if self.failed_count > 0:
            print("\nFailed fixtures:")
            for result in self.results:
                if not result.passed:
                    print(f"  - {result.name}: {result.error_message}")


class FixtureRunner:
    """
    Discovers source fixtures, tokenizes them and checks the results.
    """

    def __init__(
        self,
        fixtures_dir: Path,
        verbose: bool = False,
        fail_fast: bool = False
    ) -> None:
        """
        Initialize the fixture runner.

        Args:
            fixtures_dir: Directory containing .lisp fixtures and their
                .expected.txt token dumps
            verbose: Enable verbose output
            fail_fast: Stop on first failure
        """
        self.fixtures_dir = fixtures_dir.resolve()
        self.verbose = verbose
        self.fail_fast = fail_fast
        self.suite = FixtureSuite()

        if self.verbose:
            logger.setLevel(logging.DEBUG)

    def discover_fixtures(self) -> Iterator[Path]:
        """
        Discover all source fixtures in the fixtures directory.

        Yields:
            Paths to .lisp fixture files
        """
        if not self.fixtures_dir.exists():
            raise FileNotFoundError(f"Fixtures directory not found: {self.fixtures_dir}")

        fixture_files = sorted(self.fixtures_dir.glob("*.lisp"))
        if not fixture_files:
            raise ValueError(f"No fixtures found in {self.fixtures_dir}")

        logger.debug(f"Discovered {len(fixture_files)} fixtures")
        yield from fixture_files

    def normalize_output(self, text: str) -> str:
        """Convert CRLF to LF and trim trailing whitespace."""
        return text.replace("\r\n", "\n").rstrip()

    def run_cli(self, *args: str) -> subprocess.CompletedProcess:
        """Run ``python -m parenlex`` with the given arguments."""
        cmd = [sys.executable, "-m", "parenlex", *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        return subprocess.run(cmd, capture_output=True, text=True, check=False)

    def run_single_fixture(self, fixture: Path) -> FixtureResult:
        """
        Run a single fixture: round-trip check, then token dump comparison.

        Args:
            fixture: Path to the .lisp fixture

        Returns:
            FixtureResult containing the outcome
        """
        name = fixture.stem
        expected_file = self.fixtures_dir / f"{name}.expected.txt"

        print(f"\n==> [fixture] {name}")

        if not expected_file.exists():
            return FixtureResult(
                name=name,
                passed=False,
                error_message=f"Missing expected file: {expected_file}"
            )

        try:
            check = self.run_cli("check", str(fixture))
            dump = self.run_cli("tokenize", str(fixture))
        except subprocess.SubprocessError as e:
            logger.error(f"Subprocess error for {name}: {e}")
            return FixtureResult(name=name, passed=False, error_message=str(e))

        if check.returncode != 0:
            logger.error(f"Round trip failed for {name}: {check.stderr.strip()}")
            return FixtureResult(name=name, passed=False, error_message="Round trip failed")

        if dump.returncode != 0:
            logger.error(f"Tokenize failed for {name}: {dump.stderr.strip()}")
            return FixtureResult(name=name, passed=False, error_message="Tokenize failed")

        expected = self.normalize_output(expected_file.read_text(encoding="utf-8"))
        actual = self.normalize_output(dump.stdout)

        if actual == expected:
            print(f"[fixture] PASS: {name}")
            return FixtureResult(name=name, passed=True, expected_output=expected, actual_output=actual)

        print(f"[fixture] FAIL: {name}")
        if self.verbose:
            print("---- expected ----")
            print(expected)
            print("---- actual ----")
            print(actual)
        return FixtureResult(
            name=name,
            passed=False,
            expected_output=expected,
            actual_output=actual,
            error_message="Output mismatch"
        )

    def run_all(self) -> int:
        """
        Run all discovered fixtures.

        Returns:
            Exit code (0 for success, 1 for failure)
        """
        print("=" * 50)
        print("parenlex Fixture Runner")
        print("=" * 50)
        print(f"Fixtures directory: {self.fixtures_dir}")

        try:
            fixtures = list(self.discover_fixtures())
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Fixture discovery failed: {e}")
            return 1

        print(f"\nFound {len(fixtures)} fixture(s)")

        for fixture in fixtures:
            result = self.run_single_fixture(fixture)
            self.suite.add_result(result)

            if not result.passed and self.fail_fast:
                logger.info("Fail-fast enabled, stopping after first failure")
                break

        self.suite.print_summary()

        return 0 if self.suite.failed_count == 0 else 1


def parse_arguments() -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="run_fixtures.py",
        description="Run parenlex token dump fixtures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_fixtures.py
  python run_fixtures.py --verbose --fail-fast
  python run_fixtures.py --fixtures-dir ./custom_fixtures
        """
    )

    parser.add_argument(
        "--fixtures-dir",
        type=Path,
        default=None,
        help="Directory containing fixtures (default: ../tests/fixtures)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--fail-fast", "-x",
        action="store_true",
        help="Stop on first failure"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    return parser.parse_args()


def main() -> int:
    """
    Main entry point for the fixture runner.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_arguments()

    script_dir = Path(__file__).parent.resolve()
    repo_root = script_dir.parent

    fixtures_dir = args.fixtures_dir or repo_root / "tests" / "fixtures"

    runner = FixtureRunner(
        fixtures_dir=fixtures_dir,
        verbose=args.verbose,
        fail_fast=args.fail_fast
    )

    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
