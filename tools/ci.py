#!/usr/bin/env python3
# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=scanlex", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run every CI step, print a summary, and return 0 only if all steps passed."""
    results = [_run_step(name, cmd) for name, cmd in STEPS]

    _print_banner("Summary")
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()

    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).parent.parent


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    """Run one CI command from the repository root and time it."""
    _print_banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_REPO_ROOT)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main())
