#!/usr/bin/env python
"""
Simple CI Tester for WordTreeLib
================================

Runs the checks that matter before pushing.

Usage:
    python scripts/test-ci.py
"""

import subprocess
import sys
from pathlib import Path


def run_command(cmd, description, cwd, critical=True):
    """Run a command and return True if it succeeds."""
    print(f"\n[Testing] {description}...")
    print(f"  Command: {' '.join(cmd)}")

    result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)

    if result.returncode == 0:
        print("  PASSED")
        return True
    if critical:
        print("  FAILED")
        if result.stderr:
            print(f"  Error: {result.stderr[:500]}")
    else:
        print("  WARNING - Non-critical issue")
    return False


def main():
    print("=" * 60)
    print("CI LOCAL TESTER")
    print("=" * 60)

    project_root = Path(__file__).parent.parent
    all_passed = True

    # Missing runtime dependencies show up here first
    if not run_command([sys.executable, "-c", "import wordtreelib"],
                       "Basic import test", project_root):
        print("\n  Fix: Check install_requires in setup.py")
        all_passed = False

    if not run_command([sys.executable, "-m", "wordtreelib.cli", "--version"],
                       "CLI starts", project_root):
        all_passed = False

    if not run_command([sys.executable, "run_tests.py"],
                       "Run fast tests", project_root):
        print("\n  Fix: Debug the failing tests")
        all_passed = False

    try:
        import flake8  # noqa: F401
        if not run_command(
            [sys.executable, "-m", "flake8", "wordtreelib", "tests", "examples", "--count",
             "--select=E9,F63,F7,F82,F541", "--show-source"],
            "Check for Python syntax errors", project_root
        ):
            all_passed = False
    except ImportError:
        print("\n[Skipped] Flake8 not installed (pip install flake8 to enable)")

    print("\n" + "=" * 60)
    print("SUCCESS" if all_passed else "FAILURE: Fix the issues above before pushing")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
