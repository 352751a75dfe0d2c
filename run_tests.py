#!/usr/bin/env python3
"""
Test runner for the anime episode scraper.

Runs every test file in the tests directory through pytest, one file at a
time, and prints a pass/fail summary.
"""

import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent


def run_test_file(test_file: Path) -> bool:
    """Run a specific test file."""
    env = os.environ.copy()
    env['PYTHONPATH'] = str(PROJECT_ROOT)

    try:
        result = subprocess.run([sys.executable, '-m', 'pytest', '-q', str(test_file)],
                                capture_output=True, text=True,
                                cwd=PROJECT_ROOT, env=env)
    except OSError as e:
        print(f"❌ {test_file.name} - ERROR: {e}")
        return False

    if result.returncode == 0:
        print(f"✅ {test_file.name} - PASSED")
        return True

    print(f"❌ {test_file.name} - FAILED")
    if result.stdout:
        print("STDOUT:", result.stdout)
    if result.stderr:
        print("STDERR:", result.stderr)
    return False


def main() -> int:
    """Run all tests."""
    print("🧪 Anime Episode Scraper - Test Suite")
    print("=" * 50)

    tests = sorted((PROJECT_ROOT / 'tests').glob('test_*.py'))
    if not tests:
        print("⚠️  No test files found")
        return 1

    results = [run_test_file(test) for test in tests]

    print("\n" + "=" * 50)

    passed = sum(results)
    total = len(results)

    if passed == total:
        print(f"🎉 All tests passed! ({passed}/{total})")
        return 0

    print(f"❌ Some tests failed: {passed}/{total} passed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
