"""
Developer helpers for working on astwalk from a source checkout.

Run from anywhere with `python -m scripts <command>` while the repository root is on
sys.path; paths are resolved from this file, not from the current directory.
"""
import os
import shutil
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

UNIT_TESTS = PROJECT_ROOT / "astwalk" / "tests"
SCENARIO_TESTS = PROJECT_ROOT / "tests"

CLEAN_TARGETS = (".pytest_cache", "build", "dist", "astwalk.egg-info")


def run_pytest(*targets: Path, extra_args: list[str] | None = None) -> int:
    """Run pytest on `targets` (the whole project when empty) from the project root."""
    command = [sys.executable, "-m", "pytest", *(str(target) for target in targets), *(extra_args or [])]
    return subprocess.run(command, cwd=PROJECT_ROOT, check=False).returncode


def run_unit_tests(extra_args: list[str] | None = None) -> int:
    """Per-module tests in astwalk/tests."""
    print(f"Running unit tests in {UNIT_TESTS}...")
    return run_pytest(UNIT_TESTS, extra_args=extra_args)


def run_scenario_tests(extra_args: list[str] | None = None) -> int:
    """Whole-tree scenario and property tests in tests/."""
    print(f"Running scenario tests in {SCENARIO_TESTS}...")
    return run_pytest(SCENARIO_TESTS, extra_args=extra_args)


def run_all_tests(extra_args: list[str] | None = None) -> int:
    print("Running all tests...")
    return run_pytest(extra_args=extra_args)


def find_clean_targets(root: Path = PROJECT_ROOT) -> list[Path]:
    """Build artifacts and caches under `root` that `clean_project` would remove."""
    targets = {root / name for name in CLEAN_TARGETS}
    for current, dirs, _files in os.walk(root):
        if "__pycache__" in dirs:
            targets.add(Path(current) / "__pycache__")
    return sorted(target for target in targets if target.exists())


def clean_project() -> int:
    failures = 0
    for target in find_clean_targets():
        try:
            shutil.rmtree(target)
            print(f"Removed: {target.relative_to(PROJECT_ROOT)}")
        except OSError as exc:
            failures += 1
            print(f"Failed to remove {target}: {exc}")
    print("Cleanup complete.")
    return 1 if failures else 0


COMMANDS = {
    "unit": run_unit_tests,
    "scenario": run_scenario_tests,
    "all": run_all_tests,
}
