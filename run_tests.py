#!/usr/bin/env python3
"""
run_tests.py
------------
Auto-test runner for dungeon_core.
Monitors file changes and automatically runs tests.

Usage:
    python run_tests.py                    # Start watching for changes
    python run_tests.py --run-once         # Run tests once and exit
    python run_tests.py --player-only      # Run only player core tests
"""

import sys
import os
import time
import subprocess
import argparse
from pathlib import Path
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler


WATCHED_DIRS = ["dungeon_core", "tests"]


class TestRunner(FileSystemEventHandler):
    """File system event handler that runs tests on file changes."""

    def __init__(self, args):
        self.args = args
        self.last_run = 0
        self.debounce_time = 1.0  # Seconds between runs
        self.project_root = Path(__file__).parent

    def on_modified(self, event):
        if event.is_directory:
            return

        # Only Python or JSON config files in watched directories
        file_path = Path(event.src_path)
        file_path_str = str(file_path).replace('\\', '/')
        if file_path.suffix not in ('.py', '.json'):
            return
        if not any(f"{d}/" in file_path_str for d in WATCHED_DIRS):
            return

        current_time = time.time()
        if current_time - self.last_run < self.debounce_time:
            return

        self.last_run = current_time
        self.run_tests()

    def run_tests(self):
        """Run the test suite."""
        print("\n" + "=" * 60)
        print("Running tests...")
        print("=" * 60)

        cmd = [sys.executable, "-m", "pytest"]

        if self.args.player_only:
            cmd.extend(["tests/entities/player", "-v"])
        else:
            cmd.extend(["-v"])

        if self.args.marker:
            cmd.extend(["-m", self.args.marker])

        env = dict(os.environ, SDL_VIDEODRIVER="dummy")

        try:
            result = subprocess.run(cmd, cwd=self.project_root, env=env, capture_output=False)
        except KeyboardInterrupt:
            print("\nTest execution interrupted")
            return False
        except OSError as e:
            print(f"Error running tests: {e}")
            return False

        if result.returncode == 0:
            print("All tests passed!")
        else:
            print("Some tests failed!")
        return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(description="Auto-test runner for dungeon_core")
    parser.add_argument("--run-once", action="store_true",
                        help="Run tests once and exit")
    parser.add_argument("--player-only", action="store_true",
                        help="Run only player core tests")
    parser.add_argument("-m", "--marker", default=None,
                        help="Only run tests matching the given marker expression")

    args = parser.parse_args()

    try:
        import pytest  # noqa: F401
    except ImportError:
        print("pytest not found. Please install with:")
        print("   pip install -e .[test]")
        return 1

    test_runner = TestRunner(args)

    if args.run_once:
        success = test_runner.run_tests()
        return 0 if success else 1

    print("Starting file watcher...")
    print(f"Monitoring: {', '.join(WATCHED_DIRS)}")
    print("Press Ctrl+C to stop")

    test_runner.run_tests()

    observer = Observer()
    for directory in WATCHED_DIRS:
        if os.path.exists(directory):
            observer.schedule(test_runner, directory, recursive=True)

    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
        print("\nFile watcher stopped")

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
