"""
Test script for settings, the search worker and the command line

Tests:
1. Settings load/save with defaults
2. SearchWorker signals, threading and cancellation
3. main.py exit codes and output files

Usage:
    python tests/test_app.py
    pytest tests/test_app.py
"""

import json
import logging
import sys
import tempfile
from pathlib import Path

from PyQt5.QtCore import QCoreApplication, Qt

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import rushhour.settings as settings_module
from rushhour.puzzle import parse_puzzle
from rushhour.settings import DEFAULT_SETTINGS, load_settings, save_settings
from rushhour.solver_worker import SearchWorker

import main as cli


PUZZLE = "\n".join([
    "6 6",
    "4",
    "..A...",
    "..A...",
    "PPA...K",
    "......",
    "D.....",
    "DCCEEE",
]) + "\n"


def get_app() -> QCoreApplication:
    return QCoreApplication.instance() or QCoreApplication([])


def test_settings():
    """Test settings defaults, merge and round trip."""
    print("\n" + "="*60)
    print("TEST: Settings")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"

        assert load_settings(path) == DEFAULT_SETTINGS
        assert load_settings(path) is not DEFAULT_SETTINGS

        path.write_text(json.dumps({"heuristic_name": "h2"}), encoding='utf-8')
        merged = load_settings(path)
        assert merged["heuristic_name"] == "h2"
        assert merged["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]

        settings = dict(merged, strategy_name="idastar", timeout_sec=2.5)
        save_settings(settings, path)
        assert load_settings(path) == settings

        path.write_text("{not json", encoding='utf-8')
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text("[1, 2]", encoding='utf-8')
        assert load_settings(path) == DEFAULT_SETTINGS

    print("  [PASS] Settings tests")


def test_worker_run():
    """Test the worker's signals when run on the calling thread."""
    print("\n" + "="*60)
    print("TEST: SearchWorker.run")
    print("="*60)

    get_app()
    board = parse_puzzle(PUZZLE)
    worker = SearchWorker(board, "astar", heuristic="h1", progress_interval=1)

    statuses, progress, solutions = [], [], []
    worker.status_changed.connect(statuses.append, Qt.DirectConnection)
    worker.progress.connect(lambda nodes, message: progress.append(nodes), Qt.DirectConnection)
    worker.solution_ready.connect(solutions.append, Qt.DirectConnection)

    worker.run()
    print(f"  Statuses: {statuses}")

    assert statuses == ["Searching with astar (h1)", "Solved in 3 moves"]
    assert progress
    assert len(solutions) == 1
    assert solutions[0] is worker.solution
    assert worker.solution.is_solved and worker.solution.move_count == 3

    print("  [PASS] SearchWorker.run tests")


def test_worker_thread():
    """Test the worker on its own thread, with and without cancellation."""
    print("\n" + "="*60)
    print("TEST: SearchWorker thread")
    print("="*60)

    get_app()
    board = parse_puzzle(PUZZLE)

    worker = SearchWorker(board, "idastar", heuristic="h1")
    worker.start()
    assert worker.wait(30000)
    assert worker.solution.is_solved
    assert worker.solution.metrics.threshold == 3

    cancelled = SearchWorker(board, "ucs")
    cancelled.request_stop()
    assert cancelled.is_cancelled()
    cancelled.start()
    assert cancelled.wait(30000)
    assert cancelled.solution.was_cancelled
    assert not cancelled.solution.is_solved

    try:
        SearchWorker(board, "bogus")
        raise AssertionError("unknown strategy was accepted")
    except ValueError:
        pass

    print("  [PASS] SearchWorker thread tests")


def test_cli():
    """Test main.py exit codes and written output."""
    print("\n" + "="*60)
    print("TEST: Command Line")
    print("="*60)

    get_app()
    with tempfile.TemporaryDirectory() as tmp:
        puzzle = Path(tmp) / "puzzle.txt"
        puzzle.write_text(PUZZLE, encoding='utf-8')
        bad = Path(tmp) / "bad.txt"
        bad.write_text("6 6\n0\n", encoding='utf-8')

        output = Path(tmp) / "solution.txt"
        args = cli.parse_args([str(puzzle), "--strategy", "ucs", "--output", str(output)])
        assert cli.Application(args).run() == cli.EXIT_SOLVED
        text = output.read_text(encoding='utf-8')
        assert "Strategy: ucs" in text
        assert "Step 4/4: EXIT P-right (exit)" in text

        table = Path(tmp) / "compare.txt"
        args = cli.parse_args([str(puzzle), "--compare", "--output", str(table)])
        assert cli.Application(args).run() == cli.EXIT_SOLVED
        rows = table.read_text(encoding='utf-8').splitlines()[2:]
        # ucs once, the three informed strategies with both heuristics
        assert len(rows) == 7

        args = cli.parse_args([str(bad)])
        assert cli.Application(args).run() == cli.EXIT_BAD_PUZZLE

        args = cli.parse_args([str(Path(tmp) / "missing.txt")])
        assert cli.Application(args).run() == cli.EXIT_BAD_PUZZLE

    print("  [PASS] Command line tests")


def test_cli_settings_names():
    """Test that unknown names in config.json end the run with an exit code."""
    print("\n" + "="*60)
    print("TEST: Command Line Settings Names")
    print("="*60)

    get_app()

    # Importing main must not configure logging or create solver.log
    assert not any(getattr(handler, "baseFilename", "").endswith("solver.log")
                   for handler in logging.getLogger().handlers)

    original_file = settings_module.SETTINGS_FILE
    with tempfile.TemporaryDirectory() as tmp:
        puzzle = Path(tmp) / "puzzle.txt"
        puzzle.write_text(PUZZLE, encoding='utf-8')
        settings_module.SETTINGS_FILE = Path(tmp) / "config.json"
        try:
            for stored in ({"heuristic_name": "h9"}, {"strategy_name": "bogus"}, {"strategy_name": 7}):
                settings_module.SETTINGS_FILE.write_text(json.dumps(stored), encoding='utf-8')
                args = cli.parse_args([str(puzzle)])
                assert cli.Application(args).run() == cli.EXIT_BAD_CONFIG, stored

            # A command line flag overrides the bad stored name
            settings_module.SETTINGS_FILE.write_text(json.dumps({"heuristic_name": "h9"}), encoding='utf-8')
            output = Path(tmp) / "solution.txt"
            args = cli.parse_args([str(puzzle), "--heuristic", "h2", "--output", str(output)])
            assert cli.Application(args).run() == cli.EXIT_SOLVED
            assert "Strategy: astar (h2)" in output.read_text(encoding='utf-8')
        finally:
            settings_module.SETTINGS_FILE = original_file

    print("  [PASS] Command line settings name tests")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# APPLICATION TESTS")
    print("#"*60)

    tests = [
        ("Settings", test_settings),
        ("SearchWorker.run", test_worker_run),
        ("SearchWorker thread", test_worker_thread),
        ("Command Line", test_cli),
        ("Command Line Settings Names", test_cli_settings_names),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
