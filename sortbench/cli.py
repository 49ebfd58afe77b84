"""Interactive menu for benchmarking the sorting algorithms."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from sortbench import generator
from sortbench.benchmark import (
    CSV_FILENAME,
    DATA_SIZES,
    BenchmarkResult,
    DataType,
    format_progress_bar,
    format_result_table,
    read_numbers,
    read_strings,
    run_benchmark,
    run_tests_for_size,
    save_result_csv,
)
from sortbench.generator import NUMBERS_FILE, WORDS_FILE
from sortbench.sorting import Algorithm

__all__ = [
    "check_data_files",
    "reset_results",
    "run_all_tests",
    "run_single_test",
    "main",
]

RULE = "=" * 49
THIN_RULE = "-" * 49
GOODBYE = "Thank you for using this program!"
MISSING_DATA = "Error: data files not found. Please generate the data first."
INVALID_CHOICE = "Invalid choice. Please try again."
INVALID_ALGORITHM = "Invalid choice."
RESULTS_REMOVED = "Results file deleted."
RESULTS_ABSENT = "Results file does not exist yet."
RESULTS_NOT_REMOVED = "Failed to delete the results file."

_MAIN_MENU = "\n".join(
    [
        "",
        RULE,
        "    SORTING ALGORITHM PERFORMANCE ANALYSIS    ",
        RULE,
        "1. Generate number and word data",
        "2. Test all algorithms with number data",
        "3. Test all algorithms with word data",
        "4. Test one algorithm with number data",
        "5. Test one algorithm with word data",
        "6. Reset test results",
        "0. Exit",
        THIN_RULE,
        "Your choice: ",
    ]
)

_ALGORITHM_MENU = "\n".join(
    ["", "Choose a sorting algorithm:"]
    + [f"{number}. {algorithm}" for number, algorithm in enumerate(Algorithm, start=1)]
    + ["0. Back", THIN_RULE, "Your choice: "]
)

_SIZE_MENU = "\n".join(
    ["", "Choose a data size:"]
    + [f"{number}. {size} items" for number, size in enumerate(DATA_SIZES, start=1)]
    + ["0. Back", THIN_RULE, "Your choice: "]
)


def check_data_files(data_dir: str | Path = "data") -> bool:
    """Return whether both the number and the word data files exist."""
    directory = Path(data_dir)
    return (directory / NUMBERS_FILE).is_file() and (directory / WORDS_FILE).is_file()


def reset_results(csv_path: str | Path = CSV_FILENAME) -> bool:
    """Delete the results file; return False if there was none.

    Any other failure to delete raises ``OSError``.
    """
    try:
        Path(csv_path).unlink()
    except FileNotFoundError:
        return False
    return True


def run_all_tests(
    data_type: DataType,
    data_dir: str | Path = "data",
    csv_path: str | Path = CSV_FILENAME,
    out: TextIO | None = None,
) -> list[BenchmarkResult]:
    """Run every algorithm at every configured data size and collect the results."""
    out = out or sys.stdout
    results: list[BenchmarkResult] = []
    for size in DATA_SIZES:
        print(f"\n{RULE}\nData size: {size}\n{RULE}", file=out)
        results.extend(run_tests_for_size(size, data_type, data_dir, csv_path, out))
    return results


def run_single_test(
    algorithm: Algorithm | str,
    data_type: DataType,
    size: int,
    data_dir: str | Path = "data",
    csv_path: str | Path = CSV_FILENAME,
    out: TextIO | None = None,
) -> BenchmarkResult | None:
    """Benchmark one algorithm on the first ``size`` items of the data file.

    The result is appended to the CSV file and printed as a table.
    Returns ``None`` if the data could not be loaded.
    """
    out = out or sys.stdout
    print(
        f"\nRunning {algorithm} test on {data_type.noun} with size {size}...",
        file=out,
    )
    path = Path(data_dir) / data_type.filename
    reader = read_numbers if data_type is DataType.NUMBER else read_strings
    try:
        data = reader(path, size)
    except OSError as exc:
        print(f"Error: failed to load {data_type.noun} data: {exc}", file=out)
        return None

    print(format_progress_bar(0, 1), end="\r", file=out)
    out.flush()
    result = run_benchmark(algorithm, data, data_type)
    print(format_progress_bar(1, 1), end="\r", file=out)
    print(file=out)

    save_result_csv(result, csv_path)
    print("\n" + format_result_table([result]), file=out)
    return result


def _read_int(prompt: str) -> int | None:
    """Show ``prompt`` and read a leading integer; ``None`` if there is none."""
    print(prompt, end="", flush=True)
    words = input().split()
    if not words:
        return None
    try:
        return int(words[0])
    except ValueError:
        return None


def _choose_size() -> int | None:
    choice = _read_int(_SIZE_MENU)
    if choice is None or not 1 <= choice <= len(DATA_SIZES):
        return None
    return DATA_SIZES[choice - 1]


def _choose_algorithm() -> tuple[Algorithm | None, bool]:
    """Return the chosen algorithm and whether the choice was valid."""
    algorithms = list(Algorithm)
    choice = _read_int(_ALGORITHM_MENU)
    if choice is not None and 1 <= choice <= len(algorithms):
        return algorithms[choice - 1], True
    return None, choice == 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive benchmark menu until the user exits."""
    parser = argparse.ArgumentParser(description="Benchmark sorting algorithms.")
    parser.add_argument("--data-dir", default="data", help="directory with the data files")
    parser.add_argument("--csv", default=CSV_FILENAME, help="results CSV file")
    args = parser.parse_args(argv)
    data_dir = Path(args.data_dir)
    csv_path = Path(args.csv)

    try:
        while True:
            choice = _read_int(_MAIN_MENU)
            if choice == 0:
                print(f"\n{GOODBYE}")
                return 0
            if choice == 1:
                print("\nGenerating data...")
                generator.main(["--data-dir", str(data_dir)])
            elif choice in (2, 3):
                if not check_data_files(data_dir):
                    print(f"\n{MISSING_DATA}")
                    continue
                data_type = DataType.NUMBER if choice == 2 else DataType.STRING
                print(f"\nTesting all algorithms with {data_type.noun}...")
                run_all_tests(data_type, data_dir, csv_path)
                print(f"\nTesting finished! Results saved to {csv_path}")
            elif choice in (4, 5):
                if not check_data_files(data_dir):
                    print(f"\n{MISSING_DATA}")
                    continue
                algorithm, valid = _choose_algorithm()
                if algorithm is None:
                    if not valid:
                        print(f"\n{INVALID_ALGORITHM}")
                    continue
                size = _choose_size()
                if size is None:
                    continue
                data_type = DataType.NUMBER if choice == 4 else DataType.STRING
                run_single_test(algorithm, data_type, size, data_dir, csv_path)
            elif choice == 6:
                try:
                    removed = reset_results(csv_path)
                except OSError:
                    print(RESULTS_NOT_REMOVED)
                else:
                    print(RESULTS_REMOVED if removed else RESULTS_ABSENT)
            else:
                print(f"\n{INVALID_CHOICE}")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())