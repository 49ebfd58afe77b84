"""Time sorting algorithms on number and word data and record the results."""

from __future__ import annotations

import csv
import re
import sys
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Iterator, MutableSequence, TextIO

import psutil

from sortbench.generator import NUMBERS_FILE, WORDS_FILE
from sortbench.sorting import Algorithm

__all__ = [
    "CSV_FILENAME",
    "DATA_SIZES",
    "DataType",
    "BenchmarkResult",
    "current_memory_usage",
    "read_numbers",
    "read_strings",
    "format_progress_bar",
    "save_result_csv",
    "format_result_table",
    "run_benchmark",
    "run_tests_for_size",
]

CSV_FILENAME = "results.csv"
DATA_SIZES = (10_000, 50_000, 100_000, 250_000, 500_000, 1_000_000, 1_500_000, 2_000_000)

CSV_HEADER = (
    "Algorithm",
    "Data Size",
    "Data Type",
    "Execution Time (s)",
    "Memory Usage (bytes)",
    "Status",
)

_MAX_LINE_LENGTH = 100
_BAR_WIDTH = 50
_TABLE_RULE = (
    "+----------------------+----------+----------+"
    "----------------------+----------------------+----------+"
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class DataType(Enum):
    """Kind of data being sorted, valued by its label in the results."""

    NUMBER = "number"
    STRING = "string"

    def __str__(self) -> str:
        return self.value

    @property
    def filename(self) -> str:
        """Name of the data file holding this kind of data."""
        return NUMBERS_FILE if self is DataType.NUMBER else WORDS_FILE

    @property
    def noun(self) -> str:
        """Plural noun used in progress messages."""
        return "numbers" if self is DataType.NUMBER else "words"


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of sorting one data set with one algorithm."""

    algorithm: str
    data_size: int
    data_type: DataType
    execution_time: float
    memory_usage: int
    success: bool = True

    @property
    def status(self) -> str:
        return "Success" if self.success else "Error"


def current_memory_usage() -> int:
    """Resident memory of this process in bytes."""
    return psutil.Process().memory_info().rss


def _line_chunks(fp: TextIO) -> Iterator[str]:
    """Yield lines, splitting any longer than the read buffer into pieces."""
    limit = _MAX_LINE_LENGTH - 1
    for line in fp:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        yield line


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_numbers(path: str | Path, count: int) -> list[int]:
    """Read up to ``count`` integers, one per line; unparsable lines give 0."""
    with open(path, encoding="ascii", errors="replace") as fp:
        return [_parse_int(line) for line, _ in zip(_line_chunks(fp), range(count))]


def read_strings(path: str | Path, count: int) -> list[str]:
    """Read up to ``count`` lines with their trailing newline removed."""
    with open(path, encoding="utf-8", errors="replace") as fp:
        return [
            line[:-1] if line.endswith("\n") else line
            for line, _ in zip(_line_chunks(fp), range(count))
        ]


def format_progress_bar(current: int, total: int) -> str:
    """Render a 50-column progress bar with percentage and counts."""
    if total <= 0:
        raise ValueError("total must be positive")
    progress = current / total
    pos = int(_BAR_WIDTH * progress)
    bar = "".join(
        "=" if i < pos else ">" if i == pos else " " for i in range(_BAR_WIDTH)
    )
    return f"[{bar}] {int(progress * 100.0)}% ({current}/{total})"


def save_result_csv(result: BenchmarkResult, csv_path: str | Path = CSV_FILENAME) -> None:
    """Append ``result`` to the CSV file, writing the header if the file is new."""
    path = Path(csv_path)
    is_new = not path.exists()
    with open(path, "a", newline="", encoding="utf-8") as fp:
        writer = csv.writer(fp, lineterminator="\n")
        if is_new:
            writer.writerow(CSV_HEADER)
        writer.writerow(
            (
                result.algorithm,
                result.data_size,
                result.data_type.value,
                f"{result.execution_time:.6f}",
                result.memory_usage,
                result.status,
            )
        )


def format_result_table(results: Iterable[BenchmarkResult]) -> str:
    """Render results as a fixed-width text table."""
    lines = [
        _TABLE_RULE,
        f"| {'Algorithm':<20} | {'Size':<8} | {'Type':<8} | {'Time (s)':<20} "
        f"| {'Memory (bytes)':<20} | {'Status':<8} |",
        _TABLE_RULE,
    ]
    for r in results:
        lines.append(
            f"| {r.algorithm:<20} | {r.data_size:<8d} | {r.data_type.value:<8} "
            f"| {r.execution_time:<20.6f} | {r.memory_usage:<20d} | {r.status:<8} |"
        )
    lines.append(_TABLE_RULE)
    return "\n".join(lines)


def run_benchmark(
    algorithm: Algorithm | str,
    data: MutableSequence[Any],
    data_type: DataType,
) -> BenchmarkResult:
    """Sort ``data`` in place with ``algorithm`` and measure time and memory.

    An unknown algorithm leaves the data untouched and yields an error result.
    """
    try:
        chosen: Algorithm | None = Algorithm(algorithm)
    except ValueError:
        chosen = None
    name = chosen.value if chosen is not None else str(algorithm)

    mem_before = current_memory_usage()
    start = time.process_time()
    if chosen is not None:
        chosen.sort(data)
    end = time.process_time()
    mem_after = current_memory_usage()

    return BenchmarkResult(
        algorithm=name,
        data_size=len(data),
        data_type=data_type,
        execution_time=end - start,
        memory_usage=mem_after - mem_before,
        success=chosen is not None,
    )


def run_tests_for_size(
    size: int,
    data_type: DataType,
    data_dir: str | Path = "data",
    csv_path: str | Path = CSV_FILENAME,
    out: TextIO | None = None,
) -> list[BenchmarkResult]:
    """Run every algorithm on the first ``size`` items of the data file.

    Each result is appended to the CSV file and a table is printed at the end.
    Returns the results, or an empty list if the data could not be loaded.
    """
    out = out or sys.stdout
    print(f"\nTesting {size} {data_type.noun}:", file=out)
    path = Path(data_dir) / data_type.filename
    reader = read_numbers if data_type is DataType.NUMBER else read_strings
    try:
        source = reader(path, size)
    except OSError as exc:
        print(f"Error: failed to load {data_type.noun} data: {exc}", file=out)
        return []

    results = []
    for algorithm in Algorithm:
        print(f"- Testing {algorithm}: ", end="", file=out)
        data = list(source)
        print(format_progress_bar(0, 1), end="\r", file=out)
        out.flush()
        result = run_benchmark(algorithm, data, data_type)
        print(format_progress_bar(1, 1), end="\r", file=out)
        print(file=out)
        save_result_csv(result, csv_path)
        results.append(result)

    print("\n" + format_result_table(results), file=out)
    return results