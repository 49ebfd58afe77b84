"""Generate files of random integers and random lowercase words."""

from __future__ import annotations

import argparse
import random
import string
from pathlib import Path
from typing import Sequence

__all__ = [
    "generate_random_numbers",
    "random_word",
    "generate_random_words",
    "main",
]

PROGRESS_INTERVAL = 100_000
MIN_WORD_LENGTH = 3
WORD_BUFFER = 100

DEFAULT_COUNT = 2_000_000
DEFAULT_MAX_VALUE = 2_000_000
DEFAULT_MAX_WORD_LENGTH = 20
NUMBERS_FILE = "data_angka.txt"
WORDS_FILE = "data_kata.txt"


def generate_random_numbers(
    path: str | Path,
    count: int,
    max_value: int,
    rng: random.Random | None = None,
) -> None:
    """Write ``count`` random integers in ``[0, max_value)`` to ``path``, one per line."""
    if max_value <= 0:
        raise ValueError("max_value must be positive")
    rng = rng or random.Random()
    with open(path, "w", encoding="ascii") as fp:
        for i in range(count):
            fp.write(f"{rng.randrange(max_value)}\n")
            if i % PROGRESS_INTERVAL == 0:
                print(f"Number progress: {i}/{count}")
    print(f"Numbers generated: {path}")


def random_word(length: int, rng: random.Random | None = None) -> str:
    """Return a word of ``length`` random lowercase ASCII letters."""
    if length < 0:
        raise ValueError("length must not be negative")
    rng = rng or random.Random()
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(length))


def generate_random_words(
    path: str | Path,
    count: int,
    max_word_length: int,
    rng: random.Random | None = None,
) -> None:
    """Write ``count`` random words of length 3 to ``max_word_length - 1`` to ``path``."""
    if max_word_length <= MIN_WORD_LENGTH:
        raise ValueError(f"max_word_length must be greater than {MIN_WORD_LENGTH}")
    if max_word_length > WORD_BUFFER:
        raise ValueError(f"max_word_length must be at most {WORD_BUFFER}")
    rng = rng or random.Random()
    with open(path, "w", encoding="ascii") as fp:
        for i in range(count):
            length = rng.randrange(max_word_length - MIN_WORD_LENGTH) + MIN_WORD_LENGTH
            fp.write(random_word(length, rng) + "\n")
            if i % PROGRESS_INTERVAL == 0:
                print(f"Word progress: {i}/{count}")
    print(f"Words generated: {path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the number and word data files used by the benchmark."""
    parser = argparse.ArgumentParser(description="Generate random benchmark data.")
    parser.add_argument("--data-dir", default="data", help="output directory")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE)
    parser.add_argument("--max-word-length", type=int, default=DEFAULT_MAX_WORD_LENGTH)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    data_dir = Path(args.data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    rng = random.Random(args.seed)
    generate_random_numbers(data_dir / NUMBERS_FILE, args.count, args.max_value, rng)
    generate_random_words(data_dir / WORDS_FILE, args.count, args.max_word_length, rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())