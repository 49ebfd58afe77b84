import random
import string

import pytest

from sortbench.generator import (
    generate_random_numbers,
    generate_random_words,
    main,
    random_word,
)


def test_numbers_file_has_count_lines_in_range(tmp_path):
    path = tmp_path / "numbers.txt"
    generate_random_numbers(path, 500, 50, random.Random(1))
    values = [int(line) for line in path.read_text().splitlines()]
    assert len(values) == 500
    assert all(0 <= v < 50 for v in values)


def test_numbers_reproducible_with_seed(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    generate_random_numbers(a, 100, 1000, random.Random(7))
    generate_random_numbers(b, 100, 1000, random.Random(7))
    assert a.read_text() == b.read_text()


def test_numbers_progress_output(tmp_path, capsys):
    path = tmp_path / "n.txt"
    generate_random_numbers(path, 10, 5, random.Random(0))
    out = capsys.readouterr().out
    assert "0/10" in out
    assert str(path) in out


def test_numbers_rejects_non_positive_max(tmp_path):
    with pytest.raises(ValueError):
        generate_random_numbers(tmp_path / "x.txt", 10, 0, random.Random(0))


def test_numbers_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        generate_random_numbers(tmp_path / "missing" / "x.txt", 1, 10)


@pytest.mark.parametrize("length", [0, 1, 5, 40])
def test_random_word_length_and_alphabet(length):
    word = random_word(length, random.Random(3))
    assert len(word) == length
    assert set(word) <= set(string.ascii_lowercase)


def test_random_word_rejects_negative():
    with pytest.raises(ValueError):
        random_word(-1)


def test_words_file_lengths_within_bounds(tmp_path):
    path = tmp_path / "words.txt"
    generate_random_words(path, 400, 20, random.Random(5))
    words = path.read_text().splitlines()
    assert len(words) == 400
    assert all(3 <= len(w) <= 19 for w in words)
    assert all(set(w) <= set(string.ascii_lowercase) for w in words)


def test_words_minimum_length_case(tmp_path):
    path = tmp_path / "words.txt"
    generate_random_words(path, 50, 4, random.Random(5))
    assert {len(w) for w in path.read_text().splitlines()} == {3}


@pytest.mark.parametrize("max_len", [3, 2, 101])
def test_words_rejects_bad_max_length(tmp_path, max_len):
    with pytest.raises(ValueError):
        generate_random_words(tmp_path / "w.txt", 5, max_len, random.Random(0))


def test_main_writes_both_files(tmp_path):
    data_dir = tmp_path / "data"
    code = main(["--data-dir", str(data_dir), "--count", "30", "--seed", "11"])
    assert code == 0
    numbers = (data_dir / "data_angka.txt").read_text().splitlines()
    words = (data_dir / "data_kata.txt").read_text().splitlines()
    assert len(numbers) == 30
    assert len(words) == 30
    assert all(0 <= int(n) < 2_000_000 for n in numbers)
    assert all(3 <= len(w) < 20 for w in words)