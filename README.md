# sortbench

Measure how six classic sorting algorithms perform on large data sets of
random integers and random lowercase words.

The algorithms are bubble sort (with an early stop when a pass makes no
swap), selection sort, insertion sort, top-down merge sort, quick sort
(last element as pivot, Lomuto partition) and shell sort (gaps n/2, n/4,
..., 1). Each sorts a list in place and works on integers and strings alike.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Generating data

```
sortbench-generate
```

This creates the data directory if needed and writes two files into it:

- `data_angka.txt`: random integers in `[0, max-value)`, one per line
- `data_kata.txt`: random lowercase words of 3 to `max-word-length - 1`
  letters, one per line

Progress is printed every 100,000 lines.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--data-dir` | `data` | output directory |
| `--count` | `2000000` | lines written to each file |
| `--max-value` | `2000000` | upper bound (exclusive) of the integers; must be positive |
| `--max-word-length` | `20` | words are shorter than this; must be between 4 and 100 |
| `--seed` | none | seed for a reproducible run |

## Running benchmarks

```
sortbench
```

Options: `--data-dir` (default `data`) names the directory holding the data
files, `--csv` (default `results.csv`) the results file.

An interactive menu offers:

1. Generate the data files with the default settings.
2. Run every algorithm on number data at every size.
3. Run every algorithm on word data at every size.
4. Run one chosen algorithm on number data at one chosen size.
5. Run one chosen algorithm on word data at one chosen size.
6. Delete the results file.
0. Exit (end of input exits as well).

The sizes are 10,000, 50,000, 100,000, 250,000, 500,000, 1,000,000,
1,500,000 and 2,000,000; each run uses the first that many lines of the data
file. Choices 2 to 5 refuse to start while either data file is missing.

Each run is shown as a table of algorithm, size, data type, execution time
(process CPU time, in seconds) and change in the process's resident memory.
It is also appended to the results CSV file, which gets this header when it
is first created:

```
Algorithm,Data Size,Data Type,Execution Time (s),Memory Usage (bytes),Status
```

The quadratic algorithms are very slow on the largest sizes. Start with the
smaller ones.

## Using the library

```python
from sortbench.sorting import Algorithm, merge_sort

data = [5, 3, 9, 1]
merge_sort(data)          # sorts in place
print(data)               # [1, 3, 5, 9]

words = ["pear", "apple", "fig"]
Algorithm.SHELL_SORT.sort(words)
print(words)              # ['apple', 'fig', 'pear']
```

`sortbench.benchmark` provides the measuring side:

- `run_benchmark(algorithm, data, data_type)` sorts `data` in place with an
  `Algorithm` (or its display name, such as `"Quick Sort"`) and returns a
  `BenchmarkResult`. An unknown name leaves the data untouched and yields a
  result whose status is `Error`.
- `read_numbers(path, count)` and `read_strings(path, count)` load the first
  `count` lines of a data file.
- `save_result_csv(result, csv_path)` appends a result to the CSV file;
  `format_result_table(results)` lays results out as a text table;
  `format_progress_bar(current, total)` renders a 50-column progress bar.
- `run_tests_for_size(size, data_type, data_dir, csv_path, out)` runs every
  algorithm on one size and returns the results.

`sortbench.cli` adds `run_all_tests`, `run_single_test`, `check_data_files`
and `reset_results`, which the menu is built on.