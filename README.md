# fenwicklab

A Fenwick tree (binary indexed tree) for prefix and range sums, and an
interactive console for making range-sum test cases and checking the tree
against them.

## Installation

```
pip install .
```

## The console

```
fenwicklab
fenwicklab --directory path/to/cases
```

Test case files are read from and written to the directory given by
`--directory`. The default is `Testcases` under the current directory. The
console prints a banner and the command list. It then reads commands until you
type `e`/`exit` or input ends.

| Command          | What it does                                                      |
|------------------|-------------------------------------------------------------------|
| `g`, `generate`  | Write a large random `Testcase_<id>.txt` (id 1 to 100)            |
| `s`, `small`     | Write `smallTest.txt` with the element and query counts you give  |
| `r`, `run`       | Run a test case and print each range query's sum and a summary    |
| `v`, `verify`    | Compare the tree's answers with a plain array sum                 |
| `b`, `benchmark` | Time the Fenwick tree against a plain array                       |
| `p`, `print`     | Show the contents of a test case                                  |
| `i`, `input`     | Type in a test case of your own and save it                       |
| `c`, `clear`     | Clear the screen (only when output is a terminal)                 |
| `h`, `help`      | Show the command list                                             |
| `e`, `exit`      | Leave the program                                                 |

A command may also start with a dash, as in `-g`. Commands that ask for a
filename want it without the `.txt` extension. Several of them offer to run,
verify or benchmark the case afterwards.

## Test case format

```
n m
a1 a2 ... an
type l r      (m lines)
```

A query `1 i v` adds `v` to element `i`. A query `2 l r` asks for the sum of
elements `l` to `r`. Indices start at 1.

## Library use

```python
from fenwicklab.tree import FenwickTree

tree = FenwickTree(5)
for i, x in enumerate([3, 1, 4, 1, 5], start=1):
    tree.update(i, x)

tree.range_query(2, 4)   # 6
tree.prefix_sum(5)       # 14
```

An index outside the tree raises `IndexError`. `FenwickTree.kth_query(k)`
returns the smallest position whose prefix sum reaches `k`.

- `fenwicklab.testcase` parses and writes files. It provides
  `TestCase.parse`, `load`, `dump` and `save`, and a `Query` for each query
  line. `TestCase.validate` raises `InvalidTestCaseError` for out-of-range
  queries, and malformed text raises the same error.
- `fenwicklab.runner` holds `run_test_case` (returns a `RunResult`),
  `run_numbered_test_case`, `verify_test_case` (returns `True` when every
  answer matches), and `benchmark_test_case` (returns a `BenchmarkResult` with
  timings in milliseconds). Each of them takes an `out` stream for its report.
- `fenwicklab.generate` holds `random_test_case`, which builds a `TestCase` in
  memory. `gen_test`, `gen_tests` and `gen_special_test` write files to a
  directory. Every generator accepts a `random.Random` for reproducible output.

## Running the tests

```
pip install .[test]
pytest
```