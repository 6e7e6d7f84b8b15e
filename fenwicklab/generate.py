"""Random test case generation."""

from __future__ import annotations

import random
import sys
from pathlib import Path

from fenwicklab.testcase import RANGE, UPDATE, Query, TestCase

DEFAULT_DIRECTORY = "Testcases"
SMALL_TEST_NAME = "smallTest.txt"


def _random_query(rng, n, max_update):
    if rng.randint(1, 2) == RANGE:
        left = rng.randint(1, n)
        return Query(RANGE, left, rng.randint(left, n))
    return Query(UPDATE, rng.randint(1, n), rng.randint(1, max_update))


def random_test_case(n, m, max_element, max_update, rng=None):
    """Build a test case of ``n`` elements in 0..max_element and ``m`` valid queries."""
    rng = random.Random() if rng is None else rng
    elements = [rng.randint(0, max_element) for _ in range(n)]
    queries = [_random_query(rng, n, max_update) for _ in range(m)]
    return TestCase(elements, queries)


def ensure_testcases_directory(directory=DEFAULT_DIRECTORY, out=None):
    """Create ``directory`` if it does not exist and return its path."""
    out = sys.stdout if out is None else out
    path = Path(directory)
    if not path.exists():
        path.mkdir(parents=True)
        print(f"Created directory: {directory}", file=out)
    return path


def _report(case, path, heading, out):
    updates = sum(1 for query in case.queries if query.is_update)
    print(heading, file=out)
    print(f"- File: {path}", file=out)
    print(f"- Elements: {case.n}", file=out)
    print(
        f"- Queries: {case.m} ({updates} updates, {case.m - updates} range queries)",
        file=out,
    )


def gen_test(number=0, directory=DEFAULT_DIRECTORY, rng=None, out=None):
    """Write a large random ``Testcase_<number>.txt`` and return its path."""
    out = sys.stdout if out is None else out
    rng = random.Random() if rng is None else rng
    path = ensure_testcases_directory(directory, out) / f"Testcase_{number}.txt"

    n = rng.randint(100, 500_000)
    m = rng.randint(100, 600_000)
    print(
        f"Generating test case {number} with {n} elements and {m} queries...",
        file=out,
    )
    case = random_test_case(n, m, 100_000, 100_000, rng)
    case.save(path)
    _report(case, path, f"Test case {number} generated successfully:", out)
    return path


def gen_tests(first, last, directory=DEFAULT_DIRECTORY, rng=None, out=None):
    """Write test cases numbered ``first..last`` and return their paths."""
    out = sys.stdout if out is None else out
    rng = random.Random() if rng is None else rng
    print(f"Generating {last - first + 1} test cases...", file=out)
    paths = [gen_test(number, directory, rng, out) for number in range(first, last + 1)]
    print("All test cases generated successfully!", file=out)
    return paths


def gen_special_test(n=0, m=0, directory=DEFAULT_DIRECTORY, rng=None, out=None):
    """Write a small test case with ``n`` elements and ``m`` queries and return its path."""
    out = sys.stdout if out is None else out
    rng = random.Random() if rng is None else rng
    path = ensure_testcases_directory(directory, out) / SMALL_TEST_NAME

    print(
        f"Generating small test case with {n} elements and {m} queries...",
        file=out,
    )
    case = random_test_case(n, m, 50, 20, rng)
    case.save(path)
    _report(case, path, "Small test case generated successfully:", out)
    return path