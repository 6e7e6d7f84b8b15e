"""Running, verifying and benchmarking test case files."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

from fenwicklab.testcase import UPDATE, InvalidTestCaseError, TestCase
from fenwicklab.tree import FenwickTree

DEFAULT_DIRECTORY = "Testcases"
MAX_REPORTED_MISMATCHES = 5


@dataclass
class RunResult:
    """Outcome of running a test case: range-query answers and timing."""

    results: list = field(default_factory=list)
    update_count: int = 0
    query_count: int = 0
    elapsed: float = 0.0
    verified: bool | None = None

    @property
    def total_queries(self):
        return self.update_count + self.query_count


@dataclass
class BenchmarkResult:
    """Timings, in milliseconds, of the tree against a plain array."""

    fenwick_ms: float
    naive_ms: float
    speedup: float
    queries_per_second: float


def _ratio(numerator, denominator):
    return numerator / denominator if denominator else float("inf")


def _build_tree(elements):
    tree = FenwickTree(len(elements))
    for position, value in enumerate(elements, 1):
        tree.update(position, value)
    return tree


def run_test_case(path, verify=False, out=None):
    """Answer every query in the file at ``path``, printing results and a summary."""
    out = sys.stdout if out is None else out
    case = TestCase.load(path)

    start = time.perf_counter()
    tree = _build_tree(case.elements)
    print(f"Processing {case.m} queries from {path}...", file=out)

    result = RunResult()
    for number, query in enumerate(case.queries, 1):
        if query.kind == UPDATE:
            tree.update(query.left, query.right)
            result.update_count += 1
        else:
            answer = tree.range_query(query.left, query.right)
            print(
                f"Query {number} (range {query.left}-{query.right}): {answer}",
                file=out,
            )
            result.results.append((number, answer))
            result.query_count += 1
    result.elapsed = time.perf_counter() - start

    print("\nExecution Summary:", file=out)
    print(
        f"- Total queries processed: {case.m} ({result.update_count} updates, "
        f"{result.query_count} range queries)",
        file=out,
    )
    print(f"- Execution time: {result.elapsed:.6f} seconds", file=out)
    print(
        f"- Performance: {_ratio(case.m, result.elapsed):.2f} queries/second",
        file=out,
    )

    if verify:
        print("\nVerifying results against naive implementation...", file=out)
        result.verified = verify_test_case(path, out)
        if result.verified:
            print(
                "✓ Verification PASSED: All results match the naive implementation.",
                file=out,
            )
        else:
            print(
                "✗ Verification FAILED: Results do not match the naive implementation.",
                file=out,
            )

    print(file=out)
    return result


def run_numbered_test_case(number, verify=False, out=None, directory=DEFAULT_DIRECTORY):
    """Run ``Testcase_<number>.txt`` from ``directory``."""
    path = Path(directory) / f"Testcase_{number}.txt"
    return run_test_case(path, verify, out)


def verify_test_case(path, out=None):
    """Check the tree's answers against a plain array; True when all agree."""
    out = sys.stdout if out is None else out
    case = TestCase.load(path)
    try:
        case.validate()
    except InvalidTestCaseError as exc:
        raise InvalidTestCaseError(f"{exc} in file: {path}") from exc

    tree = _build_tree(case.elements)
    naive = [0, *case.elements]
    mismatches = 0

    for number, query in enumerate(case.queries, 1):
        if query.kind == UPDATE:
            tree.update(query.left, query.right)
            naive[query.left] += query.right
            continue
        fenwick_result = tree.range_query(query.left, query.right)
        naive_result = sum(naive[query.left:query.right + 1])
        if fenwick_result != naive_result:
            print(
                f"  Mismatch at query {number}: Fenwick = {fenwick_result}, "
                f"Naive = {naive_result}",
                file=out,
            )
            mismatches += 1
            if mismatches >= MAX_REPORTED_MISMATCHES:
                print("  Too many mismatches, stopping verification...", file=out)
                break

    return mismatches == 0


def benchmark_test_case(path, out=None):
    """Time the tree and a plain array on the same queries and report both."""
    out = sys.stdout if out is None else out
    case = TestCase.load(path)

    print(f"Running benchmark on {path}...", file=out)
    print(f"Test case size: {case.n} elements, {case.m} queries", file=out)

    start = time.perf_counter()
    tree = _build_tree(case.elements)
    for query in case.queries:
        if query.kind == UPDATE:
            tree.update(query.left, query.right)
        else:
            tree.range_query(query.left, query.right)
    fenwick_ms = (time.perf_counter() - start) * 1000.0

    start = time.perf_counter()
    naive = [0, *case.elements]
    for query in case.queries:
        if query.kind == UPDATE:
            naive[query.left] += query.right
        else:
            sum(naive[query.left:query.right + 1])
    naive_ms = (time.perf_counter() - start) * 1000.0

    result = BenchmarkResult(
        fenwick_ms=fenwick_ms,
        naive_ms=naive_ms,
        speedup=_ratio(naive_ms, fenwick_ms),
        queries_per_second=_ratio(case.m, fenwick_ms / 1000.0),
    )

    print("\nBenchmark Results:", file=out)
    print("-------------------------------", file=out)
    print(f"Fenwick Tree: {result.fenwick_ms:.3f} ms", file=out)
    print(f"Naive Array:  {result.naive_ms:.3f} ms", file=out)
    print(f"Speedup:      {result.speedup:.2f}x", file=out)
    print(f"Performance:  {result.queries_per_second:.2f} queries/second", file=out)
    print("-------------------------------\n", file=out)
    return result