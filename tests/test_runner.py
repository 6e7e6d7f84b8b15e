import io

import pytest

from fenwicklab.runner import (
    benchmark_test_case,
    run_numbered_test_case,
    run_test_case,
    verify_test_case,
)
from fenwicklab.testcase import InvalidTestCaseError, Query, TestCase

ELEMENTS = [3, 1, 4, 1, 5]
QUERIES = [
    Query(2, 1, 5),
    Query(1, 2, 10),
    Query(2, 1, 3),
    Query(2, 4, 4),
]


@pytest.fixture
def case_file(tmp_path):
    path = tmp_path / "case.txt"
    TestCase(list(ELEMENTS), list(QUERIES)).save(path)
    return path


def _expected_answers():
    values = list(ELEMENTS)
    answers = []
    for number, query in enumerate(QUERIES, 1):
        if query.is_update:
            values[query.left - 1] += query.right
        else:
            answers.append((number, sum(values[query.left - 1:query.right])))
    return answers


def test_run_returns_answers(case_file):
    out = io.StringIO()
    result = run_test_case(case_file, out=out)
    assert result.results == _expected_answers()
    assert (result.update_count, result.query_count) == (1, 3)
    assert result.total_queries == len(QUERIES)
    assert result.verified is None


def test_run_prints_queries_and_summary(case_file):
    out = io.StringIO()
    result = run_test_case(case_file, out=out)
    text = out.getvalue()
    for number, answer in result.results:
        query = QUERIES[number - 1]
        assert f"Query {number} (range {query.left}-{query.right}): {answer}" in text
    assert "Execution Summary:" in text
    assert "(1 updates, 3 range queries)" in text


def test_run_with_verification(case_file):
    out = io.StringIO()
    result = run_test_case(case_file, verify=True, out=out)
    assert result.verified is True
    assert "Verification PASSED" in out.getvalue()


def test_run_numbered(tmp_path):
    TestCase(list(ELEMENTS), list(QUERIES)).save(tmp_path / "Testcase_7.txt")
    result = run_numbered_test_case(7, out=io.StringIO(), directory=tmp_path)
    assert result.results == _expected_answers()


def test_run_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_test_case(tmp_path / "nope.txt", out=io.StringIO())


def test_verify_passes(case_file):
    assert verify_test_case(case_file, out=io.StringIO()) is True


@pytest.mark.parametrize(
    "query, message",
    [
        (Query(3, 1, 1), "Invalid query type"),
        (Query(1, 9, 1), "Invalid update query"),
        (Query(2, 4, 2), "Invalid query range"),
    ],
)
def test_verify_rejects_invalid_queries(tmp_path, query, message):
    path = tmp_path / "bad.txt"
    TestCase(list(ELEMENTS), [query]).save(path)
    with pytest.raises(InvalidTestCaseError, match=message):
        verify_test_case(path, out=io.StringIO())


def test_verify_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        verify_test_case(tmp_path / "nope.txt", out=io.StringIO())


def test_benchmark_reports(case_file):
    out = io.StringIO()
    result = benchmark_test_case(case_file, out=out)
    text = out.getvalue()
    assert result.fenwick_ms >= 0 and result.naive_ms >= 0
    assert result.speedup >= 0 and result.queries_per_second > 0
    assert "Benchmark Results:" in text
    assert f"Test case size: {len(ELEMENTS)} elements, {len(QUERIES)} queries" in text