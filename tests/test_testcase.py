import pytest

from fenwicklab.testcase import InvalidTestCaseError, Query, TestCase


def _sample():
    return TestCase(
        [4, 0, 7],
        [Query(1, 2, 5), Query(2, 1, 3), Query(2, 2, 2)],
    )


def test_dump_format():
    case = TestCase([1, 2], [Query(2, 1, 2)])
    assert case.dump() == "2 1\n1 2 \n2 1 2\n"


def test_parse_dump_round_trip():
    case = _sample()
    assert TestCase.parse(case.dump()) == case


def test_counts():
    case = _sample()
    assert (case.n, case.m) == (len(case.elements), len(case.queries))


def test_parse_ignores_layout():
    case = TestCase.parse("3 1 4 0 7 2 1 3")
    assert case.elements == [4, 0, 7]
    assert case.queries == [Query(2, 1, 3)]


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "case.txt"
    case = _sample()
    case.save(path)
    assert TestCase.load(path) == case


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TestCase.load(tmp_path / "missing.txt")


@pytest.mark.parametrize(
    "text",
    ["", "3", "3 1 1 2", "2 1 1 2 2 1", "2 1 a b 2 1 2", "-1 0"],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(InvalidTestCaseError):
        TestCase.parse(text)


def test_validate_accepts_good_case():
    case = _sample()
    case.validate()
    assert case.queries[0].is_update and not case.queries[1].is_update


@pytest.mark.parametrize(
    "query, message",
    [
        (Query(3, 1, 1), "Invalid query type"),
        (Query(1, 0, 5), "Invalid update query"),
        (Query(1, 4, 5), "Invalid update query"),
        (Query(2, 2, 1), "Invalid query range"),
        (Query(2, 0, 2), "Invalid query range"),
        (Query(2, 1, 4), "Invalid query range"),
    ],
)
def test_validate_rejects(query, message):
    case = TestCase([1, 2, 3], [query])
    with pytest.raises(InvalidTestCaseError, match=message):
        case.validate()