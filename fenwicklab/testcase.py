"""Test case files: an array followed by update and range-sum queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

UPDATE = 1
RANGE = 2


class InvalidTestCaseError(ValueError):
    """Raised when a test case is malformed or holds an invalid query."""


@dataclass(frozen=True)
class Query:
    """One query: ``kind`` 1 adds ``right`` at ``left``; 2 sums ``left..right``."""

    kind: int
    left: int
    right: int

    @property
    def is_update(self):
        return self.kind == UPDATE


@dataclass
class TestCase:
    """An initial array of integers and the queries run against it."""

    __test__ = False

    elements: list = field(default_factory=list)
    queries: list = field(default_factory=list)

    @property
    def n(self):
        return len(self.elements)

    @property
    def m(self):
        return len(self.queries)

    @classmethod
    def parse(cls, text):
        """Read a test case from whitespace-separated text."""
        try:
            numbers = iter([int(token) for token in text.split()])
        except ValueError as exc:
            raise InvalidTestCaseError(f"non-integer token: {exc}") from exc

        def take(what):
            try:
                return next(numbers)
            except StopIteration:
                raise InvalidTestCaseError(
                    f"unexpected end of input while reading {what}"
                ) from None

        n = take("element count")
        m = take("query count")
        if n < 0 or m < 0:
            raise InvalidTestCaseError(f"negative counts: {n} {m}")
        elements = [take("element") for _ in range(n)]
        queries = [
            Query(take("query type"), take("query argument"), take("query argument"))
            for _ in range(m)
        ]
        return cls(elements, queries)

    @classmethod
    def load(cls, path):
        """Read a test case from the file at ``path``."""
        return cls.parse(Path(path).read_text())

    def dump(self):
        """Return the test case in its file format."""
        lines = [
            f"{self.n} {self.m}",
            "".join(f"{value} " for value in self.elements),
        ]
        lines.extend(f"{q.kind} {q.left} {q.right}" for q in self.queries)
        return "\n".join(lines) + "\n"

    def save(self, path):
        """Write the test case to ``path``."""
        Path(path).write_text(self.dump())

    def validate(self):
        """Raise InvalidTestCaseError for the first query that is out of bounds."""
        for query in self.queries:
            if query.kind not in (UPDATE, RANGE):
                raise InvalidTestCaseError(f"Invalid query type {query.kind}")
            if query.kind == UPDATE:
                if not 1 <= query.left <= self.n:
                    raise InvalidTestCaseError(
                        f"Invalid update query [{query.left}, {query.right}]"
                    )
            elif not 1 <= query.left <= query.right <= self.n:
                raise InvalidTestCaseError(
                    f"Invalid query range [{query.left}, {query.right}]"
                )