"""Shared test fixtures for esquery."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure src/ is on the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from esquery.config.settings import Settings
from esquery.entities.query_builder import QueryBuilder

# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------


class FakeCriterion:
    """In-memory fake satisfying the ``Criterion`` protocol.

    Returns a canned clause and counts how often it was asked for it.
    """

    def __init__(self, clause: dict[str, Any] | None = None) -> None:
        self.clause: dict[str, Any] = clause if clause is not None else {"match_all": {}}
        self.calls = 0

    def definition(self) -> dict[str, Any]:
        """Return the canned clause."""
        self.calls += 1
        return self.clause


class FakeSorter:
    """In-memory fake satisfying the ``Sorter`` protocol."""

    def __init__(self, sort: list[Any] | None = None) -> None:
        self.sort: list[Any] = sort or []

    def definition(self) -> list[Any]:
        """Return the canned sort definition."""
        return self.sort


class FakePagination:
    """Unvalidated pagination satisfying the ``PaginationSource`` protocol.

    Unlike ``models.Pagination`` it accepts out-of-range values, which lets
    tests exercise the builder's pass-through arithmetic.
    """

    def __init__(self, page: int, results_per_page: int) -> None:
        self.page = page
        self.results_per_page = results_per_page


def term(field: str, value: Any) -> FakeCriterion:
    """Build a criterion producing a ``term`` clause."""
    return FakeCriterion({"term": {field: value}})


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Return a ``Settings`` instance with the shipped defaults."""
    return Settings(_env_file=None)


@pytest.fixture
def builder() -> QueryBuilder:
    """Return a fresh ``QueryBuilder`` with no overrides."""
    return QueryBuilder()
