"""Function score query builder.

Assembles a ``function_score`` over ``bool`` search request body one
mutation at a time and hands it out as plain dicts and lists. The builder
never validates what it is given; the search backend rejects bad shapes.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from esquery.entities.shared.protocols import Criterion, PaginationSource, Sorter
from esquery.entities.shared.sorters import DefaultSorter

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = True
DEFAULT_EXPLAIN = False
DEFAULT_FROM = 0
DEFAULT_SIZE = 10
DEFAULT_BOOST_MODE = "replace"
DEFAULT_SCORE_MODE = "sum"
DEFAULT_MIN_SCORE = 0


def _default_document() -> dict[str, Any]:
    """Build a fresh copy of the default request skeleton."""
    return {
        "_source": DEFAULT_SOURCE,
        "explain": DEFAULT_EXPLAIN,
        "from": DEFAULT_FROM,
        "size": DEFAULT_SIZE,
        "query": {
            "function_score": {
                "query": {
                    "bool": {
                        "must": [],
                        "should": [],
                        "filter": [],
                    },
                },
                "functions": [],
                "boost_mode": DEFAULT_BOOST_MODE,
                "score_mode": DEFAULT_SCORE_MODE,
                "min_score": DEFAULT_MIN_SCORE,
            },
        },
        "sort": [],
    }


def _source_value(source: bool | str | Iterable[str]) -> bool | str | list[str]:
    """Return ``_source`` in JSON-ready form.

    Booleans and single field names are kept as they are. Field name
    collections become a list; sets are sorted for a stable order.
    """
    if isinstance(source, (bool, str)):
        return source
    if isinstance(source, (set, frozenset)):
        return sorted(source)
    return list(source)


class QueryBuilder:
    """Mutable builder for a function score search request.

    Every mutation returns the builder, so calls chain::

        body = (
            QueryBuilder()
            .append_must(criterion)
            .set_pagination(Pagination(page=2, results_per_page=20))
            .set_boost_mode("multiply")
            .to_document()
        )

    One instance serves one query-construction session and is not safe to
    share between threads.

    Args:
        overrides: Top-level keys replacing the defaults. The merge is
            shallow: overriding ``query`` replaces the whole default
            ``query`` subtree.
    """

    def __init__(self, overrides: Mapping[str, Any] | None = None) -> None:
        self._document: dict[str, Any] = _default_document()
        self.set_sorter(DefaultSorter())
        if overrides:
            self._document.update(copy.deepcopy(dict(overrides)))
            if "_source" in overrides:
                self._document["_source"] = _source_value(self._document["_source"])
        logger.debug(
            "QueryBuilder created with overrides for: %s",
            sorted(overrides) if overrides else [],
        )

    # ── Subtree access ──────────────────────────────────────────────────

    def _function_score(self) -> dict[str, Any]:
        # Missing levels (e.g. after a partial ``query`` override) are created.
        query = self._document.setdefault("query", {})
        return query.setdefault("function_score", {})

    def _clauses(self, occurrence: str) -> list[Any]:
        bool_query = self._function_score().setdefault("query", {}).setdefault("bool", {})
        return bool_query.setdefault(occurrence, [])

    # ── Top-level options ───────────────────────────────────────────────

    def set_source(self, source: bool | str | Iterable[str]) -> QueryBuilder:
        """Set ``_source``: ``True``/``False``, one field name, or the field names to return."""
        self._document["_source"] = _source_value(source)
        return self

    def set_explain(self, explain: bool) -> QueryBuilder:
        """Set whether the backend explains how each hit was scored."""
        self._document["explain"] = explain
        return self

    def set_pagination(self, pagination: PaginationSource) -> QueryBuilder:
        """Set ``from`` and ``size`` from a 1-indexed page.

        ``from`` is ``(page - 1) * results_per_page``. Values are not
        clamped, so a page below 1 gives a negative offset.
        """
        page = pagination.page
        size = pagination.results_per_page
        self._document["from"] = (page - 1) * size
        self._document["size"] = size
        logger.debug("Pagination set: page=%d size=%d", page, size)
        return self

    # ── Boolean query clauses ───────────────────────────────────────────

    def append_must(self, criterion: Criterion) -> QueryBuilder:
        """Append a clause the hits must match (contributes to score)."""
        self._clauses("must").append(copy.deepcopy(criterion.definition()))
        return self

    def append_should(self, criterion: Criterion) -> QueryBuilder:
        """Append a clause the hits should match."""
        self._clauses("should").append(copy.deepcopy(criterion.definition()))
        return self

    def append_filter(self, criterion: Criterion) -> QueryBuilder:
        """Append a non-scoring clause the hits must match."""
        self._clauses("filter").append(copy.deepcopy(criterion.definition()))
        return self

    # ── Scoring ─────────────────────────────────────────────────────────

    def append_function(self, function: Mapping[str, Any]) -> QueryBuilder:
        """Append a score function. Empty definitions are ignored."""
        if not function:
            logger.debug("Ignoring empty score function")
            return self
        self._function_score().setdefault("functions", []).append(copy.deepcopy(function))
        return self

    def set_max_boost(self, max_boost: int) -> QueryBuilder:
        self._function_score()["max_boost"] = max_boost
        return self

    def set_boost_mode(self, boost_mode: str) -> QueryBuilder:
        self._function_score()["boost_mode"] = boost_mode
        return self

    def set_score_mode(self, score_mode: str) -> QueryBuilder:
        self._function_score()["score_mode"] = score_mode
        return self

    def set_min_score(self, min_score: int | float) -> QueryBuilder:
        self._function_score()["min_score"] = min_score
        return self

    # ── Sorting ─────────────────────────────────────────────────────────

    def set_sorter(self, sorter: Sorter) -> QueryBuilder:
        """Replace ``sort`` with the sorter's definition, unless it is empty."""
        definition = sorter.definition()
        if not definition:
            logger.debug("Sorter %s produced no definition; sort unchanged", type(sorter).__name__)
            return self
        self._document["sort"] = copy.deepcopy(definition)
        return self

    # ── Output ──────────────────────────────────────────────────────────

    def to_document(self) -> dict[str, Any]:
        """Return a snapshot of the request body.

        The snapshot is a deep copy: later mutations of the builder do not
        show up in it, and editing it does not affect the builder.
        """
        return copy.deepcopy(self._document)

    def to_json(self, **kwargs: Any) -> str:
        """Return the request body as a JSON string.

        Args:
            **kwargs: Passed through to ``json.dumps``.
        """
        return json.dumps(self._document, **kwargs)
