"""Protocol interfaces for the query builder's collaborators.

Each collaborator exposes a single capability. The builder only reads
what they produce and never keeps a reference to them, so callers can
plug in any concrete criterion, sorter or paging object.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Criterion(Protocol):
    """Produces one clause of a boolean query.

    The returned mapping is opaque to the builder, e.g.
    ``{"term": {"status": "published"}}``.
    """

    def definition(self) -> dict[str, Any]:
        """Return the clause definition.

        Returns:
            A single clause map in the backend's query grammar.
        """
        ...


@runtime_checkable
class Sorter(Protocol):
    """Produces the sort specification of a query.

    An empty list means "leave the current sort alone".
    """

    def definition(self) -> list[Any]:
        """Return the sort definition.

        Returns:
            Zero or more sort specifications, in priority order.
        """
        ...


@runtime_checkable
class PaginationSource(Protocol):
    """Supplies a 1-indexed page number and a page size."""

    @property
    def page(self) -> int:
        """1-indexed page number."""
        ...

    @property
    def results_per_page(self) -> int:
        """Number of hits per page."""
        ...
