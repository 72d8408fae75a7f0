"""Sorters shipped with the library."""

from __future__ import annotations

from typing import Any

from esquery.config import get_settings


class DefaultSorter:
    """Sorter applied by every new ``QueryBuilder``.

    Sorts on a single field, relevance (``_score``) descending unless
    configured otherwise. An empty field produces an empty definition,
    which leaves the builder's sort untouched.

    Args:
        field: Field to sort on. Defaults to ``Settings.default_sort_field``.
        order: ``"asc"`` or ``"desc"``. Defaults to ``Settings.default_sort_order``.
    """

    def __init__(self, field: str | None = None, order: str | None = None) -> None:
        settings = get_settings()
        self._field = settings.default_sort_field if field is None else field
        self._order = settings.default_sort_order if order is None else order

    def definition(self) -> list[dict[str, Any]]:
        """Return ``[{field: {"order": order}}]`` or ``[]`` when no field is set."""
        if not self._field:
            return []
        return [{self._field: {"order": self._order}}]
