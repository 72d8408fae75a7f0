"""Shared collaborator contracts and sorters."""

from .protocols import Criterion, PaginationSource, Sorter
from .sorters import DefaultSorter

__all__ = [
    "Criterion",
    "DefaultSorter",
    "PaginationSource",
    "Sorter",
]
