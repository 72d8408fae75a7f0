"""esquery: build function score search request bodies."""

from esquery.entities.query_builder import QueryBuilder
from esquery.entities.shared import Criterion, DefaultSorter, PaginationSource, Sorter
from esquery.models import BoostMode, Pagination, ScoreMode, SortOrder

__version__ = "0.1.0"

__all__ = [
    "BoostMode",
    "Criterion",
    "DefaultSorter",
    "Pagination",
    "PaginationSource",
    "QueryBuilder",
    "ScoreMode",
    "SortOrder",
    "Sorter",
]
