"""
Shared value models.

These models are used by the query builder and its callers.
All models are re-exported here.
"""

from .function_score import BoostMode, ScoreMode, SortOrder
from .pagination import Pagination

__all__ = [
    # Function score options
    "BoostMode",
    "ScoreMode",
    "SortOrder",
    # Paging
    "Pagination",
]
