"""
Entities package.

Each subdirectory groups one concern:
- query_builder/: QueryBuilder assembling function score request bodies
- shared/: collaborator protocols and the default sorter
"""

from .query_builder import QueryBuilder

__all__ = ["QueryBuilder"]
