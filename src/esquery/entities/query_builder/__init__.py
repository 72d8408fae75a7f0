"""Query Builder package for function score search requests."""

from .builder import QueryBuilder

__all__ = ["QueryBuilder"]
