"""
Known option values for function score queries.

The builder accepts any string for these fields; the enums only name the
values the search backend documents. Members are ``str`` subclasses so
they serialize as their plain value.
"""

from enum import Enum


class BoostMode(str, Enum):
    """How the function score combines with the query score."""

    MULTIPLY = "multiply"
    REPLACE = "replace"
    SUM = "sum"
    AVG = "avg"
    MAX = "max"
    MIN = "min"


class ScoreMode(str, Enum):
    """How the individual function scores combine."""

    MULTIPLY = "multiply"
    SUM = "sum"
    AVG = "avg"
    FIRST = "first"
    MAX = "max"
    MIN = "min"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
