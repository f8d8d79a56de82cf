# ftsearch/errors.py
"""Exceptions raised while building requests and decoding responses."""


class SearchError(Exception):
    """Base class for ftsearch errors."""


class InvalidQueryError(SearchError, ValueError):
    """A query, sort or facet tree cannot be serialized."""


class MissingRangeBound(InvalidQueryError):
    """A range query has neither a lower nor an upper bound."""


class EmptyCompoundQuery(InvalidQueryError):
    """A conjunction or disjunction has no child queries."""


class InvalidMinimumMatch(InvalidQueryError):
    """A disjunction requires more matches than it has children."""


class EmptyBooleanQuery(InvalidQueryError):
    """A boolean query has no must, must_not or should clauses."""


class MalformedResponse(SearchError):
    """The search response is missing a required field or has the wrong shape."""
