"""
Exception hierarchy for foodgraph
"""


class FoodGraphError(Exception):
    """Base class for all foodgraph errors."""

    pass


class StartupConfigError(FoodGraphError):
    """Raised when the process environment is missing or invalid."""

    pass


class SchemaCompositionError(FoodGraphError):
    """Raised when schema modules cannot be composed into one schema."""

    pass


class SchemaConflictError(SchemaCompositionError):
    """Raised when two schema modules declare the same thing incompatibly."""

    pass


class DataAccessError(FoodGraphError):
    """Raised when a query against the relational store fails."""

    pass
