"""
foodgraph
Read-only GraphQL API over a food composition database
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
