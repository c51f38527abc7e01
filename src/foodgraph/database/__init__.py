"""
Database module for foodgraph
"""

from .client import DataAccessClient
from .connection import create_client, get_client, reset_client
from .query import Relation, Window

__all__ = ["DataAccessClient", "Relation", "Window", "create_client", "get_client", "reset_client"]
