"""
Request context shared by all resolvers
"""

from typing import Any

import strawberry

from ..database.client import DataAccessClient


def get_client_from_info(info: strawberry.Info) -> DataAccessClient:
    """Get the data access client injected into the request context."""
    context: dict[str, Any] = info.context
    client = context.get("db")
    if client is None:
        raise RuntimeError("Data access client missing from GraphQL context")
    return client
