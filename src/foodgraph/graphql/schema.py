"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from ..config import Settings
from ..database.client import DataAccessClient
from ..database.connection import get_client
from ..logging import get_logger
from .modules import MODULES
from .registry import ComposedSchema, ModuleRegistry, SchemaModule

logger = get_logger(__name__)


def build_schema(modules: tuple[SchemaModule, ...] = MODULES) -> ComposedSchema:
    """Compose the schema modules into one validated schema.

    Raises:
        SchemaCompositionError: If the modules conflict or the result is invalid
    """
    return ModuleRegistry(modules).compose()


def print_schema(composed: ComposedSchema | None = None) -> str:
    """Render the composed schema as SDL."""
    composed = composed or build_schema()
    return composed.schema.as_str()


# Create the GraphQL router for FastAPI integration
def create_graphql_router(
    schema: strawberry.Schema,
    settings: Settings,
    client: DataAccessClient | None = None,
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The data access client is injected into every request context; when no
    client is given the process-wide one is used.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "db": client or get_client(settings),
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        # GraphiQL IDE only in development
        graphql_ide=None if settings.is_production else "graphiql",
        allow_queries_via_get=False,
        context_getter=get_context,
    )
