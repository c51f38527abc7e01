"""
Food root query fields
"""

import strawberry

from ..types.food import Food
from ..types.main import PrismaQueryOptions


@strawberry.type
class FoodQuery:
    """Food fields of the root query."""

    @strawberry.field
    async def get_all_food(
        self, info: strawberry.Info, opts: PrismaQueryOptions | None = strawberry.UNSET
    ) -> list[Food | None]:
        """Get all foods, optionally windowed with skip/take."""
        from ..resolvers.food import resolve_all_food

        return await resolve_all_food(info, opts or None)

    @strawberry.field
    async def get_food_by_id(self, info: strawberry.Info, id: int) -> Food | None:
        """Get a food by ID."""
        from ..resolvers.food import resolve_food_by_id

        return await resolve_food_by_id(info, id)

    @strawberry.field
    async def get_food_by_name(self, info: strawberry.Info, name: str) -> list[Food | None]:
        """Get foods whose name contains the given text."""
        from ..resolvers.food import resolve_food_by_name

        return await resolve_food_by_name(info, name)
