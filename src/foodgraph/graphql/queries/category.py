"""
Category root query fields
"""

import strawberry

from ..types.category import Category, GetCategoryByIdOpts


@strawberry.type
class CategoryQuery:
    """Category fields of the root query."""

    @strawberry.field
    async def get_all_categories(
        self, info: strawberry.Info, opts: GetCategoryByIdOpts | None = strawberry.UNSET
    ) -> list[Category | None]:
        """Get all categories with their foods."""
        from ..resolvers.category import resolve_all_categories

        return await resolve_all_categories(info, opts or None)

    @strawberry.field
    async def get_category_by_id(
        self,
        info: strawberry.Info,
        id: int,
        opts: GetCategoryByIdOpts | None = strawberry.UNSET,
    ) -> Category | None:
        """Get a category by ID with its foods."""
        from ..resolvers.category import resolve_category_by_id

        return await resolve_category_by_id(info, id, opts or None)
