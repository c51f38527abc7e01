"""
Category GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from .main import PrismaQueryOptions

if TYPE_CHECKING:
    from .food import Food


@strawberry.type
class Category:
    """Food category type for GraphQL API."""

    id: int
    name: str
    foods: list[Annotated["Food", strawberry.lazy(".food")] | None]


@strawberry.input
class GetCategoryByIdOpts:
    """Options applied to the foods listed under a category."""

    food_filters: PrismaQueryOptions | None = strawberry.UNSET
