from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...database.query import Relation, Window
from ...dbmodels import Categories
from ...logging import get_logger
from ..context import get_client_from_info
from .food import FOOD_RELATIONS

if TYPE_CHECKING:
    from ..types.category import Category, GetCategoryByIdOpts

logger = get_logger(__name__)


def category_relations(opts: GetCategoryByIdOpts | None) -> tuple[Relation, ...]:
    """Foods of each category, windowed per category by opts.foodFilters."""
    window = Window()
    if opts and opts.food_filters:
        window = opts.food_filters.to_window()
    return (Relation("foods", window=window, include=FOOD_RELATIONS),)


def category_from_record(record: dict[str, Any]) -> Category:
    """Convert a category record to the GraphQL type.

    ``foods`` stays None when the relation was not included in the query.
    """
    from ..types.category import Category as CategoryType
    from .food import food_from_record

    foods = record.get("foods")
    return CategoryType(
        id=record["id"],
        name=record["name"],
        foods=[food_from_record(food) for food in foods] if foods is not None else None,
    )


# Query resolvers
async def resolve_all_categories(
    info: strawberry.Info, opts: GetCategoryByIdOpts | None = None
) -> list[Category]:
    """Resolve every category with its foods."""
    records = await get_client_from_info(info).find_many(
        Categories, include=category_relations(opts)
    )
    return [category_from_record(record) for record in records]


async def resolve_category_by_id(
    info: strawberry.Info, id: int, opts: GetCategoryByIdOpts | None = None
) -> Category | None:
    """Resolve a category by its ID with its foods."""
    record = await get_client_from_info(info).find_unique(
        Categories, id, include=category_relations(opts)
    )
    if record is None:
        logger.info("Category not found", category_id=id)
        return None
    return category_from_record(record)
