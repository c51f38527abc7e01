from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

import strawberry

from ...database.query import Relation, Window
from ...dbmodels import Foods
from ...logging import get_logger
from ..context import get_client_from_info

if TYPE_CHECKING:
    from ..types.food import Food
    from ..types.main import PrismaQueryOptions

logger = get_logger(__name__)

# Every food query returns the category and all three composition profiles
FOOD_RELATIONS = (
    Relation("category"),
    Relation("nutrients"),
    Relation("amino_acids"),
    Relation("fatty_acids"),
)


def measurements_from_record(type_: type, record: dict[str, Any] | None) -> Any:
    """Build a profile type from the record columns it declares."""
    if record is None:
        return None
    return type_(**{field.name: record.get(field.name) for field in dataclasses.fields(type_)})


def food_from_record(record: dict[str, Any]) -> Food:
    """Convert a food record (with its included relations) to the GraphQL type."""
    from ..types.amino_acid import AminoAcid
    from ..types.fatty_acid import FattyAcid
    from ..types.food import Food as FoodType
    from ..types.nutrient import Nutrient
    from .category import category_from_record

    category = record.get("category")
    return FoodType(
        id=record["id"],
        name=record["name"],
        category=category_from_record(category) if category is not None else None,
        amino_acids=measurements_from_record(AminoAcid, record.get("amino_acids")),
        fatty_acids=measurements_from_record(FattyAcid, record.get("fatty_acids")),
        nutrients=measurements_from_record(Nutrient, record.get("nutrients")),
    )


# Query resolvers
async def resolve_all_food(
    info: strawberry.Info, opts: PrismaQueryOptions | None = None
) -> list[Food]:
    """Resolve every food, windowed by the caller's skip/take."""
    window = opts.to_window() if opts else Window()
    records = await get_client_from_info(info).find_many(
        Foods, include=FOOD_RELATIONS, window=window
    )
    return [food_from_record(record) for record in records]


async def resolve_food_by_id(info: strawberry.Info, id: int) -> Food | None:
    """Resolve a food by its ID."""
    record = await get_client_from_info(info).find_unique(Foods, id, include=FOOD_RELATIONS)
    if record is None:
        logger.info("Food not found", food_id=id)
        return None
    return food_from_record(record)


async def resolve_food_by_name(info: strawberry.Info, name: str) -> list[Food]:
    """
    Resolve foods whose name contains the given text.

    Matching is case-insensitive; LIKE wildcards in the text match literally.
    """
    records = await get_client_from_info(info).find_many(
        Foods,
        where=(Foods.name.icontains(name, autoescape=True),),
        include=FOOD_RELATIONS,
    )
    return [food_from_record(record) for record in records]
