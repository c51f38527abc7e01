"""
Food GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .amino_acid import AminoAcid
    from .category import Category
    from .fatty_acid import FattyAcid
    from .nutrient import Nutrient


@strawberry.type
class Food:
    """Food type for GraphQL API."""

    id: int
    name: str
    category: Annotated["Category", strawberry.lazy(".category")]

    amino_acids: Annotated["AminoAcid", strawberry.lazy(".amino_acid")] | None
    fatty_acids: Annotated["FattyAcid", strawberry.lazy(".fatty_acid")] | None
    nutrients: Annotated["Nutrient", strawberry.lazy(".nutrient")] | None
