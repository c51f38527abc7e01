"""
Fatty acid profile GraphQL type
"""

import strawberry


@strawberry.type
class FattyAcid:
    """Fatty acid content of a food; optional fields are null when not measured."""

    saturated: float
    monounsaturated: float
    polyunsaturated: float
    twelve_zero: float | None
    fourteen_zero: float | None
    fourteen_one: float | None
    sixteen_zero: float | None
    sixteen_one: float | None
    eighteen_zero: float | None
    eighteen_one: float | None
    eighteen_one_t: float | None
    eighteen_two_n6: float | None
    eighteen_two_t: float | None
    eighteen_three_n3: float | None
    twenty_zero: float | None
    twenty_one: float | None
    twenty_four: float | None
    twenty_five: float | None
    twenty_two_zero: float | None
    twenty_two_five: float | None
    twenty_two_six: float | None
    twenty_four_zero: float | None
