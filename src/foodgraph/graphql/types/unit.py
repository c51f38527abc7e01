"""
Unit GraphQL type definitions
"""

import strawberry


@strawberry.type
class Unit:
    """Measurement unit of a nutritional field."""

    id: int
    field_name: str
    unit: str
    label_pt: str
    infoods_tagname: str | None
    systematic_name: str | None
    common_name: str | None
