"""
Unit root query fields
"""

import strawberry

from ..types.unit import Unit


@strawberry.type
class UnitQuery:
    """Unit fields of the root query."""

    @strawberry.field
    async def get_units(self, info: strawberry.Info) -> list[Unit | None]:
        """Get all measurement units."""
        from ..resolvers.unit import resolve_units

        return await resolve_units(info)

    @strawberry.field
    async def get_unit_by_field_name(self, info: strawberry.Info, field_name: str) -> Unit | None:
        """Get the unit of a nutritional field."""
        from ..resolvers.unit import resolve_unit_by_field_name

        return await resolve_unit_by_field_name(info, field_name)
