from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...dbmodels import Units
from ..context import get_client_from_info

if TYPE_CHECKING:
    from ..types.unit import Unit


def unit_from_record(record: dict[str, Any]) -> Unit:
    from ..types.unit import Unit as UnitType

    return UnitType(
        id=record["id"],
        field_name=record["field_name"],
        unit=record["unit"],
        label_pt=record["label_pt"],
        infoods_tagname=record["infoods_tagname"],
        systematic_name=record["systematic_name"],
        common_name=record["common_name"],
    )


# Query resolvers
async def resolve_units(info: strawberry.Info) -> list[Unit]:
    records = await get_client_from_info(info).find_many(Units)
    return [unit_from_record(record) for record in records]


async def resolve_unit_by_field_name(info: strawberry.Info, field_name: str) -> Unit | None:
    record = await get_client_from_info(info).find_first(
        Units, where=(Units.field_name == field_name,)
    )
    return unit_from_record(record) if record is not None else None
