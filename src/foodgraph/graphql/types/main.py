"""
Shared GraphQL input types
"""

import strawberry

from ...database.query import Window


@strawberry.input
class PrismaQueryOptions:
    """Result-set window forwarded to the store unmodified."""

    skip: int | None = strawberry.UNSET
    take: int | None = strawberry.UNSET

    def to_window(self) -> Window:
        return Window(
            skip=None if self.skip is strawberry.UNSET else self.skip,
            take=None if self.take is strawberry.UNSET else self.take,
        )
