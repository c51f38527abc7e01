"""
Query options understood by the data access client
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Window:
    """Result-set window forwarded to the store as OFFSET/LIMIT.

    Values are passed through unmodified; the store decides what to do with
    negative or oversized values.
    """

    skip: int | None = None
    take: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.skip is None and self.take is None


@dataclass(frozen=True)
class Relation:
    """A relation to include eagerly alongside the primary entity.

    A window only applies to collection relations, where it is evaluated per
    parent row.
    """

    name: str
    window: Window = field(default_factory=Window)
    include: tuple["Relation", ...] = ()
