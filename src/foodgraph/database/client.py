"""
Data access client for the relational store
"""

from collections import defaultdict
from collections.abc import AsyncGenerator, Iterable, Sequence
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import ColumnElement, func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import Load, Mapper, RelationshipProperty, selectinload

from ..dbmodels import Base
from ..errors import DataAccessError
from ..logging import get_logger
from .query import Relation, Window

logger = get_logger(__name__)

Record = dict[str, Any]


def to_record(instance: Base, include: Iterable[Relation] = ()) -> Record:
    """Convert an ORM instance into a plain dict, following included relations.

    Windowed collections are left empty here and filled by the client.
    """
    mapper = inspect(instance).mapper
    record: Record = {attr.key: getattr(instance, attr.key) for attr in mapper.column_attrs}

    for relation in include:
        if _is_windowed(mapper, relation):
            record[relation.name] = []
            continue

        value = getattr(instance, relation.name)
        if value is None:
            record[relation.name] = None
        elif isinstance(value, list):
            record[relation.name] = [to_record(item, relation.include) for item in value]
        else:
            record[relation.name] = to_record(value, relation.include)

    return record


def _relationship(mapper: Mapper, relation: Relation) -> RelationshipProperty:
    try:
        return mapper.relationships[relation.name]
    except KeyError:
        raise ValueError(
            f"{mapper.class_.__name__} has no relation named '{relation.name}'"
        ) from None


def _is_windowed(mapper: Mapper, relation: Relation) -> bool:
    if relation.window.is_empty:
        return False
    if not _relationship(mapper, relation).uselist:
        raise ValueError(f"Cannot window to-one relation '{relation.name}'")
    return True


def _loader_options(
    mapper: Mapper, include: Iterable[Relation], parent: Load | None = None
) -> list[Load]:
    """Build selectinload options for every unwindowed relation in the tree."""
    options: list[Load] = []
    for relation in include:
        if _is_windowed(mapper, relation):
            continue

        attribute = getattr(mapper.class_, relation.name)
        loader = selectinload(attribute) if parent is None else parent.selectinload(attribute)
        options.append(loader)

        target = _relationship(mapper, relation).mapper
        options.extend(_loader_options(target, relation.include, loader))
    return options


def _window_errors(window: Window, include: Iterable[Relation]) -> list[str]:
    """Negative OFFSET/LIMIT values anywhere in the query, as the store reports them.

    Windowed relations never reach the store as OFFSET/LIMIT, so they are
    checked here for every query.
    """
    errors = []
    if window.skip is not None and window.skip < 0:
        errors.append("OFFSET must not be negative")
    if window.take is not None and window.take < 0:
        errors.append("LIMIT must not be negative")
    for relation in include:
        errors.extend(
            f"{relation.name}: {error}"
            for error in _window_errors(relation.window, relation.include)
        )
    return errors


def _apply_window(stmt: Any, window: Window) -> Any:
    if window.skip is not None:
        stmt = stmt.offset(window.skip)
    if window.take is not None:
        stmt = stmt.limit(window.take)
    return stmt


class DataAccessClient:
    """
    Shared handle to the relational store.

    Every operation opens a short-lived session, runs one primary query (plus
    one query per windowed collection relation) and returns plain records.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: AsyncEngine | None = None,
    ):
        self._session_factory = session_factory
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine | None:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a read-only session."""
        async with self._session_factory() as session:
            yield session

    async def find_many(
        self,
        model: type[Base],
        *,
        where: Sequence[ColumnElement[bool]] = (),
        include: Sequence[Relation] = (),
        window: Window = Window(),
    ) -> list[Record]:
        """
        Find all rows of a model matching the predicates.

        Args:
            model: ORM model to query
            where: SQL predicates combined with AND
            include: Relations to load eagerly
            window: Skip/take forwarded to the store

        Returns:
            Plain records ordered by primary key

        Raises:
            DataAccessError: If a window is negative or the store rejects or
                fails the query
        """
        invalid = _window_errors(window, include)
        if invalid:
            logger.error("Invalid query window", model=model.__name__, errors=invalid)
            raise DataAccessError(f"Failed to query {model.__name__}: {'; '.join(invalid)}")

        mapper = inspect(model)
        stmt = (
            select(model)
            .where(*where)
            .options(*_loader_options(mapper, include))
            .order_by(*mapper.primary_key)
        )
        stmt = _apply_window(stmt, window)

        try:
            async with self.session() as session:
                result = await session.execute(stmt)
                records = [to_record(row, include) for row in result.scalars().all()]
                await self._load_windowed(session, mapper, records, include)
        except SQLAlchemyError as e:
            logger.error("Store query failed", model=model.__name__, error=str(e))
            raise DataAccessError(f"Failed to query {model.__name__}: {e}") from e

        logger.debug("Store query completed", model=model.__name__, count=len(records))
        return records

    async def find_first(
        self,
        model: type[Base],
        *,
        where: Sequence[ColumnElement[bool]] = (),
        include: Sequence[Relation] = (),
    ) -> Record | None:
        """Find the first row (by primary key) matching the predicates, or None."""
        records = await self.find_many(model, where=where, include=include, window=Window(take=1))
        return records[0] if records else None

    async def find_unique(
        self,
        model: type[Base],
        key: Any,
        *,
        include: Sequence[Relation] = (),
    ) -> Record | None:
        """Find a row by its primary key, or None."""
        primary_key = inspect(model).primary_key[0]
        return await self.find_first(model, where=(primary_key == key,), include=include)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        if self._engine is not None:
            await self._engine.dispose()

    async def _load_windowed(
        self,
        session: AsyncSession,
        mapper: Mapper,
        records: list[Record],
        include: Iterable[Relation],
    ) -> None:
        """Fill windowed collection relations anywhere in the include tree."""
        if not records:
            return

        for relation in include:
            prop = _relationship(mapper, relation)

            if not _is_windowed(mapper, relation):
                nested: list[Record] = []
                for record in records:
                    value = record.get(relation.name)
                    if isinstance(value, list):
                        nested.extend(value)
                    elif value is not None:
                        nested.append(value)
                await self._load_windowed(session, prop.mapper, nested, relation.include)
                continue

            children = await self._fetch_window(session, mapper, prop, records, relation)
            await self._load_windowed(session, prop.mapper, children, relation.include)

    async def _fetch_window(
        self,
        session: AsyncSession,
        mapper: Mapper,
        prop: RelationshipProperty,
        records: list[Record],
        relation: Relation,
    ) -> list[Record]:
        """Load one windowed collection for all parents with a single ranked query."""
        (local_column, remote_column), *_ = prop.local_remote_pairs
        local_key = mapper.get_property_by_column(local_column).key
        target = prop.mapper
        remote_key = target.get_property_by_column(remote_column).key
        target_pk = target.primary_key[0]

        parent_keys = [record[local_key] for record in records]
        ranked = (
            select(
                target_pk.label("ranked_id"),
                func.row_number()
                .over(partition_by=remote_column, order_by=target_pk)
                .label("row_number"),
            )
            .where(remote_column.in_(parent_keys))
            .subquery()
        )

        stmt = (
            select(target.class_)
            .join(ranked, target_pk == ranked.c.ranked_id)
            .options(*_loader_options(target, relation.include))
            .order_by(remote_column, target_pk)
        )
        skip = relation.window.skip
        if skip is not None:
            stmt = stmt.where(ranked.c.row_number > skip)
        if relation.window.take is not None:
            stmt = stmt.where(ranked.c.row_number <= (skip or 0) + relation.window.take)

        result = await session.execute(stmt)
        children = [to_record(row, relation.include) for row in result.scalars().all()]

        grouped: dict[Any, list[Record]] = defaultdict(list)
        for child in children:
            grouped[child[remote_key]].append(child)
        for record in records:
            record[relation.name] = grouped.get(record[local_key], [])

        return children
