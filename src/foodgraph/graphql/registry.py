"""
Schema module registry.

Each schema module contributes GraphQL types and, optionally, a fragment of
the root ``Query`` type. The registry merges the modules, in registration
order, into one executable Strawberry schema and one resolver table, failing
fast when two modules disagree about a type or a field.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import strawberry
from graphql import (
    get_introspection_query,
    graphql_sync,
    is_introspection_type,
    is_specified_scalar_type,
)
from graphql import validate_schema as gql_validate_schema
from strawberry.tools import merge_types
from strawberry.utils.str_converters import to_camel_case

from ..errors import SchemaCompositionError, SchemaConflictError
from ..logging import get_logger

logger = get_logger(__name__)

QUERY_TYPE_NAME = "Query"

ResolverTable = dict[str, dict[str, Callable[..., Any] | None]]


@dataclass(frozen=True)
class SchemaModule:
    """
    A self-contained unit of the graph.

    Attributes:
        id: Globally unique module identifier
        types: Strawberry object and input types the module declares
        query: Strawberry type whose fields extend the root Query
        declares_query: True for the base module that declares Query itself
    """

    id: str
    types: tuple[type, ...] = ()
    query: type | None = None
    declares_query: bool = False


@dataclass
class ComposedSchema:
    """Result of composing the registered modules."""

    schema: strawberry.Schema
    resolvers: ResolverTable
    modules: tuple[str, ...] = ()


@dataclass
class _FieldEntry:
    module_id: str
    python_name: str
    resolver: Callable[..., Any] | None


@dataclass
class _TypeEntry:
    module_id: str
    cls: type
    shape: tuple[tuple[str, str], ...]
    fields: dict[str, _FieldEntry] = field(default_factory=dict)


def _definition(cls: type) -> Any:
    definition = getattr(cls, "__strawberry_definition__", None)
    if definition is None:
        raise SchemaCompositionError(f"{cls.__qualname__} is not a Strawberry type")
    return definition


def _graphql_field_name(strawberry_field: Any) -> str:
    return strawberry_field.graphql_name or to_camel_case(strawberry_field.python_name)


def _annotation_key(strawberry_field: Any) -> str:
    annotation = getattr(strawberry_field, "type_annotation", None)
    raw = annotation.annotation if annotation is not None else None
    return raw if isinstance(raw, str) else repr(raw)


def _shape(definition: Any) -> tuple[tuple[str, str], ...]:
    """Field name -> annotation pairs used to compare two declarations of a type."""
    return tuple(
        sorted((_graphql_field_name(f), _annotation_key(f)) for f in definition.fields)
    )


def _resolver(strawberry_field: Any) -> Callable[..., Any] | None:
    base_resolver = getattr(strawberry_field, "base_resolver", None)
    return base_resolver.wrapped_func if base_resolver is not None else None


def _check_declared(schema: strawberry.Schema, types: dict[str, _TypeEntry]) -> None:
    """Every named type in the schema must be declared by a registered module."""
    undeclared = sorted(
        name
        for name, graphql_type in schema._schema.type_map.items()
        if name != QUERY_TYPE_NAME
        and name not in types
        and not is_introspection_type(graphql_type)
        and not is_specified_scalar_type(graphql_type)
    )
    if undeclared:
        raise SchemaCompositionError(
            f"Unknown type(s) {', '.join(repr(name) for name in undeclared)}: "
            f"referenced but not declared by any registered module"
        )


class ModuleRegistry:
    """
    Ordered collection of schema modules.

    Registration only records the module; every conflict check happens in
    :meth:`compose` so the whole set is validated as one build step.
    """

    def __init__(self, modules: Iterable[SchemaModule] = ()):
        self._modules: list[SchemaModule] = []
        for module in modules:
            self.register(module)

    def register(self, module: SchemaModule) -> None:
        """
        Register a schema module.

        Raises:
            SchemaConflictError: If a module with the same id is already registered
        """
        if module.id in self:
            raise SchemaConflictError(f"Schema module '{module.id}' is already registered")

        logger.debug("Registering schema module", module_id=module.id)
        self._modules.append(module)

    def list_ids(self) -> list[str]:
        return [module.id for module in self._modules]

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, module_id: str) -> bool:
        return any(module.id == module_id for module in self._modules)

    def compose(self) -> ComposedSchema:
        """
        Merge every registered module into one executable schema.

        Returns:
            The schema together with its resolver table

        Raises:
            SchemaConflictError: If two modules declare the same type with
                different shapes, declare Query twice, or bind the same field
            SchemaCompositionError: If Query is never declared or has no
                fields, references a type no module declares, or the merged
                schema fails validation
        """
        types: dict[str, _TypeEntry] = {}
        query_declared_by: str | None = None
        query_fields: dict[str, _FieldEntry] = {}
        fragments: list[type] = []

        for module in self._modules:
            if module.declares_query:
                if query_declared_by is not None:
                    raise SchemaConflictError(
                        f"Type '{QUERY_TYPE_NAME}' is declared by both "
                        f"'{query_declared_by}' and '{module.id}'"
                    )
                query_declared_by = module.id

            for cls in module.types:
                self._declare_type(types, module, cls)

            if module.query is not None:
                if query_declared_by is None:
                    raise SchemaCompositionError(
                        f"Module '{module.id}' extends '{QUERY_TYPE_NAME}' before any "
                        f"module declares it"
                    )
                self._extend_query(query_fields, module, module.query)
                fragments.append(module.query)

        if query_declared_by is None:
            raise SchemaCompositionError(f"No module declares the '{QUERY_TYPE_NAME}' type")
        if not fragments:
            raise SchemaCompositionError(f"Type '{QUERY_TYPE_NAME}' has no fields")

        query = merge_types(QUERY_TYPE_NAME, tuple(fragments))
        object_types = [
            entry.cls for entry in types.values() if not _definition(entry.cls).is_input
        ]

        try:
            schema = strawberry.Schema(query=query, types=object_types)
        except Exception as e:
            raise SchemaCompositionError(f"Failed to build GraphQL schema: {e}") from e

        _check_declared(schema, types)
        validate_schema(schema)

        resolvers: ResolverTable = {
            QUERY_TYPE_NAME: {name: entry.resolver for name, entry in query_fields.items()}
        }
        for name, entry in types.items():
            resolvers[name] = {
                field_name: field_entry.resolver for field_name, field_entry in entry.fields.items()
            }

        logger.info(
            "GraphQL schema composed",
            modules=self.list_ids(),
            query_fields=sorted(query_fields),
        )
        return ComposedSchema(schema=schema, resolvers=resolvers, modules=tuple(self.list_ids()))

    def _declare_type(self, types: dict[str, _TypeEntry], module: SchemaModule, cls: type) -> None:
        definition = _definition(cls)
        name = definition.name

        if name == QUERY_TYPE_NAME:
            raise SchemaConflictError(
                f"Module '{module.id}' declares '{QUERY_TYPE_NAME}' as a plain type; "
                f"use a query fragment instead"
            )

        shape = _shape(definition)
        existing = types.get(name)
        if existing is not None:
            if existing.cls is cls or existing.shape == shape:
                return
            raise SchemaConflictError(
                f"Type '{name}' is declared by '{existing.module_id}' and '{module.id}' "
                f"with different fields"
            )

        entry = _TypeEntry(module_id=module.id, cls=cls, shape=shape)
        for strawberry_field in definition.fields:
            entry.fields[_graphql_field_name(strawberry_field)] = _FieldEntry(
                module_id=module.id,
                python_name=strawberry_field.python_name,
                resolver=_resolver(strawberry_field),
            )
        types[name] = entry

    def _extend_query(
        self, query_fields: dict[str, _FieldEntry], module: SchemaModule, fragment: type
    ) -> None:
        for strawberry_field in _definition(fragment).fields:
            name = _graphql_field_name(strawberry_field)
            existing = query_fields.get(name)
            if existing is not None:
                raise SchemaConflictError(
                    f"Field '{QUERY_TYPE_NAME}.{name}' is bound by both "
                    f"'{existing.module_id}' and '{module.id}'"
                )
            query_fields[name] = _FieldEntry(
                module_id=module.id,
                python_name=strawberry_field.python_name,
                resolver=_resolver(strawberry_field),
            )


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate a composed GraphQL schema.

    Ensures that all type references can be resolved and that introspection
    works, so that a broken graph stops startup instead of failing requests.

    Raises:
        SchemaCompositionError: If the schema is invalid or has unresolved types
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error("GraphQL schema validation failed", errors=error_messages)
        raise SchemaCompositionError(
            f"GraphQL schema validation failed: {'; '.join(error_messages)}"
        )

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = [str(e) for e in result.errors]
        logger.error("GraphQL introspection failed", errors=error_messages)
        raise SchemaCompositionError(f"GraphQL introspection failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")
