"""
GraphQL schema for routes.

The schema is assembled by hand with graphql-core. Query and mutation fields
are bound to async handlers through two dispatch tables, so adding an
operation means adding a handler with the ``(arguments, context)`` signature
and registering it under its field name.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLError,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    StringValueNode,
    graphql,
    print_ast,
)

from .schemas import GraphQLRequest, NewRoute, Route, RouteStatus
from .store import RouteNotFoundError, RouteStore

logger = logging.getLogger(__name__)


@dataclass
class Context:
    """Per-request context handed to every handler."""

    store: RouteStore


Handler = Callable[[Dict[str, Any], Context], Awaitable[Any]]


def _serialize_uuid(output_value: Any) -> str:
    if isinstance(output_value, uuid.UUID):
        return str(output_value)
    if isinstance(output_value, str):
        return str(_parse_uuid_value(output_value))
    raise GraphQLError(f"UUID cannot represent value: {output_value!r}")


def _parse_uuid_value(input_value: Any) -> uuid.UUID:
    if isinstance(input_value, uuid.UUID):
        return input_value
    if not isinstance(input_value, str):
        raise GraphQLError(f"UUID cannot represent a non string value: {input_value!r}")
    try:
        return uuid.UUID(input_value)
    except ValueError as e:
        raise GraphQLError(f"UUID cannot represent value: {input_value!r}") from e


def _parse_uuid_literal(value_node: Any, _variables: Optional[Dict[str, Any]] = None) -> uuid.UUID:
    if not isinstance(value_node, StringValueNode):
        raise GraphQLError(
            f"UUID cannot represent a non string value: {print_ast(value_node)}",
            value_node,
        )
    return _parse_uuid_value(value_node.value)


UUIDScalar = GraphQLScalarType(
    name="UUID",
    description="A UUID rendered in its canonical hyphenated form.",
    serialize=_serialize_uuid,
    parse_value=_parse_uuid_value,
    parse_literal=_parse_uuid_literal,
)

RouteStatusEnum = GraphQLEnumType(
    "RouteStatus",
    {status.name: GraphQLEnumValue(status) for status in RouteStatus},
)

RouteType = GraphQLObjectType(
    "Route",
    lambda: {
        "id": GraphQLField(GraphQLNonNull(UUIDScalar)),
        "userId": GraphQLField(
            GraphQLNonNull(UUIDScalar),
            resolve=lambda route, _info: route.user_id,
        ),
        "status": GraphQLField(GraphQLNonNull(RouteStatusEnum)),
    },
    description="A route",
)

NewRouteInput = GraphQLInputObjectType(
    "NewRoute",
    lambda: {"userId": GraphQLInputField(GraphQLNonNull(UUIDScalar))},
    description="A new route",
)


async def resolve_route(arguments: Dict[str, Any], context: Context) -> Route:
    return await context.store.get_route(arguments["id"])


async def resolve_create_route(arguments: Dict[str, Any], context: Context) -> Route:
    new_route = NewRoute(user_id=arguments["newRoute"]["userId"])
    return await context.store.create_route(new_route)


QUERY_HANDLERS: Dict[str, Handler] = {
    "route": resolve_route,
}

MUTATION_HANDLERS: Dict[str, Handler] = {
    "createRoute": resolve_create_route,
}

FIELD_ARGUMENTS: Dict[str, Dict[str, GraphQLArgument]] = {
    "route": {"id": GraphQLArgument(GraphQLNonNull(UUIDScalar))},
    "createRoute": {"newRoute": GraphQLArgument(GraphQLNonNull(NewRouteInput))},
}


def _bind(handler: Handler) -> Callable[..., Awaitable[Any]]:
    async def resolve(_root: Any, info: Any, **arguments: Any) -> Any:
        return await handler(arguments, info.context)

    return resolve


def _root_fields(handlers: Dict[str, Handler]) -> Dict[str, GraphQLField]:
    return {
        name: GraphQLField(
            GraphQLNonNull(RouteType),
            args=FIELD_ARGUMENTS.get(name),
            resolve=_bind(handler),
        )
        for name, handler in handlers.items()
    }


def build_schema() -> GraphQLSchema:
    return GraphQLSchema(
        query=GraphQLObjectType("Query", lambda: _root_fields(QUERY_HANDLERS)),
        mutation=GraphQLObjectType("Mutation", lambda: _root_fields(MUTATION_HANDLERS)),
    )


schema = build_schema()


@dataclass
class GraphQLResponse:
    payload: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return not self.payload.get("errors")


async def execute_request(request: GraphQLRequest, context: Context) -> GraphQLResponse:
    """Run a single query or mutation against the route schema."""
    result = await graphql(
        schema,
        request.query,
        context_value=context,
        variable_values=request.variables,
        operation_name=request.operation_name,
    )
    for error in result.errors or []:
        original = error.original_error
        if original is not None and not isinstance(original, (RouteNotFoundError, GraphQLError)):
            logger.error(f"Unexpected error while resolving {error.path}", exc_info=original)
        else:
            logger.info(f"GraphQL error: {error.message}")
    return GraphQLResponse(payload=result.formatted)
