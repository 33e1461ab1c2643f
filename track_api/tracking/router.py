from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from pydantic import ValidationError

from .graphiql import graphiql_source
from .graphql_schema import Context, execute_request
from .schemas import GraphQLRequest
from .store import RouteStore

logger = logging.getLogger(__name__)

GRAPHQL_PATH = "/graphql"
GRAPHIQL_PATH = "/graphiql"

router = APIRouter(tags=["Routes"])


class BadGraphQLRequest(HTTPException):
    """A request body that could not be read as a GraphQL request."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


async def bad_graphql_request_handler(request: Request, exc: BadGraphQLRequest) -> JSONResponse:
    logger.info(f"Rejected GraphQL request: {exc.detail}")
    return JSONResponse({"errors": [{"message": exc.detail}]}, status_code=exc.status_code)


def get_store(request: Request) -> RouteStore:
    return request.app.state.store


@router.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    return RedirectResponse(url=GRAPHIQL_PATH, status_code=status.HTTP_308_PERMANENT_REDIRECT)


@router.post(GRAPHQL_PATH, summary="Execute a GraphQL query or mutation")
async def handle_graphql(request: Request, store: RouteStore = Depends(get_store)) -> JSONResponse:
    try:
        body = await request.json()
    except ValueError:
        raise BadGraphQLRequest("Request body must be valid JSON.")

    try:
        payload = GraphQLRequest.model_validate(body)
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"]) or "body"
        raise BadGraphQLRequest(f"Invalid GraphQL request: {location}: {error['msg']}")

    response = await execute_request(payload, Context(store=store))
    status_code = status.HTTP_200_OK if response.ok else status.HTTP_400_BAD_REQUEST
    return JSONResponse(response.payload, status_code=status_code)


@router.get(GRAPHIQL_PATH, response_class=HTMLResponse, summary="Interactive GraphQL client")
async def handle_graphiql() -> HTMLResponse:
    return HTMLResponse(graphiql_source(GRAPHQL_PATH))
