from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RouteStatus(str, Enum):
    ACTIVE = "ACTIVE"
    # No code path moves a route here yet.
    FINISHED = "FINISHED"


class NewRoute(BaseModel):
    """A new route"""

    user_id: UUID


class Route(BaseModel):
    """A route"""

    model_config = ConfigDict(frozen=True)

    id: UUID
    user_id: UUID
    status: RouteStatus = Field(default=RouteStatus.ACTIVE)


class GraphQLRequest(BaseModel):
    """Body accepted by the GraphQL endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = Field(default=None, alias="operationName")
