from __future__ import annotations

import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Dict

from .schemas import NewRoute, Route, RouteStatus

logger = logging.getLogger(__name__)


class RouteNotFoundError(LookupError):
    """Raised when no route is stored under the requested id."""

    def __init__(self, route_id: uuid.UUID) -> None:
        super().__init__("unable to find route")
        self.route_id = route_id


class ReadWriteLock:
    """
    Multiple-readers / single-writer lock for coroutines.

    Readers share the lock. A writer holds it alone, and once a writer is
    waiting no new reader is admitted, so writers cannot be starved by a
    steady stream of reads.
    """

    def __init__(self) -> None:
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._condition:
            await self._condition.wait_for(
                lambda: not self._writer and not self._waiting_writers
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._condition:
                self._readers -= 1
                if not self._readers:
                    self._condition.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._condition:
            self._waiting_writers += 1
            try:
                await self._condition.wait_for(
                    lambda: not self._writer and not self._readers
                )
            except BaseException:
                # Readers held back for this writer must be woken up again
                self._waiting_writers -= 1
                self._condition.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._condition:
                self._writer = False
                self._condition.notify_all()


class RouteStore:
    """In-memory route store shared by every request handler."""

    def __init__(self, id_factory: Callable[[], uuid.UUID] = uuid.uuid4) -> None:
        self._lock = ReadWriteLock()
        self._routes: Dict[uuid.UUID, Route] = {}
        self._id_factory = id_factory

    async def get_route(self, route_id: uuid.UUID) -> Route:
        async with self._lock.read():
            route = self._routes.get(route_id)
        if route is None:
            logger.debug(f"Route {route_id} not found")
            raise RouteNotFoundError(route_id)
        return route.model_copy()

    async def create_route(self, new_route: NewRoute) -> Route:
        route = Route(
            id=self._id_factory(),
            user_id=new_route.user_id,
            status=RouteStatus.ACTIVE,
        )
        async with self._lock.write():
            while route.id in self._routes:
                logger.warning(f"Generated route id {route.id} already in use, regenerating")
                route = route.model_copy(update={"id": self._id_factory()})
            self._routes[route.id] = route
        logger.info(f"Created route {route.id} for user {route.user_id}")
        return route.model_copy()

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._routes)
