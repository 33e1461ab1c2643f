"""
Route tracking package.

Routes are kept in an in-memory store shared by every request and exposed
through a single GraphQL endpoint, with GraphiQL served alongside it for
interactive use. Nothing is persisted; restarting the process starts from an
empty store.
"""

from .router import router  # noqa: F401
