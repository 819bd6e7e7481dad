from __future__ import annotations

from fastapi import Request

from user_api.user_store import InMemoryUserStore


def get_store(request: Request) -> InMemoryUserStore:
    """FastAPI dependency for the user store.

    The store is owned by the application instance (see ``create_app``), never
    by this module, so tests can swap it with ``app.dependency_overrides``.
    """
    return request.app.state.store
