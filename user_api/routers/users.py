from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse

from user_api.deps import get_store
from user_api.errors import EncodingFailure
from user_api.models import UserRecord
from user_api.user_store import InMemoryUserStore, parse_user_id

logger = logging.getLogger("user_api")

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def _encode(payload: Any, status_code: int) -> Response:
    # Serialization happens outside the store lock.
    try:
        if isinstance(payload, list):
            content = [u.model_dump() for u in payload]
        else:
            content = payload.model_dump()
        return JSONResponse(content=content, status_code=status_code)
    except (TypeError, ValueError) as e:
        logger.exception("Failed to encode response")
        raise EncodingFailure("Error encoding response") from e


# Handlers are plain ``def`` so FastAPI runs them in its thread pool; the
# store's lock is what serializes them.


@router.post("", response_model=UserRecord, status_code=201)
def create_user(
    payload: UserRecord = Body(...),
    store: InMemoryUserStore = Depends(get_store),
) -> Response:
    created = store.create(payload)
    return _encode(created, 201)


@router.get("", response_model=List[UserRecord])
def list_users(store: InMemoryUserStore = Depends(get_store)) -> Response:
    return _encode(store.list(), 200)


@router.get("/{user_id}", response_model=UserRecord)
def get_user(user_id: str, store: InMemoryUserStore = Depends(get_store)) -> Response:
    return _encode(store.get(parse_user_id(user_id)), 200)


@router.put("/{user_id}", response_model=UserRecord)
def update_user(
    user_id: str,
    payload: UserRecord = Body(...),
    store: InMemoryUserStore = Depends(get_store),
) -> Response:
    """Replace a user. The body must carry every required field."""
    updated = store.update(parse_user_id(user_id), payload)
    return _encode(updated, 200)


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: str, store: InMemoryUserStore = Depends(get_store)) -> Response:
    store.delete(parse_user_id(user_id))
    return Response(status_code=204)
