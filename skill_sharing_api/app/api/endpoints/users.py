"""
User endpoints.

Fetch a user by id and create a user.  Both handlers delegate to the
``UserService`` held on ``app.state`` and only translate its outcomes
into status codes and JSON bodies.
"""

import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from skill_sharing_api.app.schemas.user import MessageResponse, UserCreatedResponse, UserView
from skill_sharing_api.app.services.errors import (
    UserNotFoundError,
    UserStoreError,
    UserValidationError,
)
from skill_sharing_api.app.services.user_service import UserService


router = APIRouter()
logger = logging.getLogger(__name__)


def get_user_service(request: Request) -> UserService:
    """Dependency returning the service wired up by ``create_app``."""
    return request.app.state.user_service


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


@router.get(
    "/{user_id:path}",
    response_model=UserView,
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> Any:
    """Return ``id``, ``name`` and ``email`` of a user.

    Any failure, not only a missing user, is answered with an empty 404.
    """
    try:
        return await service.get_user(user_id)
    except UserNotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post(
    "",
    responses={
        status.HTTP_200_OK: {"model": UserCreatedResponse},
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    },
)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> Any:
    """Create a user from ``{id, name, email}``.

    Creating an existing id answers 200 with ``User already exists``
    and leaves the stored user alone.  Other fields in the body,
    ``role`` and ``following`` included, are ignored.  The body is
    parsed here rather than by FastAPI so that an unreadable body is
    answered with a 400 ``{message}`` like every other failure.
    """
    payload: Dict[str, Any] = {}
    try:
        raw = await request.body()
        body = json.loads(raw) if raw else None
        # Anything but a JSON object is treated as an empty payload
        if isinstance(body, dict):
            payload = body
        result = await service.create_user(payload)
    except UserValidationError as e:
        return _bad_request(e.message)
    except UserStoreError as e:
        return _bad_request(f"Database error: {e.message}")
    except Exception as e:
        logger.exception("Error creating user: %s", payload.get("id"))
        return _bad_request(f"Failed to create user: {e}")

    if not result.created:
        return MessageResponse(message="User already exists")
    return UserCreatedResponse(message="User created successfully", id=result.id, name=result.name)
