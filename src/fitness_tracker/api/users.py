"""User REST endpoints."""

from __future__ import annotations

import logging
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, Response, status

from fitness_tracker.api.schemas import (
    UserEmailResponse,
    UserRequest,
    UserResponse,
    UserSimpleResponse,
    to_user_email_response,
    to_user_payload,
    to_user_response,
    to_user_simple_response,
)
from fitness_tracker.domain.errors import InvalidArgumentError

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/v1/users", tags=["users"])
logger = logging.getLogger(__name__)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _bad_request(exc: InvalidArgumentError) -> HTTPException:
    logger.warning("Rejected user request: %s", exc)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("")
async def list_users(request: Request) -> list[UserResponse]:
    """Return the first page of users sorted by id."""
    container = _container(request)
    users = container.user_service.find_users_paginated(
        0, container.settings.list_all_limit, "id", ascending=True
    )
    return [to_user_response(user) for user in users]


@router.get("/simple")
async def list_users_simple(request: Request) -> list[UserSimpleResponse]:
    """Return every user with names only."""
    users = _container(request).user_service.find_all_users()
    return [to_user_simple_response(user) for user in users]


@router.get("/paginated")
async def list_users_paginated(
    request: Request,
    page: int = 0,
    size: int | None = None,
    sort_by: str = "id",
    ascending: bool = True,
) -> list[UserResponse]:
    """Return one page of users."""
    container = _container(request)
    page_size = size if size is not None else container.settings.default_page_size
    try:
        users = container.user_service.find_users_paginated(
            page, page_size, sort_by, ascending
        )
    except InvalidArgumentError as exc:
        raise _bad_request(exc) from exc
    return [to_user_response(user) for user in users]


@router.get("/email")
async def search_users_by_email(
    email: str, request: Request
) -> list[UserEmailResponse]:
    """Search users by an email fragment."""
    users = _container(request).user_service.find_users_by_email(email)
    return [to_user_email_response(user) for user in users]


@router.get("/older/{day}")
async def list_users_older_than(day: date, request: Request) -> list[UserResponse]:
    """Return users born before the given date."""
    users = _container(request).user_service.find_users_older_than(day)
    return [to_user_response(user) for user in users]


@router.get("/{user_id}")
async def get_user(user_id: int, request: Request) -> UserResponse:
    """Return a single user."""
    user = _container(request).user_service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return to_user_response(user)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(body: UserRequest, request: Request) -> UserResponse:
    """Create a user."""
    try:
        user = _container(request).user_service.create_user(to_user_payload(body))
    except InvalidArgumentError as exc:
        raise _bad_request(exc) from exc
    return to_user_response(user)


@router.put("/{user_id}")
async def update_user(user_id: int, body: UserRequest, request: Request) -> UserResponse:
    """Apply a partial update to a user."""
    try:
        user = _container(request).user_service.update_user(
            user_id, to_user_payload(body)
        )
    except InvalidArgumentError as exc:
        raise _bad_request(exc) from exc
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return to_user_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, request: Request) -> Response:
    """Delete a user."""
    _container(request).user_service.remove_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
