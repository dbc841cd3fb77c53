"""Training REST endpoints."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, Response, status

from fitness_tracker.api.schemas import (
    TrainingRequest,
    TrainingResponse,
    to_training_payload,
    to_training_response,
)
from fitness_tracker.domain.errors import InvalidArgumentError, NotFoundError
from fitness_tracker.domain.trainings import ActivityType

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/v1/trainings", tags=["trainings"])
logger = logging.getLogger(__name__)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("")
async def list_trainings(request: Request) -> list[TrainingResponse]:
    """Return every training."""
    trainings = _container(request).training_service.get_all_trainings()
    return [to_training_response(training) for training in trainings]


@router.get("/finished/{day}")
async def list_trainings_finished_after(
    day: date, request: Request
) -> list[TrainingResponse]:
    """Return trainings that ended after the start of the given day."""
    moment = datetime.combine(day, time.min)
    trainings = _container(request).training_service.get_trainings_with_end_after(
        moment
    )
    return [to_training_response(training) for training in trainings]


@router.get("/activity-type")
async def list_trainings_by_activity_type(
    activity_type: str, request: Request
) -> list[TrainingResponse]:
    """Return trainings of one activity type."""
    try:
        parsed = ActivityType(activity_type)
    except ValueError as exc:
        logger.warning("Unknown activity type: %s", activity_type)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown activity type: {activity_type}",
        ) from exc
    trainings = _container(request).training_service.get_trainings_by_activity_type(
        parsed
    )
    return [to_training_response(training) for training in trainings]


@router.get("/{user_id}")
async def list_trainings_for_user(
    user_id: int, request: Request
) -> list[TrainingResponse]:
    """Return trainings owned by a user."""
    trainings = _container(request).training_service.get_trainings_by_user_id(
        user_id
    )
    return [to_training_response(training) for training in trainings]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_training(body: TrainingRequest, request: Request) -> TrainingResponse:
    """Create a training for an existing user."""
    try:
        training = _container(request).training_service.create_training(
            to_training_payload(body), body.user_id
        )
    except InvalidArgumentError as exc:
        logger.warning("Rejected training create: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return to_training_response(training)


@router.put("/{training_id}")
async def update_training(
    training_id: int, body: TrainingRequest, request: Request
) -> TrainingResponse:
    """Replace a training's fields."""
    try:
        training = _container(request).training_service.update_training(
            to_training_payload(body), training_id, body.user_id
        )
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except InvalidArgumentError as exc:
        logger.warning("Rejected training update: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return to_training_response(training)


@router.delete("/{training_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_training(training_id: int, request: Request) -> Response:
    """Delete a training."""
    _container(request).training_service.remove_training(training_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
