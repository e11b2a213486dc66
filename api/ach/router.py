"""
FastAPI router for ACH endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from . import schemas, service
from .repository import AchRepository, get_repository

router = APIRouter(prefix="/ach")

# `ach_data.id` is a Postgres integer.
MAX_ID = 2**31 - 1
AchId = Annotated[int, Path(ge=1, le=MAX_ID)]

_BAD_REQUEST = {400: {"model": schemas.MessageResponse, "description": "Missing or invalid field"}}
_NOT_FOUND = {404: {"model": schemas.MessageResponse, "description": "Record not found"}}
_SERVER_ERROR = {500: {"model": schemas.MessageResponse, "description": "Storage error"}}


@router.get(
    "",
    response_model=list[schemas.AchRecord],
    summary="List all ACH records",
    responses={**_SERVER_ERROR},
)
async def list_ach(repo: AchRepository = Depends(get_repository)) -> list[schemas.AchRecord]:
    return await service.list_records(repo)


@router.get(
    "/{ach_id}",
    response_model=schemas.AchRecord,
    summary="Get an ACH record by id",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def get_ach(
    ach_id: AchId,
    repo: AchRepository = Depends(get_repository),
) -> schemas.AchRecord:
    return await service.get_record(repo, ach_id)


@router.post(
    "",
    response_model=schemas.AchRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a new ACH record",
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
)
async def create_ach(
    payload: schemas.AchPayload,
    repo: AchRepository = Depends(get_repository),
) -> schemas.AchRecord:
    """
    All four fields are required and must be non-empty (zero counts as empty).
    """
    return await service.create_record(repo, payload)


@router.put(
    "/{ach_id}",
    response_model=schemas.AchRecord,
    summary="Replace an ACH record",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def update_ach(
    ach_id: AchId,
    payload: schemas.AchPayload,
    repo: AchRepository = Depends(get_repository),
) -> schemas.AchRecord:
    return await service.update_record(repo, ach_id, payload)


@router.delete(
    "/{ach_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an ACH record",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_ach(
    ach_id: AchId,
    repo: AchRepository = Depends(get_repository),
) -> Response:
    await service.delete_record(repo, ach_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
