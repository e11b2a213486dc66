"""
ACH request logic.

Scope:
- required-field presence checks
- row -> response mapping
- storage failures -> static 500 messages (details are logged, never returned)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from core import db

from . import schemas
from .repository import AchRepository

REQUIRED_FIELDS = ("roomName", "roomVolume", "airflowRate", "ach")

MSG_FIELDS_REQUIRED = "All fields are required"
MSG_NOT_FOUND = "Record not found"
MSG_FETCH_FAILED = "Error fetching data"
MSG_SUBMIT_FAILED = "Error submitting data"
MSG_UPDATE_FAILED = "Error updating data"
MSG_DELETE_FAILED = "Error deleting data"

logger = logging.getLogger(__name__)


def missing_fields(payload: schemas.AchPayload) -> list[str]:
    """
    Names of required fields that are absent or falsy.

    Zero counts as missing: `ach: 0` is rejected like `ach: null`.
    """
    return [name for name in REQUIRED_FIELDS if not getattr(payload, name)]


def _require_fields(payload: schemas.AchPayload) -> None:
    missing = missing_fields(payload)
    if missing:
        logger.info("ach_payload_rejected missing=%s", ",".join(missing))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MSG_FIELDS_REQUIRED)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MSG_NOT_FOUND)


def _storage_failure(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _to_record(row: dict[str, Any]) -> schemas.AchRecord:
    return schemas.AchRecord(
        id=int(row["id"]),
        roomName=str(row["room_name"]),
        roomVolume=float(row["room_volume"]),
        airflowRate=float(row["airflow_rate"]),
        ach=float(row["ach"]),
    )


def _write_args(payload: schemas.AchPayload) -> dict[str, Any]:
    return {
        "room_name": payload.roomName,
        "room_volume": payload.roomVolume,
        "airflow_rate": payload.airflowRate,
        "ach": payload.ach,
    }


async def list_records(repo: AchRepository) -> list[schemas.AchRecord]:
    try:
        rows = await repo.list_records()
    except db.DatabaseError as exc:
        logger.exception("ach_list_failed")
        raise _storage_failure(MSG_FETCH_FAILED) from exc
    return [_to_record(row) for row in rows]


async def get_record(repo: AchRepository, ach_id: int) -> schemas.AchRecord:
    try:
        row = await repo.get_record(ach_id)
    except db.DatabaseError as exc:
        logger.exception("ach_get_failed id=%s", ach_id)
        raise _storage_failure(MSG_FETCH_FAILED) from exc
    if row is None:
        raise _not_found()
    return _to_record(row)


async def create_record(repo: AchRepository, payload: schemas.AchPayload) -> schemas.AchRecord:
    _require_fields(payload)
    try:
        row = await repo.create_record(**_write_args(payload))
    except db.DatabaseError as exc:
        logger.exception("ach_create_failed")
        raise _storage_failure(MSG_SUBMIT_FAILED) from exc
    record = _to_record(row)
    logger.info("ach_created id=%s", record.id)
    return record


async def update_record(
    repo: AchRepository,
    ach_id: int,
    payload: schemas.AchPayload,
) -> schemas.AchRecord:
    _require_fields(payload)
    try:
        row = await repo.update_record(ach_id, **_write_args(payload))
    except db.DatabaseError as exc:
        logger.exception("ach_update_failed id=%s", ach_id)
        raise _storage_failure(MSG_UPDATE_FAILED) from exc
    if row is None:
        raise _not_found()
    return _to_record(row)


async def delete_record(repo: AchRepository, ach_id: int) -> None:
    try:
        deleted = await repo.delete_record(ach_id)
    except db.DatabaseError as exc:
        logger.exception("ach_delete_failed id=%s", ach_id)
        raise _storage_failure(MSG_DELETE_FAILED) from exc
    if deleted == 0:
        raise _not_found()
    logger.info("ach_deleted id=%s", ach_id)
