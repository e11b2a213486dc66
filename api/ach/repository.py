"""
ACH persistence (raw SQL against `ach_data`).
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends

from core import db

_COLUMNS = "id, room_name, room_volume, airflow_rate, ach"


class AchRepository:
    def __init__(self, database: db.Database) -> None:
        self._db = database

    async def list_records(self) -> list[dict[str, Any]]:
        return await self._db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM ach_data
            """
        )

    async def get_record(self, ach_id: int) -> dict[str, Any] | None:
        return await self._db.fetch_one(
            f"""
            SELECT {_COLUMNS}
            FROM ach_data
            WHERE id = $1
            """,
            ach_id,
        )

    async def create_record(
        self,
        *,
        room_name: str,
        room_volume: float,
        airflow_rate: float,
        ach: float,
    ) -> dict[str, Any]:
        row = await self._db.fetch_one(
            f"""
            INSERT INTO ach_data (room_name, room_volume, airflow_rate, ach)
            VALUES ($1, $2, $3, $4)
            RETURNING {_COLUMNS}
            """,
            room_name,
            room_volume,
            airflow_rate,
            ach,
        )
        if row is None:
            raise db.DatabaseError("Failed to insert ACH record.")
        return row

    async def update_record(
        self,
        ach_id: int,
        *,
        room_name: str,
        room_volume: float,
        airflow_rate: float,
        ach: float,
    ) -> dict[str, Any] | None:
        """
        Overwrite all four fields. Returns None when no row has `ach_id`.
        """
        return await self._db.fetch_one(
            f"""
            UPDATE ach_data
            SET room_name = $1,
                room_volume = $2,
                airflow_rate = $3,
                ach = $4
            WHERE id = $5
            RETURNING {_COLUMNS}
            """,
            room_name,
            room_volume,
            airflow_rate,
            ach,
            ach_id,
        )

    async def delete_record(self, ach_id: int) -> int:
        return await self._db.execute(
            """
            DELETE FROM ach_data
            WHERE id = $1
            """,
            ach_id,
        )


def get_repository(database: db.Database = Depends(db.get_database)) -> AchRepository:
    return AchRepository(database)
