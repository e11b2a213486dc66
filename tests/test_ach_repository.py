"""Repository tests: one parameterized statement per call."""

from __future__ import annotations

import asyncio

from ach.repository import AchRepository
from fakes import RecordingDatabase

ROW = {"id": 7, "room_name": "Lab A", "room_volume": 100.0, "airflow_rate": 2000.0, "ach": 20.0}


class TestStatements:
    def test_get_binds_id_positionally(self):
        database = RecordingDatabase(result=ROW)
        row = asyncio.run(AchRepository(database).get_record(7))

        assert row == ROW
        (method, sql, args), = database.calls
        assert method == "fetch_one"
        assert "WHERE id = $1" in sql
        assert args == (7,)

    def test_insert_returns_row(self):
        database = RecordingDatabase(result=ROW)
        repo = AchRepository(database)
        row = asyncio.run(
            repo.create_record(room_name="Lab A", room_volume=100.0, airflow_rate=2000.0, ach=20.0)
        )

        assert row == ROW
        _, sql, args = database.calls[0]
        assert sql.strip().startswith("INSERT INTO ach_data")
        assert "RETURNING" in sql
        assert args == ("Lab A", 100.0, 2000.0, 20.0)

    def test_update_binds_id_last(self):
        database = RecordingDatabase(result=None)
        repo = AchRepository(database)
        row = asyncio.run(
            repo.update_record(3, room_name="X", room_volume=1.0, airflow_rate=2.0, ach=3.0)
        )

        assert row is None
        _, sql, args = database.calls[0]
        assert "WHERE id = $5" in sql
        assert args == ("X", 1.0, 2.0, 3.0, 3)

    def test_delete_returns_count(self):
        database = RecordingDatabase(result=1)
        assert asyncio.run(AchRepository(database).delete_record(4)) == 1
        method, sql, args = database.calls[0]
        assert method == "execute"
        assert sql.strip().startswith("DELETE FROM ach_data")
        assert args == (4,)

    def test_list_has_no_parameters(self):
        database = RecordingDatabase(result=[ROW])
        assert asyncio.run(AchRepository(database).list_records()) == [ROW]
        assert database.calls[0][2] == ()
