"""Shared fixtures: an app wired to an in-memory database."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fakes import MemoryDatabase
from main import create_app

LAB_A = {"roomName": "Lab A", "roomVolume": 100, "airflowRate": 2000, "ach": 20}


@pytest.fixture
def database() -> MemoryDatabase:
    return MemoryDatabase()


@pytest.fixture
def client(database):
    with TestClient(create_app(database=database)) as test_client:
        yield test_client


@pytest.fixture
def lab_a() -> dict:
    return dict(LAB_A)
