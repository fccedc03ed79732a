"""
Pytest configuration: SQLite databases built from the table metadata and a
small seeded venue (one open event, one finished event, two terminals).
"""

import os
from datetime import datetime, timedelta

# Must be set before fwe_access is imported: config is read at import time.
os.environ.setdefault("DB_URL", "sqlite://")
os.environ.setdefault("DB_AUTO_CREATE", "false")
os.environ.setdefault("CHECKIN_LOCK_TIMEOUT", "5")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert, text

from fwe_access.api.dependencies import get_database
from fwe_access.database import DatabaseManager
from fwe_access.main import app
from fwe_access.models import tables
from fwe_access.services.checkin_service import CheckInService
from fwe_access.utils.locks import TicketLockTable

NOW = datetime.now().replace(microsecond=0)

OPEN_EVENT_ID = 1
CLOSED_EVENT_ID = 2
MAIN_GROUP_ID = 1
OTHER_GROUP_ID = 2
REUSABLE_CATEGORY_ID = 1      # multiplo = 1
SINGLE_USE_CATEGORY_ID = 2    # multiplo = 0
OUT_OF_SCOPE_CATEGORY_ID = 3  # not in the main terminal's group
TERMINAL_ID = 5
TERMINAL_PIN = "1234"
OTHER_TERMINAL_PIN = "9999"


class Seeder:
    """Inserts venue fixtures and reads back the access log."""

    def __init__(self, db: DatabaseManager):
        self.db = db
        self._next_ticket_id = 100

    def venue(self) -> None:
        with self.db.get_connection() as conn:
            conn.execute(insert(tables.category_group), [
                {"id": MAIN_GROUP_ID, "name": "Portaria Principal"},
                {"id": OTHER_GROUP_ID, "name": "Backstage"},
            ])
            conn.execute(insert(tables.category), [
                {"id": REUSABLE_CATEGORY_ID, "name": "Pista", "multiplo": 1},
                {"id": SINGLE_USE_CATEGORY_ID, "name": "Camarote", "multiplo": 0},
                {"id": OUT_OF_SCOPE_CATEGORY_ID, "name": "Staff", "multiplo": 1},
            ])
            conn.execute(insert(tables.category_group_items), [
                {"category_group_id": MAIN_GROUP_ID, "category_id": REUSABLE_CATEGORY_ID},
                {"category_group_id": MAIN_GROUP_ID, "category_id": SINGLE_USE_CATEGORY_ID},
                {"category_group_id": OTHER_GROUP_ID, "category_id": OUT_OF_SCOPE_CATEGORY_ID},
            ])
            conn.execute(insert(tables.terminal), [
                {"id": TERMINAL_ID, "pin": TERMINAL_PIN, "name": "Catraca 1",
                 "model": "CATRACA", "category_group_id": MAIN_GROUP_ID, "active": 1},
                {"id": 6, "pin": OTHER_TERMINAL_PIN, "name": "Backstage App",
                 "model": "APP", "category_group_id": OTHER_GROUP_ID, "active": 1},
                {"id": 7, "pin": "5555", "name": "Catraca Desativada",
                 "model": "CATRACA", "category_group_id": MAIN_GROUP_ID, "active": 0},
            ])
            conn.execute(insert(tables.event), [
                {"id": OPEN_EVENT_ID, "name": "Festival de Verão", "active": 1,
                 "startdate": NOW - timedelta(days=1), "enddate": NOW + timedelta(days=1)},
                {"id": CLOSED_EVENT_ID, "name": "Show de Ontem", "active": 1,
                 "startdate": NOW - timedelta(days=10), "enddate": NOW - timedelta(days=9)},
            ])

    def event(self, event_id: int, startdate: datetime, enddate: datetime,
              name: str = "Evento Extra", active: int = 1) -> int:
        with self.db.get_connection() as conn:
            conn.execute(insert(tables.event), {
                "id": event_id, "name": name, "active": active,
                "startdate": startdate, "enddate": enddate,
            })
        return event_id

    def ticket(self, code: str, category_id: int = REUSABLE_CATEGORY_ID,
               event_id: int = OPEN_EVENT_ID, active: int = 1, master: int = 0,
               fullname: str = "Maria Silva", ticket_id: int = None) -> int:
        if ticket_id is None:
            ticket_id = self._next_ticket_id
            self._next_ticket_id += 1
        with self.db.get_connection() as conn:
            conn.execute(insert(tables.ticket), {
                "id": ticket_id, "event_id": event_id, "category_id": category_id,
                "code": code, "fullname": fullname, "active": active, "master": master,
            })
        return ticket_id

    def access_rows(self):
        with self.db.get_connection() as conn:
            return conn.execute(
                text("SELECT * FROM ticket_access ORDER BY id")
            ).mappings().all()


def _make_db(url: str) -> DatabaseManager:
    db = DatabaseManager(url)
    db.init_db()
    return db


@pytest.fixture
def db() -> DatabaseManager:
    return _make_db("sqlite://")


@pytest.fixture
def seeder(db) -> Seeder:
    s = Seeder(db)
    s.venue()
    return s


@pytest.fixture
def service(db, seeder) -> CheckInService:
    return CheckInService(db, TicketLockTable(shards=8, timeout=5), clock=lambda: NOW)


@pytest.fixture
def client(db, seeder):
    app.dependency_overrides[get_database] = lambda: db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def file_db(tmp_path) -> DatabaseManager:
    """File-backed database so several threads get their own connections."""
    return _make_db(f"sqlite:///{tmp_path / 'checkin.db'}")
