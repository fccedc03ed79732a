# =======================================================================================
# fwe_access/database.py - Database Management
# =======================================================================================
from sqlalchemy import create_engine, insert, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from typing import Optional
from .config import config
from .models.enums import ACCESS_ACTION_SEED
from .models.tables import access_action, metadata

class DatabaseManager:
    """Manages database connections and transactions."""

    def __init__(self, url: Optional[str] = None):
        self.url = url or config.DB_URL
        self.engine: Engine = create_engine(self.url, future=True, **self._engine_options(self.url))

    @staticmethod
    def _engine_options(url: str) -> dict:
        if url.startswith("sqlite"):
            options = {"connect_args": {"check_same_thread": False, "timeout": 30}}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # one shared connection, otherwise every checkout sees an empty db
                options["poolclass"] = StaticPool
            return options
        return {
            "pool_size": config.DB_POOL_SIZE,
            "max_overflow": config.DB_MAX_OVERFLOW,
            "pool_timeout": config.DB_POOL_TIMEOUT,
            "pool_pre_ping": True,
            "isolation_level": "READ COMMITTED",
        }

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @contextmanager
    def get_connection(self):
        """Get a database connection inside a transaction with automatic cleanup."""
        with self.engine.begin() as conn:
            yield conn

    def fetch_one(self, query: str, params: dict = None):
        """Fetch a single result."""
        with self.get_connection() as conn:
            result = conn.execute(text(query), params or {})
            return result.mappings().first()

    def init_db(self) -> None:
        """Create missing tables and seed the access_action lookup rows."""
        metadata.create_all(self.engine)
        with self.get_connection() as conn:
            existing = set(conn.execute(select(access_action.c.id)).scalars())
            missing = [row for row in ACCESS_ACTION_SEED if int(row["id"]) not in existing]
            if missing:
                conn.execute(insert(access_action), [{**row, "id": int(row["id"])} for row in missing])

# Global database instance
db_manager = DatabaseManager()
