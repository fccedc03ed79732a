# =======================================================================================
# fwe_access/api/dependencies.py - FastAPI Dependencies
# =======================================================================================
from fastapi import Depends
from ..config import config
from ..database import DatabaseManager, db_manager
from ..services.checkin_service import CheckInService
from ..utils.locks import TicketLockTable

# shared by every request of this process
ticket_locks = TicketLockTable(shards=config.CHECKIN_LOCK_SHARDS, timeout=config.CHECKIN_LOCK_TIMEOUT)

def get_database() -> DatabaseManager:
    """Dependency to get the database manager."""
    return db_manager

def get_checkin_service(db: DatabaseManager = Depends(get_database)) -> CheckInService:
    """Dependency to get the check-in service bound to the current database."""
    return CheckInService(db, ticket_locks)
