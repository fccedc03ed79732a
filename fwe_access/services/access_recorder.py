# =======================================================================================
# fwe_access/services/access_recorder.py - Access Log Appends
# =======================================================================================
from contextlib import nullcontext
from typing import Optional
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from ..models.records import AccessRecord
from ..repositories.ticket_access_repo import TicketAccessRepository
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class AccessRecorder:
    """Writes one ticket_access row per recorded decision."""

    def __init__(self, repository: Optional[TicketAccessRepository] = None):
        self.repository = repository or TicketAccessRepository()

    @staticmethod
    def _savepoint(conn: Connection):
        # postgres aborts the whole transaction after a failed statement
        if conn.dialect.name == "postgresql":
            return conn.begin_nested()
        return nullcontext()

    def record(self, conn: Connection, record: AccessRecord) -> bool:
        """
        Append `record`. A failed write is logged and reported as False; it
        never undoes the decision the terminal is about to receive.
        """
        try:
            with self._savepoint(conn):
                self.repository.append(conn, record)
        except SQLAlchemyError as e:
            logger.error(
                "Access record not written; decision already sent to terminal",
                extra={
                    "ticket_id": record.ticket_id, "event_id": record.event_id,
                    "terminal_id": record.terminal_id,
                    "access_action_id": record.access_action_id,
                    "access_date": record.access_date, "error": str(e),
                },
            )
            return False
        return True
