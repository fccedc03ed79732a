# =======================================================================================
# fwe_access/repositories/ticket_access_repo.py - Access Log Writes
# =======================================================================================
from sqlalchemy import text
from sqlalchemy.engine import Connection
from ..models.records import AccessRecord


class TicketAccessRepository:
    """Append-only writer for ticket_access. Rows are never updated or deleted."""

    def append(self, conn: Connection, record: AccessRecord) -> None:
        conn.execute(
            text("""
                INSERT INTO ticket_access (ticket_id, event_id, terminal_id, code, access_date, access_action_id)
                VALUES (:tid, :eid, :term, :code, :date, :action)
            """),
            {
                "tid": record.ticket_id, "eid": record.event_id, "term": record.terminal_id,
                "code": record.code, "date": record.access_date, "action": record.access_action_id
            }
        )
