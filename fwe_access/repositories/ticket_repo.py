# =======================================================================================
# fwe_access/repositories/ticket_repo.py - Ticket Lookups for Check-in
# =======================================================================================
from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.engine import Connection
from ..models.enums import AccessActionId
from ..models.records import CheckInRow
from ..utils.validators import TicketCodeValidator

# Dialects that honour SELECT ... FOR UPDATE
ROW_LOCK_DIALECTS = ("mysql", "mariadb", "postgresql")


class TicketRepository:
    """Queries the check-in flow needs against ticket and ticket_access."""

    def find_for_checkin(self, conn: Connection, pin: str, code: str, now: datetime) -> Optional[CheckInRow]:
        """
        Find the ticket matching `code` among the categories of the terminal
        paired with `pin`.

        `code` must already be normalized (leading zeros removed); the stored
        code is trimmed the same way in SQL. `now` decides whether the event is
        open; it is bound as a DateTime so it compares in the same format the
        event window is stored in. When several tickets share a code, a ticket whose event is open
        wins, then the lowest id.
        """
        trimmed = TicketCodeValidator.trim_zeros_sql(conn.dialect.name, "ticket.code")
        row = conn.execute(
            text(f"""
                SELECT ticket.id, ticket.code, ticket.fullname, ticket.event_id,
                       ticket.active, ticket.master,
                       terminal.id AS terminal_id,
                       category.name AS category_name, category.multiplo,
                       event.name AS event_name,
                       CASE WHEN event.active = 1
                                 AND :now BETWEEN event.startdate AND event.enddate
                            THEN 1 ELSE 0
                       END AS event_active
                FROM ticket
                INNER JOIN event ON event.id = ticket.event_id
                INNER JOIN category ON category.id = ticket.category_id
                INNER JOIN category_group_items ON category_group_items.category_id = category.id
                INNER JOIN terminal ON terminal.category_group_id = category_group_items.category_group_id
                WHERE terminal.pin = :pin
                  AND terminal.active = 1
                  AND terminal.deleted_at IS NULL
                  AND ticket.deleted_at IS NULL
                  AND event.deleted_at IS NULL
                  AND {trimmed} = :code
                ORDER BY event_active DESC, ticket.id
                LIMIT 1
            """).bindparams(bindparam("now", type_=DateTime)),
            {"pin": pin, "code": code, "now": now}
        ).mappings().first()
        return CheckInRow.from_row(row) if row else None

    def count_prior_access(self, conn: Connection, ticket_id: int) -> int:
        """Number of admissions already recorded for the ticket."""
        return conn.execute(
            text("""
                SELECT COUNT(*) FROM ticket_access
                WHERE ticket_id = :tid AND access_action_id = :granted
            """),
            {"tid": ticket_id, "granted": int(AccessActionId.GRANTED)}
        ).scalar_one()

    def lock_ticket(self, conn: Connection, ticket_id: int) -> None:
        """Hold the ticket row lock until the surrounding transaction ends."""
        if conn.dialect.name not in ROW_LOCK_DIALECTS:
            return
        conn.execute(
            text("SELECT id FROM ticket WHERE id = :tid FOR UPDATE"),
            {"tid": ticket_id}
        )
