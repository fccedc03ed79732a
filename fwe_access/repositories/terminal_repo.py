# =======================================================================================
# fwe_access/repositories/terminal_repo.py - Terminal Lookups
# =======================================================================================
from typing import Optional
from sqlalchemy import text
from sqlalchemy.engine import Connection
from ..models.records import Terminal


class TerminalRepository:
    """Read-only access to paired terminals."""

    def find_by_pin(self, conn: Connection, pin: str) -> Optional[Terminal]:
        """Active terminal paired with `pin`, joined to its category group."""
        row = conn.execute(
            text("""
                SELECT terminal.id, terminal.pin, terminal.name,
                       terminal.category_group_id, category_group.name AS group_name
                FROM terminal
                INNER JOIN category_group ON category_group.id = terminal.category_group_id
                WHERE terminal.pin = :pin
                  AND terminal.active = 1
                  AND terminal.deleted_at IS NULL
                ORDER BY terminal.id
                LIMIT 1
            """),
            {"pin": pin}
        ).mappings().first()
        return Terminal.from_row(row) if row else None
