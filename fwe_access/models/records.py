# =======================================================================================
# fwe_access/models/records.py - Rows Passed Between Repositories and Services
# =======================================================================================
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Terminal:
    id: int
    pin: str
    name: Optional[str]
    category_group_id: int
    group_name: Optional[str]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Terminal":
        return cls(
            id=row["id"],
            pin=row["pin"],
            name=row["name"],
            category_group_id=row["category_group_id"],
            group_name=row["group_name"],
        )


@dataclass(frozen=True)
class CheckInRow:
    """Ticket, event, category and terminal state for one scan."""
    ticket_id: int
    code: str
    fullname: Optional[str]
    event_id: int
    event_name: Optional[str]
    event_active: bool
    category_name: Optional[str]
    multiplo: int
    master: int
    active: int
    terminal_id: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CheckInRow":
        return cls(
            ticket_id=row["id"],
            code=row["code"],
            fullname=row["fullname"],
            event_id=row["event_id"],
            event_name=row["event_name"],
            event_active=bool(row["event_active"]),
            category_name=row["category_name"],
            multiplo=int(row["multiplo"] or 0),
            master=int(row["master"] or 0),
            active=int(row["active"] or 0),
            terminal_id=row["terminal_id"],
        )


@dataclass(frozen=True)
class AccessRecord:
    """One append-only ticket_access row."""
    ticket_id: int
    event_id: int
    terminal_id: int
    code: str
    access_date: str
    access_action_id: int
