# =======================================================================================
# fwe_access/services/access_decision.py - Core Business Logic
# =======================================================================================
"""
Ordered admission rules for a scanned ticket.

The engine is pure: it sees the resolved check-in row and the number of
admissions already recorded for the ticket, and returns exactly one outcome.
Rules are tried in order and the first one that applies wins, so rule order is
part of the behaviour (a master ticket with an expired event is still let in,
a disabled ticket at an expired event is reported as blocked).
"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence
from ..models.enums import AccessActionId, ActionCode, ActionStyle, Outcome
from ..models.records import CheckInRow


@dataclass(frozen=True)
class Display:
    """What the terminal shows for an outcome."""
    action: ActionCode
    info: str
    style: ActionStyle


DISPLAY: Dict[Outcome, Display] = {
    Outcome.INVALID_TICKET: Display("CI", "Ticket Inválido", "danger"),
    Outcome.MASTER_OVERRIDE: Display("PS", "Ticket Liberado", "success"),
    Outcome.BLOCKED: Display("CB", "Ticket Bloqueado", "danger"),
    Outcome.EVENT_EXPIRED: Display("CE", "Evento Expirado", "danger"),
    Outcome.ALREADY_USED: Display("CB", "Ticket Bloqueado", "danger"),
    Outcome.GRANTED: Display("PS", "Ticket Liberado", "success"),
}

# Outcomes missing here are never written to ticket_access
RECORDED_ACTION: Dict[Outcome, AccessActionId] = {
    Outcome.MASTER_OVERRIDE: AccessActionId.GRANTED,
    Outcome.BLOCKED: AccessActionId.BLOCKED,
    Outcome.EVENT_EXPIRED: AccessActionId.EVENT_EXPIRED,
    Outcome.ALREADY_USED: AccessActionId.ALREADY_USED,
    Outcome.GRANTED: AccessActionId.GRANTED,
}


@dataclass(frozen=True)
class Rule:
    outcome: Outcome
    applies: Callable[[CheckInRow, int], bool]


def _is_master(row: CheckInRow, prior_access: int) -> bool:
    return row.master == 1

def _is_disabled(row: CheckInRow, prior_access: int) -> bool:
    return row.active == 0

def _event_closed(row: CheckInRow, prior_access: int) -> bool:
    return not row.event_active

def _single_use_spent(row: CheckInRow, prior_access: int) -> bool:
    return row.multiplo == 0 and prior_access != 0 and row.master != 1

def _always(row: CheckInRow, prior_access: int) -> bool:
    return True


ADMISSION_RULES: Sequence[Rule] = (
    Rule(Outcome.MASTER_OVERRIDE, _is_master),
    Rule(Outcome.BLOCKED, _is_disabled),
    Rule(Outcome.EVENT_EXPIRED, _event_closed),
    Rule(Outcome.ALREADY_USED, _single_use_spent),
    Rule(Outcome.GRANTED, _always),
)


@dataclass(frozen=True)
class Decision:
    outcome: Outcome

    @property
    def display(self) -> Display:
        return DISPLAY[self.outcome]

    @property
    def record_action(self) -> Optional[AccessActionId]:
        """access_action_id to append, or None when nothing is written."""
        return RECORDED_ACTION.get(self.outcome)

    @property
    def admitted(self) -> bool:
        return self.outcome in (Outcome.MASTER_OVERRIDE, Outcome.GRANTED)


class AccessDecisionEngine:
    """Evaluates the admission rules for one scan."""

    def __init__(self, rules: Sequence[Rule] = ADMISSION_RULES):
        self.rules = tuple(rules)

    def evaluate(self, row: Optional[CheckInRow], prior_access: int = 0) -> Decision:
        """
        Classify a scan.

        `row` is None when no ticket in the terminal's scope matches the
        scanned code. `prior_access` is the number of admissions already
        recorded for the ticket.
        """
        if row is None:
            return Decision(Outcome.INVALID_TICKET)
        for rule in self.rules:
            if rule.applies(row, prior_access):
                return Decision(rule.outcome)
        # only reachable with a rule list lacking a catch-all
        raise RuntimeError(f"No admission rule applied to ticket {row.ticket_id}")
