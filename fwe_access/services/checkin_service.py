# =======================================================================================
# fwe_access/services/checkin_service.py - Terminal Check-in Flow
# =======================================================================================
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional
from sqlalchemy.exc import SQLAlchemyError
from ..database import DatabaseManager
from ..models.records import AccessRecord, CheckInRow, Terminal
from ..models.schemas import ActionType, RegisterResponse
from ..repositories.ticket_repo import TicketRepository
from ..utils.exceptions import InvalidRequestError
from ..utils.locks import TicketLockTable
from ..utils.logging_config import get_logger
from ..utils.validators import TicketCodeValidator
from .access_decision import AccessDecisionEngine, Decision
from .access_recorder import AccessRecorder
from .terminal_service import TerminalService

logger = get_logger(__name__)

SQL_DATETIME = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class CheckInResult:
    decision: Decision
    ticket_number: str
    checked_at: str
    terminal: Terminal
    row: Optional[CheckInRow] = None
    recorded: bool = False

    def to_response(self) -> RegisterResponse:
        display = self.decision.display
        row = self.row
        return RegisterResponse(
            action=display.action,
            outcome=self.decision.outcome.value,
            ticketNumber=self.ticket_number,
            ticketId=row.ticket_id if row else None,
            deviceId=row.terminal_id if row else None,
            eventId=row.event_id if row else None,
            eventName=row.event_name if row else None,
            valid=row.event_active if row else False,
            name=row.fullname if row else None,
            category=row.category_name if row else None,
            hora_acesso=self.checked_at,
            proccess=True,
            actionType=ActionType(info=display.info, style=display.style),
        )


class CheckInService:
    """
    Runs one ticket scan end to end: terminal identity, ticket lookup,
    admission rules and the access log append.

    The prior-admission count, the decision and the append for a ticket run
    under that ticket's lock and inside one transaction (with a row lock on
    databases that support it), so two simultaneous scans of a single-use
    ticket can never both be admitted.
    """

    def __init__(
        self,
        db: DatabaseManager,
        locks: TicketLockTable,
        terminals: Optional[TerminalService] = None,
        tickets: Optional[TicketRepository] = None,
        recorder: Optional[AccessRecorder] = None,
        engine: Optional[AccessDecisionEngine] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.db = db
        self.locks = locks
        self.terminals = terminals or TerminalService()
        self.tickets = tickets or TicketRepository()
        self.recorder = recorder or AccessRecorder()
        self.engine = engine or AccessDecisionEngine()
        self.clock = clock

    def identify(self, pin: str) -> Terminal:
        """Terminal pairing: resolve `pin` or raise TerminalNotFoundError."""
        pin = TerminalService.validate_pin(pin)
        with self.db.get_connection() as conn:
            return self.terminals.resolve(conn, pin)

    def register(self, pin: str, code: str) -> CheckInResult:
        pin = TerminalService.validate_pin(pin)
        if code is None or not code.strip():
            raise InvalidRequestError("ticket")

        # one instant for the event window, the response and the access row
        instant = self.clock().replace(microsecond=0)
        checked_at = instant.strftime(SQL_DATETIME)
        normalized = TicketCodeValidator.normalize(code)

        with self.db.get_connection() as conn:
            terminal = self.terminals.resolve(conn, pin)
            row = None
            if normalized is not None:
                row = self.tickets.find_for_checkin(conn, pin, normalized, instant)

        if row is None:
            decision = self.engine.evaluate(None)
            logger.info(
                "Ticket not found for terminal",
                extra={"terminal_id": terminal.id, "outcome": decision.outcome.value},
            )
            return CheckInResult(decision, code, checked_at, terminal)

        return self._decide_and_record(terminal, row, code, normalized, checked_at)

    def _decide_and_record(self, terminal: Terminal, row: CheckInRow, code: str,
                           normalized: str, checked_at: str) -> CheckInResult:
        decision = None
        recorded = False
        with self.locks.hold(row.ticket_id):
            try:
                with self.db.get_connection() as conn:
                    self.tickets.lock_ticket(conn, row.ticket_id)
                    prior_access = self.tickets.count_prior_access(conn, row.ticket_id)
                    decision = self.engine.evaluate(row, prior_access)
                    action = decision.record_action
                    if action is not None:
                        recorded = self.recorder.record(conn, AccessRecord(
                            ticket_id=row.ticket_id,
                            event_id=row.event_id,
                            terminal_id=terminal.id,
                            code=normalized,
                            access_date=checked_at,
                            access_action_id=int(action),
                        ))
            except SQLAlchemyError:
                if decision is None:
                    raise
                # the commit failed after the decision was made
                recorded = False
                logger.exception(
                    "Access record commit failed; decision already sent to terminal",
                    extra={"ticket_id": row.ticket_id, "terminal_id": terminal.id,
                           "outcome": decision.outcome.value},
                )

        logger.info(
            "Check-in decided",
            extra={
                "ticket_id": row.ticket_id, "event_id": row.event_id,
                "terminal_id": terminal.id, "outcome": decision.outcome.value,
                "recorded": recorded,
            },
        )
        return CheckInResult(decision, code, checked_at, terminal, row, recorded)
