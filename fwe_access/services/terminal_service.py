# =======================================================================================
# fwe_access/services/terminal_service.py - Terminal Identity Check
# =======================================================================================
from typing import Optional
from sqlalchemy.engine import Connection
from ..models.records import Terminal
from ..repositories.terminal_repo import TerminalRepository
from ..utils.exceptions import InvalidRequestError, TerminalNotFoundError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class TerminalService:
    """Resolves a terminal's pairing PIN before any ticket logic runs."""

    def __init__(self, repository: Optional[TerminalRepository] = None):
        self.repository = repository or TerminalRepository()

    @staticmethod
    def validate_pin(pin: Optional[str]) -> str:
        if pin is None or not pin.strip():
            raise InvalidRequestError("pin")
        return pin.strip()

    def resolve(self, conn: Connection, pin: str) -> Terminal:
        terminal = self.repository.find_by_pin(conn, self.validate_pin(pin))
        if terminal is None:
            logger.warning("Unknown terminal PIN presented")
            raise TerminalNotFoundError()
        return terminal
