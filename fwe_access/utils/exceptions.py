# =======================================================================================
# fwe_access/utils/exceptions.py - Custom Exceptions
# =======================================================================================
INVALID_REQUEST_MESSAGE = "Dados inválidos"


class AccessControlError(Exception):
    """Base exception for the access control service."""
    pass

class TerminalNotFoundError(AccessControlError):
    """Raised when no active terminal is paired with the given PIN."""

    def __init__(self, message: str = "Equipamento não encontrado."):
        super().__init__(message)
        self.message = message

class CheckInTimeoutError(AccessControlError):
    """Raised when a scan cannot take its ticket's serialization lock in time."""

    def __init__(self, ticket_id: int, timeout: float):
        super().__init__(f"Timed out after {timeout}s waiting for ticket {ticket_id}")
        self.ticket_id = ticket_id
        self.timeout = timeout

class InvalidRequestError(AccessControlError):
    """Raised when a required check-in field is missing or empty."""

    def __init__(self, field: str, message: str = INVALID_REQUEST_MESSAGE):
        super().__init__(f"Missing required field: {field}")
        self.field = field
        self.message = message
