# =======================================================================================
# fwe_access/utils/__init__.py - Utils Package
# =======================================================================================
from .exceptions import *
from .validators import *
from .locks import *

__all__ = [
    "INVALID_REQUEST_MESSAGE", "AccessControlError", "TerminalNotFoundError", "CheckInTimeoutError", "InvalidRequestError",
    "TicketCodeValidator", "TicketLockTable"
]
