# =======================================================================================
# fwe_access/repositories/__init__.py - Repositories Package
# =======================================================================================
from .terminal_repo import TerminalRepository
from .ticket_repo import TicketRepository
from .ticket_access_repo import TicketAccessRepository

__all__ = ["TerminalRepository", "TicketRepository", "TicketAccessRepository"]
