# =======================================================================================
# fwe_access/models/enums.py - Enums and Constants
# =======================================================================================
from enum import Enum, IntEnum
from typing import Literal

# Type aliases for better type hints
ActionCode = Literal["CI", "PS", "CB", "CE"]
ActionStyle = Literal["success", "danger"]

class AccessActionId(IntEnum):
    """Rows of the access_action table; stored in ticket_access.access_action_id."""
    GRANTED = 1
    BLOCKED = 2
    EVENT_EXPIRED = 3
    ALREADY_USED = 4

ACCESS_ACTION_SEED = [
    {"id": AccessActionId.GRANTED, "name": "Liberado", "description": "Acesso liberado"},
    {"id": AccessActionId.BLOCKED, "name": "Bloqueado", "description": "Ticket bloqueado"},
    {"id": AccessActionId.EVENT_EXPIRED, "name": "Evento Expirado", "description": "Evento fora do período"},
    {"id": AccessActionId.ALREADY_USED, "name": "Já Utilizado", "description": "Ticket de uso único já utilizado"},
]

class Outcome(Enum):
    """Every way a check-in attempt can end."""
    TERMINAL_NOT_FOUND = "TERMINAL_NOT_FOUND"
    INVALID_TICKET = "INVALID_TICKET"
    MASTER_OVERRIDE = "MASTER_OVERRIDE"
    BLOCKED = "BLOCKED"
    EVENT_EXPIRED = "EVENT_EXPIRED"
    ALREADY_USED = "ALREADY_USED"
    GRANTED = "GRANTED"
