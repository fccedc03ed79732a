# =======================================================================================
# fwe_access/models/__init__.py - Models Package
# =======================================================================================
from .schemas import *
from .enums import *

__all__ = [
    "TerminalLoginRequest", "TerminalLoginResponse", "TerminalGroup",
    "RegisterRequest", "RegisterResponse", "ActionType", "MessageResponse",
    "HealthResponse", "ActionCode", "ActionStyle", "AccessActionId", "Outcome",
    "ACCESS_ACTION_SEED"
]
