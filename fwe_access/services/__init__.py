# =======================================================================================
# fwe_access/services/__init__.py - Services Package
# =======================================================================================
from .access_decision import AccessDecisionEngine, Decision
from .access_recorder import AccessRecorder
from .terminal_service import TerminalService
from .checkin_service import CheckInService, CheckInResult

__all__ = [
    "AccessDecisionEngine", "Decision", "AccessRecorder", "TerminalService",
    "CheckInService", "CheckInResult"
]
