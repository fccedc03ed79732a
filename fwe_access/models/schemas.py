# =======================================================================================
# fwe_access/models/schemas.py - Pydantic Models
# =======================================================================================
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from .enums import ActionCode, ActionStyle

# ========== Terminal requests ==========
class TerminalLoginRequest(BaseModel):
    """Terminal pairing request."""
    model_config = ConfigDict(str_strip_whitespace=True)

    pin: str = Field(..., min_length=1, max_length=20, description="Terminal pairing PIN")

class RegisterRequest(BaseModel):
    """Ticket scan request sent by a terminal."""
    model_config = ConfigDict(str_strip_whitespace=True)

    pin: str = Field(..., min_length=1, max_length=20, description="Terminal pairing PIN")
    ticket: str = Field(..., min_length=1, max_length=64, description="Scanned ticket code")
    # terminals send 1, true or "true"; the value is never read
    viewImage: Optional[Any] = Field(None, description="Ask the terminal UI for the holder photo")

# ========== Terminal responses ==========
class TerminalGroup(BaseModel):
    id: int
    nome_grupo_categoria: Optional[str] = None

class TerminalLoginResponse(BaseModel):
    id: int
    pin: str
    nome: Optional[str] = None
    group: TerminalGroup

class ActionType(BaseModel):
    info: str
    style: ActionStyle

class RegisterResponse(BaseModel):
    """Check-in decision as shown on the terminal."""
    action: ActionCode
    outcome: str
    ticketNumber: Optional[str] = None
    ticketId: Optional[int] = None
    deviceId: Optional[int] = None
    eventId: Optional[int] = None
    eventName: Optional[str] = None
    valid: bool = False              # event is open, not "access granted"
    photo: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    hora_acesso: Optional[str] = None
    proccess: bool = True
    actionType: ActionType

class MessageResponse(BaseModel):
    message: str

# ========== Health ==========
class HealthResponse(BaseModel):
    status: str                 # "ok" | "error"
    dataAvailable: bool
    message: Optional[str] = None
