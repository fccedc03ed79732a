# =======================================================================================
# fwe_access/api/routes/acesso.py - Terminal Endpoints
# =======================================================================================
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from ...models.schemas import (
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    TerminalGroup,
    TerminalLoginRequest,
    TerminalLoginResponse,
)
from ...services.checkin_service import CheckInService
from ...utils.exceptions import CheckInTimeoutError, InvalidRequestError, TerminalNotFoundError
from ...utils.logging_config import get_logger
from ..dependencies import get_checkin_service

router = APIRouter()
logger = get_logger(__name__)

FAILURE_RESPONSES = {
    422: {"model": MessageResponse},
    401: {"model": MessageResponse},
    500: {"model": MessageResponse},
}

def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post("/acesso", response_model=TerminalLoginResponse, responses=FAILURE_RESPONSES)
def terminal_login(request: TerminalLoginRequest, service: CheckInService = Depends(get_checkin_service)):
    """Pair a terminal: resolve its PIN and return its category group."""
    try:
        terminal = service.identify(request.pin)
    except InvalidRequestError as e:
        return _message(status.HTTP_422_UNPROCESSABLE_ENTITY, e.message)
    except TerminalNotFoundError as e:
        return _message(status.HTTP_401_UNAUTHORIZED, e.message)
    except SQLAlchemyError:
        logger.exception("Terminal login failed")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Erro ao logar no terminal.")

    return TerminalLoginResponse(
        id=terminal.id,
        pin=terminal.pin,
        nome=terminal.name,
        group=TerminalGroup(id=terminal.category_group_id, nome_grupo_categoria=terminal.group_name),
    )


@router.post(
    "/acesso/register",
    response_model=RegisterResponse,
    responses={**FAILURE_RESPONSES, 503: {"model": MessageResponse}},
)
def register_access(request: RegisterRequest, service: CheckInService = Depends(get_checkin_service)):
    """
    Process a ticket scan from a terminal.

    Every admission outcome (including an unknown ticket) is a 200 whose body
    carries `action` / `actionType`; non-200 means the scan could not be
    evaluated at all.
    """
    try:
        result = service.register(request.pin, request.ticket)
    except InvalidRequestError as e:
        return _message(status.HTTP_422_UNPROCESSABLE_ENTITY, e.message)
    except TerminalNotFoundError as e:
        return _message(status.HTTP_401_UNAUTHORIZED, e.message)
    except CheckInTimeoutError:
        logger.exception("Check-in timed out waiting for ticket lock")
        return _message(status.HTTP_503_SERVICE_UNAVAILABLE, "Erro ao registrar acesso.")
    except SQLAlchemyError:
        logger.exception("Check-in failed")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Erro ao registrar acesso.")

    return result.to_response()
