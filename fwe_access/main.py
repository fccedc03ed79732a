# =======================================================================================
# fwe_access/main.py - FastAPI Application Entry Point
# =======================================================================================
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .config import config
from .api.routes.acesso import router as acesso_router
from .api.dependencies import get_database
from .database import DatabaseManager, db_manager
from .models.schemas import HealthResponse
from .utils.exceptions import INVALID_REQUEST_MESSAGE
from .utils.logging_config import get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="FWE Access Control API",
        version="1.0.0",
        description="Ticket check-in decisions for venue terminals",
        debug=config.API_DEBUG,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Terminals read `message` on every failure, including malformed bodies
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Rejected malformed request",
            extra={"path": request.url.path, "fields": [".".join(map(str, e["loc"])) for e in exc.errors()]},
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"message": INVALID_REQUEST_MESSAGE},
        )

    # Routers
    app.include_router(acesso_router, prefix="/api", tags=["acesso"])

    @app.get("/api/health", response_model=HealthResponse, tags=["health"])
    def api_health(db: DatabaseManager = Depends(get_database)):
        try:
            db.fetch_one("SELECT 1")
            return HealthResponse(status="ok", dataAvailable=True, message=None)
        except Exception:
            logger.exception("Health check failed")
            return HealthResponse(
                status="error", dataAvailable=False, message="Database unavailable"
            )

    @app.on_event("startup")
    async def startup_event():
        if config.DB_AUTO_CREATE:
            db_manager.init_db()
        logger.info("FWE Access Control API started", extra={"db_dialect": db_manager.dialect_name})

    return app


app = create_app()
