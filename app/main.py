# app/main.py
"""
FastAPI application entry point.
Builds storage and the session store into app.state, then wires middleware,
global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional
import time

from app.config import Settings, settings as default_settings
from app.routers import auth, dashboard, drivers, feedbacks, health, vehicles, verify
from app.services.integrity import IntegrityViolation
from app.services.seed_service import seed_storage
from app.services.session_store import SessionStore
from app.services.storage_service import build_storage
from app.utils.logger import get_logger

logger = get_logger(__name__)


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    cfg = cfg or default_settings

    app = FastAPI(
        title=cfg.APP_NAME,
        description="Verify park-registered vehicles, collect passenger feedback, and manage the fleet.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = cfg
    app.state.storage = build_storage(cfg)
    app.state.sessions = SessionStore(cfg.SESSION_TTL_SECONDS, cfg.SESSION_CHECK_PERIOD_SECONDS)
    if cfg.SEED_DATA:
        seed_storage(app.state.storage, cfg)

    # ── CORS (dashboard dev server sends the session cookie) ────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Request Timing Middleware ────────────────────────────────────────────
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = round((time.time() - start) * 1000, 2)
        logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
        return response

    # ── Error Handlers ───────────────────────────────────────────────────────
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Validation failed", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(IntegrityViolation)
    async def integrity_exception_handler(request: Request, exc: IntegrityViolation):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(auth.router,      prefix="/api", tags=["Auth"])
    app.include_router(verify.router,    prefix="/api", tags=["Verification"])
    app.include_router(feedbacks.router, prefix="/api", tags=["Feedback"])
    app.include_router(drivers.router,   prefix="/api", tags=["Drivers"])
    app.include_router(vehicles.router,  prefix="/api", tags=["Vehicles"])
    app.include_router(dashboard.router, prefix="/api", tags=["Dashboard"])
    app.include_router(health.router,    prefix="/api", tags=["Health"])

    @app.on_event("startup")
    async def startup():
        logger.info(f"{cfg.APP_NAME} starting up...")
        logger.info(f"Storage: {app.state.storage.backend.name}")
        logger.info(f"Listening on http://{cfg.BACKEND_IP}:{cfg.BACKEND_PORT}")
        logger.info("API docs at /docs")

    @app.on_event("shutdown")
    async def shutdown():
        logger.info(f"{cfg.APP_NAME} shutting down...")

    return app


app = create_app()
