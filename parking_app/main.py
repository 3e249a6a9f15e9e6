# parking_app/main.py
"""
FastAPI application entry point.
Includes request timing middleware, global error handlers, and all routers.
Each application owns exactly one ParkingAllocationService (app.state.parking_service).
"""

from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from parking_app.routers import health, parking, parking_stats, slots, vehicles
from parking_app.services.parking_service import ParkingAllocationService
from parking_app.config import settings
from parking_app.utils.logger import get_logger
import time

logger = get_logger(__name__)


def create_app(service: Optional[ParkingAllocationService] = None) -> FastAPI:
    app = FastAPI(
        title="Parking Lot Management API",
        description="Vehicle registration, slot allocation, checkout billing and payment. In-memory.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.parking_service = service if service is not None else ParkingAllocationService()

    # ── CORS (allow a browser front-end to call the API) ─────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
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

    # ── Global Exception Handler ─────────────────────────────────────────────
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(vehicles.router,      prefix="/api/v1", tags=["🚗 Vehicles"])
    app.include_router(slots.router,         prefix="/api/v1", tags=["🅿️  Slots"])
    app.include_router(parking.router,       prefix="/api/v1", tags=["🔁 Park / Checkout"])
    app.include_router(parking_stats.router, prefix="/api/v1", tags=["📊 Stats"])
    app.include_router(health.router,        prefix="/api/v1", tags=["💚 Health"])

    # ── Startup ──────────────────────────────────────────────────────────────
    @app.on_event("startup")
    async def startup():
        logger.info("🚀 Parking backend starting up...")
        logger.info(f"🅿️  Slots ready: {len(app.state.parking_service.get_all_slots())}")
        logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
        logger.info("📖 API docs at /docs")

    @app.on_event("shutdown")
    async def shutdown():
        logger.info("🛑 Parking backend shutting down (in-memory state discarded)...")

    return app


app = create_app()
