"""
TieChef REST API main application.
Entry point for the FastAPI REST server.
"""

import redis
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from shared.config.settings import settings
from shared.infrastructure.db import SessionLocal
from shared.infrastructure.redis import get_redis_sync_client
from tiechef_api.core import (
    configure_cors,
    lifespan,
    register_exception_handlers,
    register_middlewares,
)
from tiechef_api.routers import (
    dining_table_router,
    dish_router,
    receipt_router,
    staff_router,
    table_view_router,
)

SERVICE_NAME = "tiechef-api"

app = FastAPI(
    title="TieChef REST API",
    description="Restaurant back-office API: staff, menu, receipts and floor plan",
    version="0.1.0",
    lifespan=lifespan,
)

configure_cors(app)
register_middlewares(app)
register_exception_handlers(app)


# =============================================================================
# Health Check
# =============================================================================


@app.get("/api/health")
def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "environment": settings.environment,
    }


@app.get("/api/health/detailed")
def detailed_health_check():
    """
    Detailed health check that verifies connectivity to dependencies.
    Returns status of the database and Redis, 503 if either is down.
    """
    checks = {
        "service": SERVICE_NAME,
        "environment": settings.environment,
        "dependencies": {},
    }
    all_healthy = True

    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        checks["dependencies"]["database"] = {"status": "healthy"}
    except SQLAlchemyError as e:
        checks["dependencies"]["database"] = {"status": "unhealthy", "error": str(e)}
        all_healthy = False

    try:
        get_redis_sync_client().ping()
        checks["dependencies"]["redis"] = {"status": "healthy"}
    except redis.RedisError as e:
        checks["dependencies"]["redis"] = {"status": "unhealthy", "error": str(e)}
        all_healthy = False

    checks["status"] = "healthy" if all_healthy else "degraded"

    if not all_healthy:
        return JSONResponse(content=checks, status_code=503)

    return checks


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(staff_router)
app.include_router(dish_router)
app.include_router(receipt_router)
app.include_router(dining_table_router)
app.include_router(table_view_router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tiechef_api.main:app",
        host="0.0.0.0",
        port=settings.rest_api_port,
        reload=True,
    )
