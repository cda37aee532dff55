"""
Tableside - Main FastAPI Application.

REST API for table ordering: diners open a table session, share one
order per table, confirm and pay it; the kitchen advances its status.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from api import dependencies
from api.routes import catalog, health, kitchen, orders, payments, tables
from tableside import __version__
from tableside.infrastructure.database.config import close_database, get_engine, init_database
from tableside.infrastructure.logging import configure_logging
from tableside.infrastructure.seed import seed_catalog, seed_tables
from tableside.settings import get_app_settings


logger = logging.getLogger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Tableside - Restaurant Ordering API",
    description="""
    Table ordering backend.

    Features:
    - QR table sessions shared by every diner at the table
    - One shared Draft order per table, merged product lines
    - Order confirmation and kitchen status tracking
    - Payments (at most one successful payment per order)
    - Real-time notifications to table and kitchen
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# =============================================================================
# CORS MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# GLOBAL EXCEPTION HANDLER
# =============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "path": request.url.path,
        },
    )


# =============================================================================
# STARTUP/SHUTDOWN EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Prepare storage and seed the table roster and menu."""
    settings = get_app_settings()
    configure_logging(settings.restaurant.log_level)

    logger.info(f"🚀 {settings.restaurant.name} API starting up...")

    if dependencies.uses_database():
        await init_database(get_engine(settings.database))

    await seed_tables(dependencies.get_table_repository(), settings.restaurant.table_count)

    if settings.restaurant.seed_catalog:
        await seed_catalog(
            dependencies.get_category_repository(),
            dependencies.get_product_repository(),
        )

    logger.info("📚 Swagger UI available at: /docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    logger.info("👋 Tableside API shutting down...")
    await close_database()


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(tables.router, prefix="/api/v1/tables", tags=["Tables"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])
app.include_router(kitchen.router, prefix="/api/v1/kitchen", tags=["Kitchen"])
app.include_router(payments.router, prefix="/api/v1/payments", tags=["Payments"])
app.include_router(catalog.router, prefix="/api/v1/categories", tags=["Catalog"])


# =============================================================================
# ROOT ENDPOINT
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Tableside - Restaurant Ordering API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
