"""
FastAPI application entry point for the hospitality booking platform.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.logging import LogContext, get_logger, reset_tenant, set_tenant, setup_logging
from core.settings import settings
from db.session import close_db, init_db
from apps.api.errors import register_exception_handlers
from apps.api.routers import availability, invoices, privatisation, reservations
from apps.api.routers.businesses import hotels_router, restaurants_router, salons_router
from apps.api.routers.catalog import catalog_routers


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    setup_logging()
    logger.info(
        "Starting booking platform",
        extra={"app_name": settings.app_name, "environment": settings.app_env}
    )

    with LogContext(logger, database_url=settings.database_url.split("@")[-1]) as ctx:
        init_db()
        ctx.log("info", "Database initialized successfully")

    yield

    logger.info("Shutting down booking platform")
    close_db()


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant booking platform for hotels, restaurants and salons",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
    docs_url=None if settings.is_production else "/docs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def bind_tenant(request: Request, call_next):
    """Tag every log record of the request with the tenant header value."""
    token = set_tenant(request.headers.get(settings.tenant_header))
    try:
        return await call_next(request)
    finally:
        reset_tenant(token)


app.include_router(availability.router, prefix=settings.api_v1_prefix)
for business_router in (restaurants_router, hotels_router, salons_router):
    app.include_router(business_router, prefix=settings.api_v1_prefix)
app.include_router(reservations.router, prefix=settings.api_v1_prefix)
app.include_router(invoices.router, prefix=settings.api_v1_prefix)
app.include_router(privatisation.router, prefix=settings.api_v1_prefix)
for catalog_router in catalog_routers:
    app.include_router(catalog_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "running",
        "environment": settings.app_env
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "environment": settings.app_env
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )
