"""
Property listing service application.
Wires routers, exception handlers and database lifecycle together.
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from listings.config import settings
from listings.database import test_database_connection, close_db_connection, create_tables
from listings.routers import buyer_router, seller_router, admin_router
from listings.utils.exceptions import APIException
from listings.services.error_handler import ErrorHandlerService

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Verifies the database on startup and disposes the engine on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    db_connected = await test_database_connection()
    if not db_connected:
        logger.error("Failed to connect to database on startup")
    elif settings.is_development:
        await create_tables()

    yield

    logger.info("Shutting down application")
    await close_db_connection()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Property listing backend with an approval workflow.

    ## Audiences

    * **Buyer**: browse and filter approved listings
    * **Seller**: draft listings, update them and submit them for approval
    * **Admin**: review pending listings, approve, reject, archive or delete them

    The audience groups are documentation labels; no authentication is enforced.

    ## Pagination

    List endpoints accept 1-indexed `page` and `size` parameters. Out-of-range
    values are clamped rather than rejected.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Buyer",
            "description": "Browse approved property listings"
        },
        {
            "name": "Seller",
            "description": "Create, update and submit property listings"
        },
        {
            "name": "Admin",
            "description": "Review and manage property listings"
        },
        {
            "name": "Health",
            "description": "Service health endpoints"
        }
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(buyer_router, prefix=settings.api_v1_prefix)
app.include_router(seller_router, prefix=settings.api_v1_prefix)
app.include_router(admin_router, prefix=settings.api_v1_prefix)


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle application exceptions with structured error responses."""
    return ErrorHandlerService.handle_api_exception(exc, request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors with detailed field information."""
    return ErrorHandlerService.handle_validation_error(exc.errors(), request)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    return ErrorHandlerService.handle_database_error(exc, request)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle framework HTTP exceptions such as unknown routes."""
    return ErrorHandlerService.handle_http_exception(exc, request)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Return a generic 500 payload for anything unclassified."""
    return ErrorHandlerService.handle_unexpected_error(exc, request)


@app.get("/", tags=["Health"])
async def root():
    """Basic service information."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.environment,
        "status": "healthy",
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json"
        },
        "api_prefix": settings.api_v1_prefix
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Report service health, including database reachability.
    Used by container health checks and load balancers.
    """
    db_healthy = await test_database_connection()

    if not db_healthy:
        logger.error("Health check failed: database unreachable")
        raise HTTPException(
            status_code=503,
            detail="Database connection failed"
        )

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "database": "connected"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "listings.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
