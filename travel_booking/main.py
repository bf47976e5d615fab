from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from contextlib import asynccontextmanager
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError
import logging
import uuid

from . import __version__
from .config import settings
from .database import create_tables
from .exceptions import (
    ConstraintViolationError,
    IdMismatchError,
    NotFoundError,
    ReferenceNotFoundError,
    UniquenessConflictError,
    Violation,
)
from .utils.logging_config import setup_logging, set_request_context, clear_request_context
from .utils.rate_limiter import limiter

# Import all routers
from .routers import customers, flights, bookings, travel_agent_bookings, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    setup_logging(level=settings.log_level, json_format=settings.log_json)

    logger.info(f"Starting travel-booking-service (environment: {settings.environment})")
    logger.info(f"CORS Origins: {settings.cors_origins}")

    create_tables()

    logger.info("API Documentation: http://localhost:8000/docs")

    yield

    logger.info("Shutting down travel-booking-service")


# Create FastAPI app
app = FastAPI(
    title="Travel Booking Service",
    description="Customers, flights, bookings and travel agent bookings",
    version=__version__,
    lifespan=lifespan
)

# Rate limiter state
app.state.limiter = limiter


# ================================
# CORS MIDDLEWARE - MUST BE FIRST!
# ================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


# Security Headers Middleware
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


# Request ID Middleware
class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])
        request.state.request_id = request_id
        set_request_context(request_id)
        try:
            response = await call_next(request)
        finally:
            clear_request_context()
        response.headers["X-Request-ID"] = request_id
        return response


# Add other middleware AFTER CORS
app.add_middleware(RequestIdMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

# Applies RATE_LIMIT_DEFAULT to every route without its own limit
app.add_middleware(SlowAPIMiddleware)


# ================================
# EXCEPTION HANDLERS
# ================================

def error_body(exc) -> dict:
    content = {"detail": exc.message}
    if exc.reasons:
        content["reasons"] = exc.reasons
    return content


def request_field(loc) -> str:
    """("body", "first_name") -> "first_name"; the location prefix is dropped"""
    parts = loc[1:] if len(loc) > 1 else loc
    return ".".join(str(part) for part in parts)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests, please try again later"}
    )


@app.exception_handler(ConstraintViolationError)
@app.exception_handler(ReferenceNotFoundError)
async def bad_request_handler(request: Request, exc):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.reasons}")
    return JSONResponse(status_code=400, content=error_body(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or mistyped fields are reported like any other rule violation"""
    violations = [
        Violation(field=request_field(error["loc"]), message=error["msg"])
        for error in exc.errors()
    ]
    return await bad_request_handler(request, ConstraintViolationError(violations))


@app.exception_handler(UniquenessConflictError)
@app.exception_handler(IdMismatchError)
async def conflict_handler(request: Request, exc):
    logger.info(f"{request.method} {request.url.path} conflict: {exc.reasons}")
    return JSONResponse(status_code=409, content=error_body(exc))


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred"}
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred"}
    )


# Include routers
app.include_router(customers.router)
app.include_router(flights.router)
app.include_router(bookings.router)
app.include_router(travel_agent_bookings.router)
app.include_router(health.router)


@app.get("")
@app.get("/")
async def root():
    return {
        "message": "Travel Booking Service API",
        "version": __version__,
        "docs": "/docs",
        "status": "running",
    }
