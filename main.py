from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from core.config import settings
from core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from core.exceptions import BaseCustomException, MissingFieldsError, ValidationError
from core.response import error_response
from database.connection import create_tables
from routers import category, product

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the application on startup."""
    logger.info(f"Starting up {settings.APP_NAME}...")
    if settings.CREATE_TABLES_ON_STARTUP:
        create_tables()
        logger.info("Database tables created successfully")
    yield
    logger.info(f"{settings.APP_NAME} shut down")


app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for the product catalog",
    version=settings.APP_VERSION,
    lifespan=lifespan
)


def _exception_json(exc: BaseCustomException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(
            message=exc.message,
            error_code=exc.error_code,
            details=exc.details
        )
    )

# Global exception handler for custom exceptions
@app.exception_handler(BaseCustomException)
async def custom_exception_handler(request: Request, exc: BaseCustomException):
    """Handle custom exceptions with standardized response format."""
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(f"{exc.__class__.__name__} [{request_id}] on {request.method} {request.url.path}: {exc.message}")
    return _exception_json(exc)

# Global exception handler for validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reshape request validation failures into a 400 ValidationError."""
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(f"Validation error [{request_id}] on {request.method} {request.url.path}: {exc.errors()}")

    missing = []
    error_details = []
    for error in exc.errors():
        loc = [str(x) for x in error['loc'] if x != 'body']
        field = '.'.join(loc) or 'body'
        # a null or absent body as a whole is malformed, not a missing field
        is_absent = bool(loc) and (
            error['type'] == 'missing'
            or (error['loc'][0] == 'body' and error.get('input', '') is None)
        )
        if is_absent:
            missing.append(field)
        error_details.append({
            "field": field,
            "message": error['msg'],
            "type": error['type']
        })

    if missing:
        custom = MissingFieldsError(missing, details={"errors": error_details})
    else:
        custom = ValidationError("Request validation failed", details={"errors": error_details})
    return _exception_json(custom)

# Global exception handler for framework HTTP exceptions (unknown routes, bad methods)
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with logging."""
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(f"HTTP exception [{request_id}] on {request.method} {request.url.path}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(
            message=str(exc.detail),
            error_code="HTTP_ERROR"
        ),
        headers=getattr(exc, "headers", None)
    )

# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(f"Unexpected error [{request_id}] on {request.method} {request.url.path}: {str(exc)}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content=error_response(
            message="An unexpected error occurred. Please try again.",
            error_code="INTERNAL_SERVER_ERROR",
            details={"request_id": request_id}
        )
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Process-Time"],
)

# first added is executed last
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(category.router, prefix="/api/categories", tags=["Categories"])
app.include_router(product.router, prefix="/api/products", tags=["Products"])

@app.get("/api/health")
def health_check():
    """Simple health check endpoint."""
    return {"status": "ok"}

@app.get("/")
def root():
    """Root endpoint for API health check."""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "status": "healthy",
        "version": settings.APP_VERSION
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
