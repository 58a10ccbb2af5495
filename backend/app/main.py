"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.api import api_router
from app.api.v1.endpoints import health
from app.components.drive.errors import ERROR_STATUS, ERROR_TITLES, DriveError, ErrorKind
from app.settings import settings
from app.utils import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Copy Tool API",
    description="Campaign authoring backend over Google Drive and OpenAI",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_envelope(status_code: int, error: str, details: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "details": details},
    )


@app.exception_handler(DriveError)
async def drive_error_handler(request: Request, exc: DriveError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.kind.value}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.kind.value}: {exc.message}")
    return error_envelope(exc.status_code, exc.title, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}" for err in exc.errors()
    )
    return error_envelope(
        ERROR_STATUS[ErrorKind.validation], ERROR_TITLES[ErrorKind.validation], details
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} failed")
    return error_envelope(500, "Internal server error", str(exc) or exc.__class__.__name__)


# Include routers
app.include_router(health.router, prefix="/health")
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Service information."""
    return {
        "status": "ok",
        "service": "Copy Tool API",
        "version": "0.1.0",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
