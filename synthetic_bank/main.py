"""
Synthetic Bank API: FastAPI Application.

This is the entry point for the application.
All routers and error handlers are registered here.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from synthetic_bank.config import get_settings
from synthetic_bank.dependencies import get_content_provider, get_store
from synthetic_bank.exceptions import GenerationError, SyntheticBankError
from synthetic_bank.logging_config import configure_logging
from synthetic_bank.schemas.common import ErrorResponse
from synthetic_bank.api.accounts import router as accounts_router
from synthetic_bank.api.generation import router as generation_router
from synthetic_bank.api.health import router as health_router
from synthetic_bank.api.transactions import router as transactions_router
from synthetic_bank.services.generation_service import GenerationService

settings = get_settings()
logger = logging.getLogger(__name__)


def error_response(
    status_code: int, error: str, details: str | None = None
) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the ledger with sample accounts when the process starts."""
    configure_logging()
    if settings.SEED_ON_STARTUP and get_store().count_accounts() == 0:
        service = GenerationService(get_store(), get_content_provider())
        await service.seed_sample_data(settings.SEED_ACCOUNTS)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Synthetic Indian bank accounts and transactions for testing",
    lifespan=lifespan,
)


# --- Error Handlers ---
# Every failure uses the same envelope: success=false plus a
# human-readable error message.

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response(404, "Route not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    return error_response(400, "; ".join(messages))


@app.exception_handler(GenerationError)
async def generation_error_handler(request: Request, exc: GenerationError):
    return error_response(500, str(exc), details=exc.details)


@app.exception_handler(SyntheticBankError)
async def domain_error_handler(request: Request, exc: SyntheticBankError):
    return error_response(exc.status_code, str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Something went wrong!")


# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(transactions_router)
app.include_router(generation_router)


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    uvicorn.run(
        "synthetic_bank.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
