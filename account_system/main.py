"""
Account System FastAPI Application.

This is the entry point for the application. Routers and the
error translation for business-rule exceptions are registered here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from account_system.config import get_settings
from account_system.exceptions import AccountException
from account_system.logging_config import setup_logging
from account_system.models.base import init_db
from account_system.schemas.transaction import ErrorResponse
from account_system.api.health import router as health_router
from account_system.api.accounts import router as accounts_router
from account_system.api.transactions import router as transactions_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Accounts and balance transactions for a banking back office",
    lifespan=lifespan,
)


@app.exception_handler(AccountException)
async def account_exception_handler(request: Request, exc: AccountException):
    """Business-rule rejections: 404 for missing entities, 400 otherwise."""
    body = ErrorResponse(
        account_number=exc.account_number,
        error_code=exc.error_code.value,
        error_message=exc.error_message,
    )
    status_code = 404 if exc.error_code.is_not_found else 400
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(ValueError)
async def invalid_request_handler(request: Request, exc: ValueError):
    body = ErrorResponse(error_code="INVALID_REQUEST", error_message=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Schema violations keep 422 but use the same error body."""
    account_number = None
    if isinstance(exc.body, dict):
        account_number = exc.body.get("account_number")
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    body = ErrorResponse(
        account_number=account_number if isinstance(account_number, str) else None,
        error_code="INVALID_REQUEST",
        error_message=message,
    )
    return JSONResponse(status_code=422, content=body.model_dump())


# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(transactions_router)
