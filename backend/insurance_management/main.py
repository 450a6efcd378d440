"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from insurance_management.api.schemas.user import ErrorResponse
from insurance_management.api.v1 import feedback, insurance, payment, purchase, user
from insurance_management.core.config import settings
from insurance_management.core.constants import Messages
from insurance_management.core.errors import (
    AuthenticationError,
    FieldValidationError,
    NotFoundError,
    StorageError,
)
from insurance_management.core.logging import get_logger, setup_logging
from insurance_management.validation.errors import collect_field_errors

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging("DEBUG" if settings.APP_ENV == "development" else "INFO")
    startup_logger = get_logger("startup")
    startup_logger.info("Application starting", env=settings.APP_ENV)
    yield
    startup_logger.info("Application shutting down")


app = FastAPI(
    title="Insurance Management API",
    description="Policies, purchases, payments, feedback and user accounts",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─── Error translation ────────────────────────
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Every violated field, with all its messages, as a 400."""
    errors = collect_field_errors(exc.errors())
    logger.info("Request validation failed", path=request.url.path, fields=sorted(errors))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


@app.exception_handler(FieldValidationError)
async def field_validation_handler(request: Request, exc: FieldValidationError) -> JSONResponse:
    logger.info("Field validation failed", path=request.url.path, fields=sorted(exc.errors))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errors)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(AuthenticationError)
async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    body = ErrorResponse(error_code=int(exc.error_code), error_message=exc.message)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=body.model_dump(mode="json", by_alias=True),
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(
        "Object storage failure",
        path=request.url.path,
        attempts=exc.attempts,
        error=exc.message,
        **exc.details,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": Messages.STORAGE_UNAVAILABLE},
    )


API_PREFIX = "/api/v1"
app.include_router(feedback.router, prefix=API_PREFIX)
app.include_router(insurance.router, prefix=API_PREFIX)
app.include_router(payment.router, prefix=API_PREFIX)
app.include_router(purchase.router, prefix=API_PREFIX)
app.include_router(user.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
