"""
Exception handlers.

Body parse failures (wrong JSON types, unknown enum values, missing required
fields) are reported in the same shape as rule violations:

    400 {"detail": {"message": "Validation failed", "errors": {"type": ["..."]}}}
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.config.logging import get_logger

logger = get_logger(__name__)


def _field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = loc[-1] if loc else "request"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _field_errors(exc)
    logger.warning(
        "Request parsing failed",
        path=request.url.path,
        fields=sorted(errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": "Validation failed", "errors": errors}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
