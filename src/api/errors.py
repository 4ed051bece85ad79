"""
Error report translation - Maps domain failures to HTTP error documents.

translate() is framework-free: it returns a StatusClass and a JSON-ready
body. register_exception_handlers() wires the same mapping into FastAPI
for failures that escape a route as exceptions.

Mapping:
- RegistrationRejected with only a duplicate email -> CONFLICT (409)
- any other RegistrationRejected                   -> CLIENT_VALIDATION_ERROR (422)
- any exception (PersistenceError included)        -> INTERNAL_ERROR (500)
"""

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.messages import MessageCatalog, get_catalog
from src.api.models import ErrorResponse, ValidationErrorResponse
from src.config.settings import get_settings
from src.domain.aggregator import ValidationErrorReport
from src.domain.errors import ErrorCode, Field
from src.domain.exceptions import PersistenceError
from src.domain.registration import RegistrationRejected

logger = logging.getLogger(__name__)


class StatusClass(Enum):
    """Outcome classification with its HTTP status code."""

    CLIENT_VALIDATION_ERROR = 422
    CONFLICT = 409
    INTERNAL_ERROR = 500


def report_messages(report: ValidationErrorReport, catalog: MessageCatalog) -> dict[str, list[str]]:
    """Render every code in ``report`` to its message, keeping field order."""
    return {
        field.value: [catalog.for_code(field, code) for code in codes]
        for field, codes in report.items()
    }


def _is_duplicate_email_only(report: ValidationErrorReport) -> bool:
    return dict(report) == {Field.EMAIL: (ErrorCode.EMAIL_ALREADY_EXISTS,)}


def translate(
    outcome: RegistrationRejected | Exception, catalog: MessageCatalog
) -> tuple[StatusClass, dict]:
    """
    Convert a failed outcome into a status class and response body.

    Args:
        outcome: A rejected registration or an unexpected exception
        catalog: Messages for the configured locale

    Returns:
        (status class, body dict)

    Raises:
        ValueError: If a rejection carries an empty report
        TypeError: If ``outcome`` is not a failure
        UnmappedErrorCode: If a code has no message for its field
    """
    if isinstance(outcome, RegistrationRejected):
        if not outcome.report:
            raise ValueError("An empty error report is not a failure")

        body = ValidationErrorResponse(
            message=catalog.validation_error,
            errors=report_messages(outcome.report, catalog),
        ).model_dump()
        if _is_duplicate_email_only(outcome.report):
            return StatusClass.CONFLICT, body
        return StatusClass.CLIENT_VALIDATION_ERROR, body

    if isinstance(outcome, Exception):
        # Detail stays in the log; the body is opaque.
        logger.error(
            "Unexpected failure: %s", outcome.__class__.__name__, exc_info=outcome
        )
        return StatusClass.INTERNAL_ERROR, ErrorResponse(message=catalog.unexpected_error).model_dump()

    raise TypeError(f"Cannot translate non-failure outcome: {type(outcome).__name__}")


def _request_validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part != "body"]
        key = str(loc[-1]) if loc else "body"
        errors.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers producing the uniform {message, errors} documents."""

    def current_catalog() -> MessageCatalog:
        return get_catalog(get_settings().locale)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        catalog = current_catalog()
        body = ValidationErrorResponse(
            message=catalog.validation_error,
            errors=_request_validation_errors(exc),
        )
        return JSONResponse(
            status_code=StatusClass.CLIENT_VALIDATION_ERROR.value,
            content=body.model_dump(),
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        status_class, body = translate(exc, current_catalog())
        return JSONResponse(status_code=status_class.value, content=body)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        status_class, body = translate(exc, current_catalog())
        return JSONResponse(status_code=status_class.value, content=body)
