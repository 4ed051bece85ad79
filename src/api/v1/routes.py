"""
API v1 routes.

Defines REST endpoints for the user registration API.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_messages, get_registration_service
from src.api.errors import StatusClass, report_messages, translate
from src.api.messages import MessageCatalog
from src.api.models import (
    ErrorResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
    ValidationErrorResponse,
)
from src.domain.registration import RegistrationRejected, RegistrationService

router = APIRouter(tags=["v1"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ValidationErrorResponse, "description": "Email already registered"},
        422: {"model": ValidationErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Unexpected error"},
    },
    summary="Register a new user",
    description="Submit name, email and password to create an account. "
    "Every invalid field is reported in a single response.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
    messages: MessageCatalog = Depends(get_messages),
) -> RegisterResponse | JSONResponse:
    """
    Register a new user.

    - **name**: Display name
    - **email**: Email address, unique (case-insensitive)
    - **password**: Password meeting the strength rules
    - **password_confirmation**: Optional, must equal password

    Returns the created user's public fields on success.
    """
    if (
        request_data.password_confirmation is not None
        and request_data.password_confirmation != request_data.password
    ):
        # Field errors are still reported alongside the confirmation error.
        report = service.validate(request_data.name, request_data.email, request_data.password)
        errors = report_messages(report, messages)
        errors["password_confirmation"] = [messages.password_confirmation_mismatch]
        body = ValidationErrorResponse(message=messages.validation_error, errors=errors)
        return JSONResponse(
            status_code=StatusClass.CLIENT_VALIDATION_ERROR.value,
            content=body.model_dump(),
        )

    outcome = service.register(request_data.name, request_data.email, request_data.password)

    if isinstance(outcome, RegistrationRejected):
        status_class, body = translate(outcome, messages)
        return JSONResponse(status_code=status_class.value, content=body)

    return RegisterResponse(
        message=messages.registered_success,
        user=UserResponse(**outcome.user.public_view()),
    )
