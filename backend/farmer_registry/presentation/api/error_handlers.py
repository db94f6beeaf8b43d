"""Global exception handlers — render domain errors in the registry's wire shapes.

    - AdmissionError          → 400 error view (millisecond timestamps)
    - RequestValidationError  → 400 with field-level details
    - EntityNotFoundError     → 404 {success: false, message}
    - PersistenceFailureError → 502 {success: false, message: <store error>}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from farmer_registry.application.schemas.farmer_record import ErrorFarmerResponse
from farmer_registry.application.services.response_projector import to_error_view
from farmer_registry.domain.exceptions import (
    AdmissionError,
    EntityNotFoundError,
    PersistenceFailureError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_admission_error_handler(app)
    _register_validation_error_handler(app)
    _register_not_found_handler(app)
    _register_persistence_failure_handler(app)


def _register_admission_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AdmissionError)
    async def admission_error_handler(request: Request, exc: AdmissionError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=to_error_view(exc.farmer_id, exc.message),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "message": "Invalid request data",
                "errors": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        )


def _register_not_found_handler(app: FastAPI) -> None:

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorFarmerResponse(message="Farmer not found").model_dump(by_alias=True),
        )


def _register_persistence_failure_handler(app: FastAPI) -> None:

    @app.exception_handler(PersistenceFailureError)
    async def persistence_failure_handler(
        request: Request, exc: PersistenceFailureError,
    ):
        logger.error(
            "Record store failure on %s: %s", request.url.path, exc.message,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=ErrorFarmerResponse(message=exc.message).model_dump(by_alias=True),
        )
