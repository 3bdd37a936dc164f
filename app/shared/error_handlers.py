# app/shared/error_handlers.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.shared.exceptions import (
    CheckViolation,
    ClinicDataError,
    ForeignKeyViolation,
    NotNullViolation,
    RecordNotFound,
    UniqueViolation,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (RecordNotFound, status.HTTP_404_NOT_FOUND),
    (UniqueViolation, status.HTTP_409_CONFLICT),
    (ForeignKeyViolation, status.HTTP_409_CONFLICT),
    (CheckViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (NotNullViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
)


def status_for(exc: ClinicDataError) -> int:
    for error_cls, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def clinic_data_error_handler(request: Request, exc: ClinicDataError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 409:
        logger.warning(f"{request.method} {request.url.path} -> {exc.code}: {exc.details.get('reason', exc.message)}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClinicDataError, clinic_data_error_handler)
