from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..schemas.pydantic import ErrorResponse
from ..services.exceptions import (
    AnalysisError,
    ErrorKind,
    JobDescriptionValidationError,
    ResumeValidationError,
)

GENERIC_ERROR_MESSAGE = "An error occurred during analysis."


async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    """
    Render an AnalysisError as the JSON error envelope.

    Validation errors carry their own message as ``error``; every other kind
    gets the generic message with the failure text in ``details``.
    """
    if exc.kind is ErrorKind.VALIDATION:
        body = ErrorResponse(error=exc.message)
    else:
        body = ErrorResponse(error=GENERIC_ERROR_MESSAGE, details=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render malformed form input with the same 400 messages as missing input.

    A ``resume`` sent as a plain text field is not a file upload, so it is
    reported exactly like an absent file.
    """
    fields = {str(error["loc"][-1]) for error in exc.errors() if error.get("loc")}
    if "resume" in fields:
        error = ResumeValidationError()
    elif "jobDescription" in fields:
        error = JobDescriptionValidationError()
    else:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="Invalid request.", details=str(exc.errors())).model_dump(),
        )
    return await analysis_error_handler(request, error)
