"""
API Errors: uniform error envelope
"""

from fastapi.responses import JSONResponse

from api.v1.schemas import ErrorResponse


def error_response(status_code: int, message: str, error: str) -> JSONResponse:
    """Build a `{status, message, error}` JSON response"""
    body = ErrorResponse(status=status_code, message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump())
