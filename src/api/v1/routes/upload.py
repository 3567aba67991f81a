"""
API Routes: CSV Upload and Clear
"""

import io
import logging
import os
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from api.v1.errors import error_response
from api.v1.schemas import (
    ErrorResponse,
    MessageResponse,
    MessageSchema,
    UploadResponse,
    UploadSummarySchema,
)
from api.v1.dependencies import get_upload_use_case
from application.use_cases.upload_transactions import UploadTransactionsUseCase
from domain.exceptions import (
    CSVParseError,
    FileValidationError,
    NoValidTransactionsError,
    RepositoryError,
)


logger = logging.getLogger(__name__)

router = APIRouter()

CLEAR_SUCCESS_MESSAGE = "All transactions deleted"


def _upload_size(file: UploadFile) -> int:
    """Size recorded by the form parser, measured on the spooled file otherwise"""
    if file.size is not None:
        return file.size

    file.file.seek(0, os.SEEK_END)
    size = file.file.tell()
    file.file.seek(0)
    return size


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def upload_csv(
    file: Optional[UploadFile] = File(None, description="Transaction CSV file"),
    use_case: UploadTransactionsUseCase = Depends(get_upload_use_case)
):
    """
    Upload a transaction CSV

    Workflow:
    1. Validate filename, extension and size
    2. Parse every row (any invalid row rejects the whole file)
    3. Store parsed transactions in batches
    4. Report status counts across the store

    CSV format: header row, then
    timestamp, name, type, amount, status, description
    """

    if file is None:
        logger.warning("[upload] no file provided")
        return error_response(400, "No file provided", "file is required")

    filename = file.filename or ""

    try:
        # Reject by name and declared size before buffering the payload
        use_case.validate_upload(filename, _upload_size(file))
        content = await file.read()
    except FileValidationError as e:
        logger.warning(f"[upload] {e.message}: {e.reason} file={filename!r}")
        return error_response(400, e.message, e.reason)
    except OSError as e:
        logger.error(f"[upload] failed to read {filename}: {e}")
        return error_response(500, "Failed to open file", str(e))
    finally:
        await file.close()

    try:
        summary = await use_case.execute(
            filename=filename,
            size=len(content),
            stream=io.BytesIO(content)
        )
    except FileValidationError as e:
        logger.warning(f"[upload] {e.message}: {e.reason} file={filename!r}")
        return error_response(400, e.message, e.reason)
    except (CSVParseError, NoValidTransactionsError) as e:
        logger.warning(f"[upload] failed to process CSV: {e}")
        return error_response(400, "Failed to process CSV", str(e))
    except RepositoryError as e:
        logger.error(f"[upload] failed to store transactions: {e}")
        return error_response(500, "Failed to process CSV", str(e))

    return UploadResponse(data=UploadSummarySchema.from_entity(summary))


@router.delete(
    "/clear",
    response_model=MessageResponse,
    responses={500: {"model": ErrorResponse}}
)
async def clear_transactions(
    use_case: UploadTransactionsUseCase = Depends(get_upload_use_case)
):
    """Delete all stored transactions"""

    try:
        await use_case.clear()
    except RepositoryError as e:
        logger.error(f"[clear] failed to clear transactions: {e}")
        return error_response(500, "Failed to clear transactions", str(e))

    return MessageResponse(data=MessageSchema(message=CLEAR_SUCCESS_MESSAGE))
