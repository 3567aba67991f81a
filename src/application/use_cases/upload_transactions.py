"""
Application Use Case: Upload Transactions
Orchestrates file checks, CSV parsing and persistence for one upload
"""

import logging
from typing import BinaryIO

from application.ports.csv_parser import ICSVParser
from application.ports.transaction_repository import ITransactionRepository
from domain.entities import UploadSummary
from domain.enums import TransactionStatus
from domain.validation import file_validator


logger = logging.getLogger(__name__)

UPLOAD_SUCCESS_MESSAGE = "CSV uploaded and processed successfully"


class UploadTransactionsUseCase:
    """Use case for ingesting a CSV upload and purging the store"""

    def __init__(
        self,
        csv_parser: ICSVParser,
        repository: ITransactionRepository,
        max_file_size: int = file_validator.DEFAULT_MAX_FILE_SIZE
    ):
        """Initialize use case with dependencies"""

        self.csv_parser = csv_parser
        self.repository = repository
        self.max_file_size = max_file_size

    def validate_upload(self, filename: str, size: int) -> None:
        """
        Check filename, extension and size before the payload is read

        Raises:
            FileValidationError: Upload rejected
        """
        file_validator.validate_filename(filename)
        file_validator.validate_file_extension(filename)
        file_validator.validate_file_size(size, self.max_file_size)

    async def execute(self, filename: str, size: int, stream: BinaryIO) -> UploadSummary:
        """
        Execute upload workflow

        1. Validate filename, extension and size
        2. Parse the CSV (all-or-nothing)
        3. Persist the parsed batch
        4. Count statuses from the store

        Raises:
            FileValidationError: Upload rejected before parsing
            CSVParseError, NoValidTransactionsError: Payload rejected
            RepositoryError: Storage failure
        """

        self.validate_upload(filename, size)

        transactions = self.csv_parser.parse(stream)

        await self.repository.create_batch(transactions)

        # Counts cover the whole store, not only this upload
        success_count = await self.repository.count_by_status(TransactionStatus.SUCCESS)
        failed_count = await self.repository.count_by_status(TransactionStatus.FAILED)
        pending_count = await self.repository.count_by_status(TransactionStatus.PENDING)

        logger.info(
            f"[upload] file={filename} records={len(transactions)} "
            f"success={success_count} failed={failed_count} pending={pending_count}"
        )

        return UploadSummary(
            message=UPLOAD_SUCCESS_MESSAGE,
            total_records=len(transactions),
            success_records=success_count,
            failed_records=failed_count,
            pending_records=pending_count
        )

    async def clear(self) -> None:
        """Delete every stored transaction"""
        await self.repository.delete_all()
        logger.info("[upload] all transactions deleted")
