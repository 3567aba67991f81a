"""
CSV Transaction Parser
Implements ICSVParser port using the standard csv module

Expected columns (header row is discarded unconditionally):
    timestamp,name,type,amount,status,description
"""

import csv
import io
import logging
import uuid
from typing import BinaryIO, Callable, Optional

from application.ports.csv_parser import ICSVParser
from domain.entities.transaction import Transaction
from domain.exceptions import (
    CSVParseError,
    FieldValidationError,
    NoValidTransactionsError,
)
from domain.validation import field_validator


logger = logging.getLogger(__name__)


class CSVTransactionParser(ICSVParser):
    """
    All-or-nothing CSV parser

    A single invalid row aborts the whole parse. Comment rows (``#``),
    empty lines and repeated rows within the same payload are skipped.
    """

    def __init__(self, encoding: str = "utf-8-sig", id_factory: Optional[Callable[[], str]] = None):
        """
        Args:
            encoding: Payload text encoding (BOM tolerated by default)
            id_factory: Produces record identifiers, uuid4 by default
        """
        self.encoding = encoding
        self.id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def parse(self, stream: BinaryIO) -> list[Transaction]:
        reader = csv.reader(self._decode(stream.read()), skipinitialspace=True)

        transactions: list[Transaction] = []
        seen: set[tuple] = set()
        duplicates = 0
        header_skipped = False

        try:
            for record in reader:
                line = reader.line_num

                if not header_skipped:
                    header_skipped = True
                    continue

                if self._is_skippable(record):
                    continue

                transaction = self._parse_record(record, line)

                key = transaction.duplicate_key()
                if key in seen:
                    duplicates += 1
                    logger.debug(f"[csv_parse] line={line} duplicate skipped")
                    continue
                seen.add(key)

                transactions.append(transaction)
        except csv.Error as e:
            raise CSVParseError(reader.line_num + 1, f"error reading CSV: {e}") from e

        if not transactions:
            raise NoValidTransactionsError()

        logger.info(
            f"[csv_parse] parsed={len(transactions)} duplicates_skipped={duplicates}"
        )
        return transactions

    def _decode(self, content: bytes) -> io.StringIO:
        try:
            return io.StringIO(content.decode(self.encoding), newline="")
        except UnicodeDecodeError as e:
            line = content[:e.start].count(b"\n") + 1
            raise CSVParseError(line, f"error reading CSV: invalid {self.encoding} data") from e

    @staticmethod
    def _is_skippable(record: list[str]) -> bool:
        """Empty lines and comment rows"""
        if not record:
            return True
        return record[0].strip().startswith("#")

    def _parse_record(self, record: list[str], line: int) -> Transaction:
        try:
            field_validator.validate_field_count(record)
        except FieldValidationError as e:
            raise CSVParseError(line, str(e)) from e

        checks = (
            ("timestamp", field_validator.validate_timestamp, record[0]),
            ("name", field_validator.validate_name, record[1]),
            ("type", field_validator.validate_transaction_type, record[2]),
            ("amount", field_validator.validate_amount, record[3]),
            ("status", field_validator.validate_status, record[4]),
            ("description", field_validator.validate_description, record[5]),
        )

        values = {}
        for field_name, rule, raw in checks:
            try:
                values[field_name] = rule(raw)
            except FieldValidationError as e:
                raise CSVParseError(line, str(e), field=field_name) from e

        return Transaction(
            id=self.id_factory(),
            timestamp=values["timestamp"],
            name=values["name"],
            type=values["type"],
            # Minor units, truncated toward zero
            amount=int(values["amount"] * 100),
            status=values["status"],
            description=values["description"]
        )
