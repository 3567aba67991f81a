"""
Unit tests for transaction field and query parameter rules.
"""
from decimal import Decimal

import pytest

from domain.enums import TransactionStatus, TransactionType
from domain.exceptions import FieldValidationError
from domain.validation import field_validator


class TestTransactionFields:
    """Rules applied to each CSV column."""

    def test_timestamp_parses_integer(self):
        assert field_validator.validate_timestamp(" 1624507883 ") == 1624507883

    @pytest.mark.parametrize("raw,reason", [
        ("", "timestamp is required"),
        ("   ", "timestamp is required"),
        ("16245.07", "invalid timestamp format: must be a Unix epoch integer"),
        ("yesterday", "invalid timestamp format: must be a Unix epoch integer"),
        ("99999999999999999999999", "invalid timestamp: out of range"),
        ("9223372036854775808", "invalid timestamp: out of range"),
        ("-9223372036854775809", "invalid timestamp: out of range"),
    ])
    def test_timestamp_rejected(self, raw, reason):
        with pytest.raises(FieldValidationError, match=reason):
            field_validator.validate_timestamp(raw)

    def test_name_is_trimmed(self):
        assert field_validator.validate_name("  JOHN DOE ") == "JOHN DOE"

    def test_name_required(self):
        with pytest.raises(FieldValidationError, match="name is required"):
            field_validator.validate_name("  ")

    def test_name_length_counts_characters(self):
        assert field_validator.validate_name("é" * 255) == "é" * 255

        with pytest.raises(FieldValidationError, match=r"max 255 characters"):
            field_validator.validate_name("a" * 256)

    def test_type_is_case_insensitive(self):
        assert field_validator.validate_transaction_type("credit") == TransactionType.CREDIT
        assert field_validator.validate_transaction_type(" Debit ") == TransactionType.DEBIT

    def test_type_rejects_unknown_value(self):
        with pytest.raises(FieldValidationError) as exc_info:
            field_validator.validate_transaction_type("transfer")

        assert str(exc_info.value) == "invalid transaction type: TRANSFER (expected CREDIT or DEBIT)"

    def test_amount_accepts_decimal(self):
        assert field_validator.validate_amount("12.34") == Decimal("12.34")
        assert field_validator.validate_amount("0") == Decimal("0")

    @pytest.mark.parametrize("raw,reason", [
        ("", "amount is required"),
        ("abc", "invalid amount format: must be a valid number"),
        ("NaN", "invalid amount format: must be a valid number"),
        ("Infinity", "invalid amount format: must be a valid number"),
        ("-1", "amount cannot be negative"),
        ("1e30", "amount is too large"),
        ("9e999999", "amount is too large"),
        ("1e900000", "amount is too large"),
        ("92233720368547758.08", "amount is too large"),
    ])
    def test_amount_rejected(self, raw, reason):
        with pytest.raises(FieldValidationError, match=reason):
            field_validator.validate_amount(raw)

    def test_timestamp_int64_bounds(self):
        assert field_validator.validate_timestamp("9223372036854775807") == 2 ** 63 - 1
        assert field_validator.validate_timestamp("-9223372036854775808") == -(2 ** 63)
        assert field_validator.validate_timestamp("000000000000000000000001") == 1

    def test_amount_upper_bound(self):
        assert field_validator.validate_amount("92233720368547758.07") == Decimal("92233720368547758.07")
        assert field_validator.validate_amount("0e999999") == 0

    def test_status_is_case_insensitive(self):
        assert field_validator.validate_status("pending") == TransactionStatus.PENDING

    def test_status_rejects_unknown_value(self):
        with pytest.raises(FieldValidationError, match=r"invalid status: DONE"):
            field_validator.validate_status("done")

    def test_description_optional(self):
        assert field_validator.validate_description("") == ""
        assert field_validator.validate_description(None) == ""

    def test_description_too_long(self):
        with pytest.raises(FieldValidationError, match=r"max 500 characters"):
            field_validator.validate_description("x" * 501)

    def test_field_count(self):
        field_validator.validate_field_count(["a"] * 6)
        field_validator.validate_field_count(["a"] * 7)

        with pytest.raises(FieldValidationError) as exc_info:
            field_validator.validate_field_count(["a"] * 5)

        assert str(exc_info.value) == "invalid CSV format: expected 6 fields, got 5"


class TestQueryParameters:
    """Rules applied to listing query parameters."""

    def test_search_passes_plain_text(self):
        assert field_validator.validate_search_query("coffee shop") == "coffee shop"

    @pytest.mark.parametrize("term", [
        "x'; drop table transactions",
        "name -- comment",
        "/* hidden",
        "'; UPDATE transactions",
    ])
    def test_search_rejects_suspicious_patterns(self, term):
        with pytest.raises(FieldValidationError, match="suspicious pattern"):
            field_validator.validate_search_query(term)

    def test_search_too_long(self):
        with pytest.raises(FieldValidationError, match="search query is too long"):
            field_validator.validate_search_query("a" * 256)

    @pytest.mark.parametrize("raw,column", [
        ("amount", "amount"),
        ("Timestamp", "timestamp"),
        ("createdAt", "created_at"),
        ("created_at", "created_at"),
    ])
    def test_sort_field_maps_to_column(self, raw, column):
        assert field_validator.validate_sort_field(raw) == column

    def test_sort_field_rejects_unknown(self):
        with pytest.raises(FieldValidationError, match="invalid sort field: password"):
            field_validator.validate_sort_field("password")

    def test_sort_order(self):
        assert field_validator.validate_sort_order("") is None
        assert field_validator.validate_sort_order("asc") == "ASC"
        assert field_validator.validate_sort_order("DESC") == "DESC"

        with pytest.raises(FieldValidationError, match="invalid sort order: UP"):
            field_validator.validate_sort_order("up")

    def test_pagination_bounds(self):
        field_validator.validate_pagination(1, 1)
        field_validator.validate_pagination(3, 100)

        with pytest.raises(FieldValidationError, match="page must be >= 1"):
            field_validator.validate_pagination(0, 10)
        with pytest.raises(FieldValidationError, match="page_size must be between 1 and 100"):
            field_validator.validate_pagination(1, 0)
        with pytest.raises(FieldValidationError, match="page_size must be between 1 and 100"):
            field_validator.validate_pagination(1, 101)

    def test_amount_filter(self):
        assert field_validator.validate_amount_filter("") == 0
        assert field_validator.validate_amount_filter("250000") == 250000

        with pytest.raises(FieldValidationError, match="must be an integer"):
            field_validator.validate_amount_filter("12.5")
        with pytest.raises(FieldValidationError, match="out of range"):
            field_validator.validate_amount_filter("99999999999999999999999")
        with pytest.raises(FieldValidationError, match="out of range"):
            field_validator.validate_amount_filter("9223372036854775808")

    def test_date_range_format_only(self):
        # Inverted ranges are accepted
        field_validator.validate_date_range("2024-12-31", "2024-01-01")
        field_validator.validate_date_range("", "")

    @pytest.mark.parametrize("start,end,reason", [
        ("2024/01/01", "", "invalid start_date format"),
        ("", "01-02-2024", "invalid end_date format"),
        ("2024-02-30", "", "invalid start_date format"),
    ])
    def test_date_range_rejected(self, start, end, reason):
        with pytest.raises(FieldValidationError, match=reason):
            field_validator.validate_date_range(start, end)
