"""
Unit tests for upload file checks.
"""
import pytest

from domain.exceptions import FileValidationError
from domain.validation import file_validator


class TestFileValidator:
    """Filename, extension and size rules."""

    def test_valid_file_passes(self):
        file_validator.validate_filename("transactions.csv")
        file_validator.validate_file_extension("transactions.csv")
        file_validator.validate_file_size(1024)

    def test_extension_is_case_insensitive(self):
        file_validator.validate_file_extension("EXPORT.CSV")

    def test_empty_filename(self):
        with pytest.raises(FileValidationError) as exc_info:
            file_validator.validate_filename("")

        assert exc_info.value.message == "Invalid filename"
        assert exc_info.value.reason == "filename is empty"

    def test_filename_too_long(self):
        with pytest.raises(FileValidationError, match="filename is too long"):
            file_validator.validate_filename("a" * 252 + ".csv")

    @pytest.mark.parametrize("filename,char", [
        ("../etc/passwd.csv", "/"),
        ("C:data.csv", ":"),
        ("what?.csv", "?"),
    ])
    def test_filename_invalid_characters(self, filename, char):
        with pytest.raises(FileValidationError) as exc_info:
            file_validator.validate_filename(filename)

        assert exc_info.value.reason == f"filename contains invalid character: {char}"

    def test_wrong_extension(self):
        with pytest.raises(FileValidationError) as exc_info:
            file_validator.validate_file_extension("report.txt")

        assert exc_info.value.message == "Invalid file type"
        assert exc_info.value.reason == "invalid file extension: .txt (expected .csv)"

    def test_empty_file(self):
        with pytest.raises(FileValidationError) as exc_info:
            file_validator.validate_file_size(0)

        assert exc_info.value.message == "Invalid file"
        assert exc_info.value.reason == "file is empty"

    def test_file_too_large(self):
        file_validator.validate_file_size(file_validator.DEFAULT_MAX_FILE_SIZE)

        with pytest.raises(FileValidationError, match="maximum allowed size of 10MB"):
            file_validator.validate_file_size(file_validator.DEFAULT_MAX_FILE_SIZE + 1)
