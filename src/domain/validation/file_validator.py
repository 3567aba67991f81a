"""
Upload file checks applied before any byte of the payload is parsed
"""

from pathlib import PurePath

from domain.exceptions import FileValidationError


DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
MAX_FILENAME_LENGTH = 255
INVALID_FILENAME_CHARS = ("/", "\\", ":", "*", "?", '"', "<", ">", "|")


def validate_filename(filename: str) -> None:
    if not filename:
        raise FileValidationError("Invalid filename", "filename is empty")

    if len(filename) > MAX_FILENAME_LENGTH:
        raise FileValidationError(
            "Invalid filename",
            f"filename is too long (max {MAX_FILENAME_LENGTH} characters)"
        )

    for char in INVALID_FILENAME_CHARS:
        if char in filename:
            raise FileValidationError(
                "Invalid filename",
                f"filename contains invalid character: {char}"
            )


def validate_file_extension(filename: str) -> None:
    extension = PurePath(filename).suffix.lower()
    if extension != ".csv":
        raise FileValidationError(
            "Invalid file type",
            f"invalid file extension: {extension} (expected .csv)"
        )


def validate_file_size(size: int, max_size: int = DEFAULT_MAX_FILE_SIZE) -> None:
    if size <= 0:
        raise FileValidationError("Invalid file", "file is empty")

    if size > max_size:
        raise FileValidationError(
            "Invalid file",
            f"file size exceeds maximum allowed size of {max_size // (1024 * 1024)}MB"
        )
