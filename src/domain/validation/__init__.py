"""Stateless validation rules"""

from . import field_validator, file_validator

__all__ = ["field_validator", "file_validator"]
