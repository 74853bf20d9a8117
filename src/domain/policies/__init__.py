"""Domain policies package."""

from .record_names import MAX_NAME_LENGTH, is_valid_record_name

__all__ = ["MAX_NAME_LENGTH", "is_valid_record_name"]
