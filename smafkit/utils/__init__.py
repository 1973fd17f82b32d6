"""Utility functions for smafkit."""

from smafkit.utils.validation import (
    FieldReadError,
    HeaderNotFoundError,
    MMFDecodeError,
    validate_mmf_header,
)

__all__ = [
    "FieldReadError",
    "HeaderNotFoundError",
    "MMFDecodeError",
    "validate_mmf_header",
]
