"""Turn untyped metadata into typed PhotoMetadata.

Two entry points sit on top of the validator: ``parse`` for callers that only
need the metadata or ``None``, and ``parse_with_result`` for callers that must
report why the metadata was rejected (API handlers answering with a 400).
"""

from __future__ import annotations

import logging
from typing import Any

from . import validator
from .models import ParseFailure, ParseResult, ParseSuccess, PhotoMetadata, ValidationError

logger = logging.getLogger(__name__)

NO_METADATA_MESSAGE = 'no metadata provided'


class InvalidMetadataError(ValueError):
    """Raised when metadata has to be valid but is not."""

    def __init__(self, errors: list[ValidationError]):
        self.errors = errors
        super().__init__(format_errors(errors))


def format_errors(errors: list[ValidationError]) -> str:
    """Join errors as ``"<field>: expected <expected>, got <received>"`` separated by ``"; "``."""
    return '; '.join(str(error) for error in errors)


def is_absent(value: Any) -> bool:
    """Return True for the JSON falsy values: null, false, 0 and the empty string.

    Empty objects and arrays are not absent.
    """
    if value is None:
        return True
    if isinstance(value, str | int | float):
        return not value
    return False


def is_photo_metadata(value: Any, strict: bool = False) -> bool:
    """Return True if *value* is acceptable as photo metadata."""
    return not validator.validate(value, strict=strict)


def parse(value: Any, strict: bool = False) -> PhotoMetadata | None:
    """Return *value* as PhotoMetadata, or None if it is absent or invalid.

    Invalid metadata is logged as a warning rather than raised.
    """
    if is_absent(value):
        return None

    errors = validator.validate(value, strict=strict)
    if errors:
        logger.warning('Invalid photo metadata (%s): %r', format_errors(errors), value)
        return None

    return PhotoMetadata.model_validate(value)


def parse_with_result(value: Any, strict: bool = False) -> ParseResult:
    """Parse *value* into a success or failure result without raising."""
    if is_absent(value):
        return ParseFailure(error=NO_METADATA_MESSAGE, raw_data=value)

    errors = validator.validate(value, strict=strict)
    if errors:
        return ParseFailure(error=format_errors(errors), raw_data=value, errors=errors)

    return ParseSuccess(metadata=PhotoMetadata.model_validate(value))
