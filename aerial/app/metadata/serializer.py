"""Convert PhotoMetadata into plain JSON for storage in a JSON column."""

from __future__ import annotations

import collections.abc
import json
import logging
from typing import Any

import pydantic
import pydantic_core

from .models import PhotoMetadata

logger = logging.getLogger(__name__)


class MetadataSerializationError(Exception):
    """Raised when metadata cannot be represented as JSON.

    This signals a programming error in the caller, not bad user input.
    """


def serialize(
    metadata: PhotoMetadata | collections.abc.Mapping[str, Any],
) -> pydantic.JsonValue:
    """Return a deep, JSON-safe copy of *metadata* keyed by the wire (camelCase) names.

    Absent fields are omitted. The result shares no objects with the input.

    Raises:
        MetadataSerializationError: if the value contains cycles, non-finite
            numbers or members that JSON cannot represent.
    """
    try:
        if isinstance(metadata, PhotoMetadata):
            data: Any = metadata.model_dump(mode='json', by_alias=True, exclude_none=True)
        else:
            data = metadata
        return json.loads(json.dumps(data, allow_nan=False))
    except (TypeError, ValueError, pydantic_core.PydanticSerializationError) as exc:
        logger.exception('Failed to serialize photo metadata')
        raise MetadataSerializationError('failed to serialize metadata') from exc
