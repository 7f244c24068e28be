"""Typed photo metadata records and validation result types.

Metadata travels as JSON with camelCase keys (``shootDate``, ``fileSize``,
``shutterSpeed``...). The models below accept either the wire names or the
snake_case attribute names and dump back to the wire names.
"""

from __future__ import annotations

from typing import Any, Literal

import pydantic
import pydantic.alias_generators


class _WireModel(pydantic.BaseModel):
    """Base for metadata records: camelCase on the wire, snake_case in Python."""

    model_config = pydantic.ConfigDict(
        alias_generator=pydantic.alias_generators.to_camel,
        populate_by_name=True,
        extra='ignore',
    )


class CameraSettings(_WireModel):
    """Exposure settings used for the shot."""

    iso: int | None = None
    aperture: str | None = None
    shutter_speed: str | None = None
    focal_length: str | None = None


class GpsCoordinates(_WireModel):
    """Capture position in decimal degrees."""

    latitude: float
    longitude: float


class Dimensions(_WireModel):
    """Pixel dimensions of the image."""

    width: int | None = None
    height: int | None = None


class CameraInfo(_WireModel):
    make: str | None = None
    model: str | None = None
    lens: str | None = None


class ProcessingInfo(_WireModel):
    software: str | None = None
    version: str | None = None
    color_space: str | None = None


class PhotoMetadata(_WireModel):
    """Provenance and capture conditions attached to a photo. Every field is optional."""

    location: str | None = None
    equipment: str | None = None
    shoot_date: str | None = None
    format: str | None = None
    file_size: int | float | None = None
    tags: list[str] | None = None
    settings: CameraSettings | None = None
    gps: GpsCoordinates | None = None
    dimensions: Dimensions | None = None
    camera: CameraInfo | None = None
    processing: ProcessingInfo | None = None


# ---------------------------------------------------------------------------
# Validation results
# ---------------------------------------------------------------------------


class ValidationError(pydantic.BaseModel):
    """A single shape error found in untyped metadata.

    ``field`` is a dotted path such as ``settings.iso`` (``root`` when the
    value is not an object at all).
    """

    model_config = pydantic.ConfigDict(frozen=True)

    field: str
    expected: str
    received: str

    def __str__(self) -> str:
        return f'{self.field}: expected {self.expected}, got {self.received}'


class ParseSuccess(pydantic.BaseModel):
    """Metadata that passed validation."""

    success: Literal[True] = True
    metadata: PhotoMetadata


class ParseFailure(pydantic.BaseModel):
    """Metadata that was absent or failed validation."""

    success: Literal[False] = False
    error: str
    raw_data: Any = None
    errors: list[ValidationError] = pydantic.Field(default_factory=list)


ParseResult = ParseSuccess | ParseFailure
