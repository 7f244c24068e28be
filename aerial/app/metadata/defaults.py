"""Default metadata for new photos and sample data."""

from __future__ import annotations

import collections.abc
import datetime
from typing import Any

import pydantic.alias_generators

from . import parser, validator
from .models import PhotoMetadata

DEFAULT_SETTINGS: dict[str, Any] = {
    'iso': 100,
    'aperture': 'f/2.8',
    'shutterSpeed': '1/120',
    'focalLength': '24mm',
}


def _default_values() -> dict[str, Any]:
    return {
        'shootDate': datetime.datetime.now(datetime.UTC).isoformat(),
        'tags': [],
        'settings': dict(DEFAULT_SETTINGS),
    }


def _wire_key(key: Any) -> Any:
    if isinstance(key, str) and '_' in key:
        return pydantic.alias_generators.to_camel(key)
    return key


def _wire_keys(values: collections.abc.Mapping[Any, Any]) -> dict[Any, Any]:
    """Rename snake_case keys to their wire names, one level deep into nested objects."""
    return {
        _wire_key(key): (
            {_wire_key(k): v for k, v in value.items()}
            if isinstance(value, collections.abc.Mapping)
            else value
        )
        for key, value in values.items()
    }


def create_default(
    overrides: PhotoMetadata | collections.abc.Mapping[str, Any] | None = None,
) -> PhotoMetadata:
    """Return default metadata with *overrides* applied.

    Flat fields in *overrides* replace the defaults. Nested objects
    (``settings``, ``gps``...) are merged key by key, so
    ``{'settings': {'iso': 400}}`` keeps the default aperture. Keys may be
    given as wire names (``shootDate``) or attribute names (``shoot_date``).

    Raises:
        InvalidMetadataError: if the merged metadata is not valid.
    """
    if isinstance(overrides, PhotoMetadata):
        overrides = overrides.model_dump(by_alias=True, exclude_none=True)

    merged = _default_values()
    for key, value in _wire_keys(overrides or {}).items():
        current = merged.get(key)
        if (
            key in validator.NESTED_FIELDS
            and isinstance(value, collections.abc.Mapping)
            and isinstance(current, dict)
        ):
            merged[key] = {**current, **value}
        else:
            merged[key] = value

    errors = validator.validate(merged)
    if errors:
        raise parser.InvalidMetadataError(errors)
    return PhotoMetadata.model_validate(merged)
