"""Human-readable projection of photo metadata for gallery and admin pages."""

from __future__ import annotations

import datetime

from .models import PhotoMetadata

FILE_SIZE_UNITS = ('B', 'KB', 'MB', 'GB')


def format_file_size(size_bytes: float) -> str:
    """Format a byte count with binary units: ``"512 B"``, ``"2.0 MB"``."""
    size = float(size_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(FILE_SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    precision = 0 if unit_index == 0 else 1
    return f'{size:.{precision}f} {FILE_SIZE_UNITS[unit_index]}'


def format_shoot_date(value: str) -> str:
    """Format an ISO-8601 timestamp as ``"January 15, 2024"``; unparseable input is returned as is."""
    try:
        shot_at = datetime.datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return value
    return f'{shot_at:%B} {shot_at.day}, {shot_at.year}'


def _format_settings(metadata: PhotoMetadata) -> str | None:
    settings = metadata.settings
    if settings is None:
        return None
    parts: list[str] = []
    if settings.iso:
        parts.append(f'ISO {settings.iso}')
    if settings.aperture:
        parts.append(settings.aperture)
    if settings.shutter_speed:
        parts.append(settings.shutter_speed)
    if settings.focal_length:
        parts.append(settings.focal_length)
    return ', '.join(parts) or None


def extract_display(metadata: PhotoMetadata | None) -> dict[str, str]:
    """Map display labels to formatted values.

    Only fields present in *metadata* appear in the result; ``None`` gives an
    empty dict.
    """
    if metadata is None:
        return {}

    display: dict[str, str] = {}

    if metadata.location:
        display['Location'] = metadata.location
    if metadata.equipment:
        display['Equipment'] = metadata.equipment
    if metadata.shoot_date:
        display['Date'] = format_shoot_date(metadata.shoot_date)

    if metadata.camera:
        camera = ' '.join(p for p in (metadata.camera.make, metadata.camera.model) if p)
        if camera:
            display['Camera'] = camera
        if metadata.camera.lens:
            display['Lens'] = metadata.camera.lens

    if metadata.dimensions:
        width, height = metadata.dimensions.width, metadata.dimensions.height
        if width and height:
            display['Dimensions'] = f'{width} × {height}'
            display['Megapixels'] = f'{width * height / 1_000_000:.1f} MP'

    if metadata.file_size:
        display['File Size'] = format_file_size(metadata.file_size)
    if metadata.format:
        display['Format'] = metadata.format.upper()

    settings = _format_settings(metadata)
    if settings:
        display['Settings'] = settings

    if metadata.gps:
        display['Coordinates'] = (
            f'{metadata.gps.latitude:.4f}°, {metadata.gps.longitude:.4f}°'
        )

    return display
