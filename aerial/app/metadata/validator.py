"""Structural validation of untyped photo metadata.

``validate`` accepts any JSON-decoded value and reports every shape error it
finds as a :class:`ValidationError`. All fields are optional; only present
fields with the wrong type, range or pattern are errors. Each nested object
has its own small validator so a malformed ``gps`` never hides problems in
``settings``.

In strict mode unrecognized keys are rejected as well, ``format`` is limited
to a fixed set of file formats and ``shootDate`` must be an ISO-8601
timestamp.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import datetime
import json
import math
import re
import sys
from typing import Any

from .models import ValidationError

FORMATS = ('JPEG', 'PNG', 'RAW', 'TIFF', 'WebP')
MIN_ISO = 50
MAX_ISO = 25600
MAX_TAGS = 20
MAX_TAG_LENGTH = 50

STRING_FIELDS = ('location', 'equipment', 'shootDate', 'format')
NESTED_FIELDS = ('settings', 'gps', 'dimensions', 'camera', 'processing')
KNOWN_FIELDS = frozenset((*STRING_FIELDS, 'fileSize', *NESTED_FIELDS, 'tags'))

_APERTURE_RE = re.compile(r'f/\d+(\.\d+)?', re.ASCII)
_SHUTTER_SPEED_RE = re.compile(r'1/\d+|\d+(\.\d+)?s?', re.ASCII)
_FOCAL_LENGTH_RE = re.compile(r'\d+(\.\d+)?mm', re.ASCII)

_MAX_FLOAT_INT = int(sys.float_info.max)


# ---------------------------------------------------------------------------
# Value predicates
# ---------------------------------------------------------------------------


def json_type(value: Any) -> str:
    """Describe *value* by its JSON type name."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int | float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, collections.abc.Mapping):
        return 'object'
    if isinstance(value, list | tuple):
        return 'array'
    return type(value).__name__


def _is_number(value: Any) -> bool:
    """Finite numbers only; ints too large for a float count as infinite."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return abs(value) <= _MAX_FLOAT_INT
    return isinstance(value, float) and math.isfinite(value)


def _is_integer(value: Any) -> bool:
    return _is_number(value) and (isinstance(value, int) or value.is_integer())


def _is_positive_number(value: Any) -> bool:
    return _is_number(value) and value > 0


def _is_positive_integer(value: Any) -> bool:
    return _is_integer(value) and value > 0


def _in_range(low: float, high: float) -> collections.abc.Callable[[Any], bool]:
    return lambda value: _is_number(value) and low <= value <= high


def _matches(pattern: re.Pattern[str]) -> collections.abc.Callable[[Any], bool]:
    return lambda value: isinstance(value, str) and pattern.fullmatch(value) is not None


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_iso_datetime(value: str) -> bool:
    try:
        datetime.datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return False
    return True


def _is_known_format(value: str) -> bool:
    return value.upper() in {f.upper() for f in FORMATS}


# ---------------------------------------------------------------------------
# Error construction
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class _Rule:
    """Expectation for one key of a nested object."""

    expected: str
    base_type: str
    check: collections.abc.Callable[[Any], bool]
    required: bool = False


def _mismatch(field: str, expected: str, value: Any, base_type: str) -> ValidationError:
    """Build an error, showing the offending value when only its range/pattern is wrong."""
    received = json_type(value)
    if received == base_type and (base_type != 'number' or _is_number(value)):
        received = f'{received} {json.dumps(value)}'
    return ValidationError(field=field, expected=expected, received=received)


def _unrecognized(
    obj: collections.abc.Mapping[Any, Any],
    known: collections.abc.Iterable[str],
    prefix: str = '',
) -> list[ValidationError]:
    allowed = set(known)
    return [
        ValidationError(
            field=f'{prefix}{key}',
            expected='no unrecognized keys',
            received='unrecognized key',
        )
        for key in obj
        if key not in allowed
    ]


def _check_nested(
    field: str,
    value: Any,
    rules: dict[str, _Rule],
    strict: bool,
) -> list[ValidationError]:
    """Validate one nested object against its per-key rules."""
    if not isinstance(value, collections.abc.Mapping):
        return [
            ValidationError(field=field, expected='object', received=json_type(value))
        ]

    errors: list[ValidationError] = []
    for key, rule in rules.items():
        path = f'{field}.{key}'
        if key not in value:
            if rule.required:
                errors.append(
                    ValidationError(field=path, expected=rule.expected, received='missing')
                )
            continue
        if not rule.check(value[key]):
            errors.append(_mismatch(path, rule.expected, value[key], rule.base_type))

    if strict:
        errors.extend(_unrecognized(value, rules, prefix=f'{field}.'))
    return errors


# ---------------------------------------------------------------------------
# Per-field validators
# ---------------------------------------------------------------------------


def _validate_settings(value: Any, strict: bool) -> list[ValidationError]:
    if strict:
        iso = _Rule(
            f'integer between {MIN_ISO} and {MAX_ISO}',
            'number',
            lambda v: _is_integer(v) and MIN_ISO <= v <= MAX_ISO,
        )
    else:
        iso = _Rule('positive integer', 'number', _is_positive_integer)
    rules = {
        'iso': iso,
        'aperture': _Rule('aperture like "f/2.8"', 'string', _matches(_APERTURE_RE)),
        'shutterSpeed': _Rule(
            'shutter speed like "1/120" or "2s"',
            'string',
            _matches(_SHUTTER_SPEED_RE),
        ),
        'focalLength': _Rule(
            'focal length like "24mm"', 'string', _matches(_FOCAL_LENGTH_RE)
        ),
    }
    return _check_nested('settings', value, rules, strict)


def _validate_gps(value: Any, strict: bool) -> list[ValidationError]:
    rules = {
        'latitude': _Rule(
            'number between -90 and 90', 'number', _in_range(-90, 90), required=True
        ),
        'longitude': _Rule(
            'number between -180 and 180', 'number', _in_range(-180, 180), required=True
        ),
    }
    return _check_nested('gps', value, rules, strict)


def _validate_dimensions(value: Any, strict: bool) -> list[ValidationError]:
    rules = {
        'width': _Rule('positive integer', 'number', _is_positive_integer),
        'height': _Rule('positive integer', 'number', _is_positive_integer),
    }
    return _check_nested('dimensions', value, rules, strict)


def _validate_camera(value: Any, strict: bool) -> list[ValidationError]:
    rules = {key: _Rule('string', 'string', _is_string) for key in ('make', 'model', 'lens')}
    return _check_nested('camera', value, rules, strict)


def _validate_processing(value: Any, strict: bool) -> list[ValidationError]:
    rules = {
        key: _Rule('string', 'string', _is_string)
        for key in ('software', 'version', 'colorSpace')
    }
    return _check_nested('processing', value, rules, strict)


_NESTED_VALIDATORS: dict[
    str, collections.abc.Callable[[Any, bool], list[ValidationError]]
] = {
    'settings': _validate_settings,
    'gps': _validate_gps,
    'dimensions': _validate_dimensions,
    'camera': _validate_camera,
    'processing': _validate_processing,
}

_STRICT_STRING_CHECKS: dict[str, tuple[str, collections.abc.Callable[[str], bool]]] = {
    'shootDate': ('ISO-8601 datetime', _is_iso_datetime),
    'format': ('one of ' + ', '.join(FORMATS), _is_known_format),
}


def _validate_file_size(value: Any, strict: bool) -> list[ValidationError]:
    if strict:
        if not _is_positive_integer(value):
            return [_mismatch('fileSize', 'positive integer', value, 'number')]
    elif not _is_positive_number(value):
        return [_mismatch('fileSize', 'positive number', value, 'number')]
    return []


def _validate_tags(value: Any, strict: bool) -> list[ValidationError]:
    """Tags produce at most one aggregate error for the whole field."""
    if not isinstance(value, list | tuple):
        return [ValidationError(field='tags', expected='array', received=json_type(value))]
    if not all(isinstance(tag, str) for tag in value):
        return [
            ValidationError(
                field='tags',
                expected='array of strings',
                received='array with non-string elements',
            )
        ]
    if not all(value):
        return [
            ValidationError(
                field='tags',
                expected='array of non-empty strings',
                received='array with empty strings',
            )
        ]
    if strict:
        if len(value) > MAX_TAGS:
            return [
                ValidationError(
                    field='tags',
                    expected=f'at most {MAX_TAGS} tags',
                    received=f'array of {len(value)} tags',
                )
            ]
        if any(len(tag) > MAX_TAG_LENGTH for tag in value):
            return [
                ValidationError(
                    field='tags',
                    expected=f'tags of at most {MAX_TAG_LENGTH} characters',
                    received=f'array with tags longer than {MAX_TAG_LENGTH} characters',
                )
            ]
    return []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate(value: Any, strict: bool = False) -> list[ValidationError]:
    """Return every shape error in *value*; an empty list means it is valid metadata.

    A value that is not an object yields exactly one ``root`` error.
    """
    if not isinstance(value, collections.abc.Mapping):
        return [
            ValidationError(field='root', expected='object', received=json_type(value))
        ]

    errors: list[ValidationError] = []

    for field in STRING_FIELDS:
        if field not in value:
            continue
        item = value[field]
        if not isinstance(item, str):
            errors.append(
                ValidationError(field=field, expected='string', received=json_type(item))
            )
        elif strict and field in _STRICT_STRING_CHECKS:
            expected, check = _STRICT_STRING_CHECKS[field]
            if not check(item):
                errors.append(_mismatch(field, expected, item, 'string'))

    if 'fileSize' in value:
        errors.extend(_validate_file_size(value['fileSize'], strict))

    for field in NESTED_FIELDS:
        if field in value:
            errors.extend(_NESTED_VALIDATORS[field](value[field], strict))

    if 'tags' in value:
        errors.extend(_validate_tags(value['tags'], strict))

    if strict:
        errors.extend(_unrecognized(value, KNOWN_FIELDS))

    return errors
