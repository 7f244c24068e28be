"""Request bodies for the quote request API."""

import datetime

import pydantic

from . import models

PHONE_PATTERN = r'^\+?[1-9]\d{0,15}$'


def _today() -> datetime.date:
    return datetime.datetime.now(datetime.UTC).date()


class QuoteRequestCreate(pydantic.BaseModel):
    """A quote request as submitted from the quote or booking form.

    Optional fields accept an empty string from HTML forms and treat it as
    not provided.
    """

    model_config = pydantic.ConfigDict(str_strip_whitespace=True)

    name: str = pydantic.Field(min_length=1, max_length=100)
    email: pydantic.EmailStr
    phone: str | None = pydantic.Field(default=None, pattern=PHONE_PATTERN)
    service_type: models.QuoteServiceType
    session_type: str | None = None
    project_description: str = pydantic.Field(min_length=10, max_length=2000)
    location: str = pydantic.Field(min_length=1, max_length=255)
    preferred_date: datetime.date | None = None
    alternate_date: datetime.date | None = None
    timeline: models.Timeline
    budget: models.BudgetRange | None = None
    special_requirements: str | None = pydantic.Field(default=None, max_length=1000)
    pet_details: str | None = pydantic.Field(default=None, max_length=500)

    @pydantic.field_validator(
        'phone',
        'session_type',
        'preferred_date',
        'alternate_date',
        'budget',
        'special_requirements',
        'pet_details',
        mode='before',
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @pydantic.field_validator('preferred_date', 'alternate_date')
    @classmethod
    def _in_future(cls, value: datetime.date | None) -> datetime.date | None:
        if value is not None and value <= _today():
            raise ValueError('date must be in the future')
        return value

    @pydantic.model_validator(mode='after')
    def _check_session(self) -> 'QuoteRequestCreate':
        if self.session_type is not None:
            offered = models.SESSION_TYPES.get(self.service_type, {})
            if self.session_type not in offered:
                raise ValueError(
                    f'session type {self.session_type!r} is not offered for '
                    f'{self.service_type.label}'
                )
        if self.service_type is models.QuoteServiceType.PET and not self.pet_details:
            raise ValueError('pet details are required for pet photography sessions')
        return self


class QuoteRequestUpdate(pydantic.BaseModel):
    """Admin changes to a quote request. Unset fields are left alone."""

    status: models.QuoteStatus | None = None
    admin_notes: str | None = pydantic.Field(default=None, max_length=2000)
    quoted_amount: float | None = pydantic.Field(default=None, ge=0)

    @pydantic.field_validator('status')
    @classmethod
    def _status_not_null(cls, value: models.QuoteStatus | None) -> models.QuoteStatus:
        # Only runs when status is sent; the column itself is NOT NULL.
        if value is None:
            raise ValueError('status cannot be null')
        return value
