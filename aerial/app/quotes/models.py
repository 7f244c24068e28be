"""Quote request table and the option lists used by the quote form."""

import datetime
import enum

import sqlmodel


class QuoteStatus(enum.StrEnum):
    NEW = 'NEW'
    REVIEWED = 'REVIEWED'
    QUOTED = 'QUOTED'
    ACCEPTED = 'ACCEPTED'
    DECLINED = 'DECLINED'
    CLOSED = 'CLOSED'


PENDING_STATUSES = (QuoteStatus.NEW, QuoteStatus.REVIEWED)


class QuoteServiceType(enum.StrEnum):
    PORTRAIT = 'portrait'
    EVENT = 'event'
    AERIAL = 'aerial'
    PET = 'pet'
    COMMERCIAL = 'commercial'
    REAL_ESTATE = 'real-estate'
    INSPECTION = 'inspection'
    OTHER = 'other'

    @property
    def label(self) -> str:
        return _SERVICE_TYPE_LABELS[self]


_SERVICE_TYPE_LABELS = {
    QuoteServiceType.PORTRAIT: 'Portrait Photography',
    QuoteServiceType.EVENT: 'Event Photography',
    QuoteServiceType.AERIAL: 'Aerial Photography',
    QuoteServiceType.PET: 'Pet Photography',
    QuoteServiceType.COMMERCIAL: 'Commercial Photography',
    QuoteServiceType.REAL_ESTATE: 'Real Estate Photography',
    QuoteServiceType.INSPECTION: 'Property Inspection',
    QuoteServiceType.OTHER: 'Other',
}

# Session types offered per service; services without an entry take none.
SESSION_TYPES: dict[QuoteServiceType, dict[str, str]] = {
    QuoteServiceType.PORTRAIT: {
        '1-hour-family': '1-Hour Family Session',
        '3-hour-multi-location': '3-Hour Multi-Location Session',
        'couple-individual': 'Couple/Individual Session',
    },
    QuoteServiceType.EVENT: {
        'birthday-party': 'Birthday Party',
        'graduation': 'Graduation',
        'family-reunion': 'Family Reunion',
        'special-occasion': 'Special Occasion',
    },
    QuoteServiceType.AERIAL: {
        'panoramic-views': 'Panoramic Views',
        'property-overview': 'Property Overview',
        'event-aerial': 'Event Aerial Coverage',
    },
    QuoteServiceType.PET: {
        'single-pet': 'Single Pet Session',
        'multiple-pets': 'Multiple Pets Session',
        'pet-family': 'Pet & Family Session',
    },
}


class Timeline(enum.StrEnum):
    ASAP = 'asap'
    ONE_TO_TWO_WEEKS = '1-2-weeks'
    THREE_TO_FOUR_WEEKS = '3-4-weeks'
    ONE_TO_TWO_MONTHS = '1-2-months'
    THREE_TO_SIX_MONTHS = '3-6-months'
    FLEXIBLE = 'flexible'

    @property
    def label(self) -> str:
        return _TIMELINE_LABELS[self]


_TIMELINE_LABELS = {
    Timeline.ASAP: 'As soon as possible',
    Timeline.ONE_TO_TWO_WEEKS: '1-2 weeks',
    Timeline.THREE_TO_FOUR_WEEKS: '3-4 weeks',
    Timeline.ONE_TO_TWO_MONTHS: '1-2 months',
    Timeline.THREE_TO_SIX_MONTHS: '3-6 months',
    Timeline.FLEXIBLE: 'Flexible',
}


class BudgetRange(enum.StrEnum):
    UNDER_500 = 'under-500'
    FROM_500_TO_1000 = '500-1000'
    FROM_1000_TO_2000 = '1000-2000'
    FROM_2000_TO_5000 = '2000-5000'
    OVER_5000 = 'over-5000'
    DISCUSS = 'discuss'

    @property
    def label(self) -> str:
        return _BUDGET_LABELS[self]


_BUDGET_LABELS = {
    BudgetRange.UNDER_500: 'Under $500',
    BudgetRange.FROM_500_TO_1000: '$500 - $1,000',
    BudgetRange.FROM_1000_TO_2000: '$1,000 - $2,000',
    BudgetRange.FROM_2000_TO_5000: '$2,000 - $5,000',
    BudgetRange.OVER_5000: 'Over $5,000',
    BudgetRange.DISCUSS: 'Prefer to discuss',
}


class QuoteRequest(sqlmodel.SQLModel, table=True):
    """A prospective client's request for a quote."""

    __tablename__ = 'quotes_quote_request'  # type: ignore[misc]

    id: int | None = sqlmodel.Field(default=None, primary_key=True)
    name: str = sqlmodel.Field(max_length=100)
    email: str = sqlmodel.Field(max_length=255, index=True)
    phone: str | None = sqlmodel.Field(default=None, max_length=20)
    service_type: QuoteServiceType = sqlmodel.Field(index=True)
    session_type: str | None = sqlmodel.Field(default=None, max_length=50)
    project_description: str = sqlmodel.Field(max_length=2000)
    location: str = sqlmodel.Field(max_length=255)
    preferred_date: datetime.date | None = None
    alternate_date: datetime.date | None = None
    timeline: Timeline
    budget: BudgetRange | None = None
    special_requirements: str | None = sqlmodel.Field(default=None, max_length=1000)
    pet_details: str | None = sqlmodel.Field(default=None, max_length=500)
    status: QuoteStatus = sqlmodel.Field(default=QuoteStatus.NEW, index=True)
    admin_notes: str | None = sqlmodel.Field(default=None, max_length=2000)
    quoted_amount: float | None = None
    created_at: datetime.datetime = sqlmodel.Field(
        default_factory=lambda: datetime.datetime.now(datetime.UTC), index=True
    )
    updated_at: datetime.datetime = sqlmodel.Field(
        default_factory=lambda: datetime.datetime.now(datetime.UTC)
    )
