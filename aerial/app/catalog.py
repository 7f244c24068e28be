"""Static site content: the service catalogue and client testimonials."""

import pydantic

from .quotes import models as quote_models

MAX_RATING = 5


class Service(pydantic.BaseModel):
    slug: str
    title: str
    description: str
    features: list[str]
    image: str
    price: str
    quote_service_type: quote_models.QuoteServiceType

    @property
    def quote_url(self) -> str:
        return f'/quote?service={self.quote_service_type.value}'


class Testimonial(pydantic.BaseModel):
    name: str
    role: str
    company: str = ''
    rating: int = pydantic.Field(ge=1, le=MAX_RATING)
    text: str

    @property
    def attribution(self) -> str:
        """``role, company``, or just the role when there is no company."""
        return f'{self.role}, {self.company}' if self.company else self.role


SERVICES: list[Service] = [
    Service(
        slug='commercial',
        title='Commercial Inspections',
        description=(
            'Professional drone inspections for commercial properties, roofing '
            'assessments, and infrastructure monitoring with detailed reporting.'
        ),
        features=[
            'Roof & Building Inspections',
            'Infrastructure Assessment',
            'Construction Progress',
            'Safety Compliance',
        ],
        image='https://images.unsplash.com/photo-1486406146926-c627a92ad1ab?w=800&h=600&fit=crop',
        price='Starting at $299',
        quote_service_type=quote_models.QuoteServiceType.INSPECTION,
    ),
    Service(
        slug='residential',
        title='Residential Services',
        description=(
            'Home inspections, real estate photography, and property documentation '
            'to showcase residential properties effectively.'
        ),
        features=[
            'Home Inspections',
            'Real Estate Photography',
            'Property Documentation',
            'Listing Enhancement',
        ],
        image='https://images.unsplash.com/photo-1560518883-ce09059eeffa?w=800&h=600&fit=crop',
        price='Starting at $199',
        quote_service_type=quote_models.QuoteServiceType.REAL_ESTATE,
    ),
    Service(
        slug='events',
        title='Event Photography',
        description=(
            'Aerial photography and cinematography for weddings, corporate events, '
            'and special occasions with cinematic quality.'
        ),
        features=[
            'Wedding Photography',
            'Corporate Events',
            'Aerial Cinematography',
            '4K Video Production',
        ],
        image='https://images.unsplash.com/photo-1519225421980-715cb0215aed?w=800&h=600&fit=crop',
        price='Starting at $499',
        quote_service_type=quote_models.QuoteServiceType.EVENT,
    ),
]

TESTIMONIALS: list[Testimonial] = [
    Testimonial(
        name='Sarah Johnson',
        role='Property Manager',
        company='Metro Commercial Properties',
        rating=5,
        text=(
            'All Around Photos provided exceptional drone inspection services for our '
            'commercial building. Their detailed reports and high-quality imagery helped '
            'us identify maintenance issues we never would have spotted otherwise.'
        ),
    ),
    Testimonial(
        name='Michael Chen',
        role='Real Estate Agent',
        company='Premier Realty Group',
        rating=5,
        text=(
            'The aerial photography for our luxury listings has been a game-changer. '
            'The stunning perspectives have significantly increased client interest '
            'and helped properties sell faster.'
        ),
    ),
    Testimonial(
        name='Emily Rodriguez',
        role='Event Coordinator',
        company='Elegant Events LLC',
        rating=5,
        text=(
            'Our wedding clients absolutely love the aerial photography. The team is '
            'professional, unobtrusive, and captures perspectives that traditional '
            'photography simply cannot.'
        ),
    ),
    Testimonial(
        name='David Thompson',
        role='Construction Manager',
        company='BuildRight Construction',
        rating=5,
        text=(
            'Regular progress documentation with drone photography has improved our '
            'project management significantly. The aerial views help us track progress '
            'and communicate with stakeholders.'
        ),
    ),
    Testimonial(
        name='Lisa Park',
        role='Homeowner',
        rating=5,
        text=(
            'The roof inspection service was thorough and professional. The report '
            'with high-resolution images helped us understand exactly what repairs '
            'were needed.'
        ),
    ),
]


def get_service(slug: str) -> Service | None:
    return next((service for service in SERVICES if service.slug == slug), None)
