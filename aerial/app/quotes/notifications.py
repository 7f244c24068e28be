"""Email notifications for quote requests.

There is no mail transport yet: "sending" renders the message and writes it to
the log. Failures are logged and reported as ``False`` so a broken template or
transport never fails the API request that triggered it.
"""

import logging
import pathlib

import jinja2
import pydantic

from .. import settings
from . import models

logger = logging.getLogger(__name__)

TEMPLATES_DIR = pathlib.Path(__file__).resolve().parent / 'email_templates'

env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATES_DIR),
    autoescape=jinja2.select_autoescape(['html.jinja2']),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters['datefmt'] = lambda value, fmt='%A, %B %d, %Y': (
    value.strftime(fmt) if value else 'Not specified'
)


class EmailMessage(pydantic.BaseModel):
    to: str
    subject: str
    text: str
    html: str


def _render(name: str, **context: object) -> tuple[str, str]:
    context.setdefault('site_name', settings.SITE_NAME)
    context.setdefault('contact_email', settings.PHOTOGRAPHER_EMAIL)
    context.setdefault('contact_phone', settings.CONTACT_PHONE)
    text = env.get_template(f'{name}.txt.jinja2').render(**context).strip()
    html = env.get_template(f'{name}.html.jinja2').render(**context)
    return text, html


def build_quote_request_email(quote_request: models.QuoteRequest) -> EmailMessage:
    """Notification to the photographer about a new request."""
    text, html = _render('quote_request', quote=quote_request)
    return EmailMessage(
        to=settings.PHOTOGRAPHER_EMAIL,
        subject=f'New Quote Request: {quote_request.service_type.label} - {quote_request.name}',
        text=text,
        html=html,
    )


def build_quote_response_email(
    quote_request: models.QuoteRequest, message: str
) -> EmailMessage:
    """Reply to the client once a quote has been prepared."""
    text, html = _render('quote_response', quote=quote_request, message=message)
    return EmailMessage(
        to=quote_request.email,
        subject=f'Quote Response: {quote_request.service_type.label}',
        text=text,
        html=html,
    )


def send_email(message: EmailMessage) -> None:
    logger.info('Sending email to %s: %s\n%s', message.to, message.subject, message.text)


def send_quote_request_notification(quote_request: models.QuoteRequest) -> bool:
    """Tell the photographer about a new quote request."""
    try:
        send_email(build_quote_request_email(quote_request))
    except Exception:
        logger.exception('Failed to send notification for quote request %s', quote_request.id)
        return False
    return True


def send_quote_response_to_client(
    quote_request: models.QuoteRequest, message: str | None = None
) -> bool:
    """Send the client their quote. *message* defaults to the admin notes."""
    body = message or quote_request.admin_notes or (
        'We have reviewed your request and prepared a quote for your project.'
    )
    try:
        send_email(build_quote_response_email(quote_request, body))
    except Exception:
        logger.exception('Failed to send quote response for quote request %s', quote_request.id)
        return False
    return True
