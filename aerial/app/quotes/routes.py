"""JSON API routes for quote requests."""

import logging
import math
import typing

import fastapi
import sqlmodel

from .. import database
from . import models, notifications, schemas, services

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(prefix='/api/quote-requests')

SUBMITTED_MESSAGE = (
    'Quote request submitted successfully. We will get back to you within 24 hours.'
)


def get_repository(
    session: sqlmodel.Session = fastapi.Depends(database.get_session),
) -> services.QuoteRequestRepository:
    return services.QuoteRequestRepository(session)


def notify_if_newly_quoted(
    quote_request: models.QuoteRequest, previous_status: models.QuoteStatus
) -> None:
    """Send the client their quote when a request first moves into QUOTED."""
    if (
        quote_request.status is models.QuoteStatus.QUOTED
        and previous_status is not models.QuoteStatus.QUOTED
    ):
        notifications.send_quote_response_to_client(quote_request)


@router.post('', status_code=201)
async def create_quote_request(
    data: schemas.QuoteRequestCreate,
    repository: services.QuoteRequestRepository = fastapi.Depends(get_repository),
) -> dict[str, typing.Any]:
    """Store a quote request and notify the photographer."""
    quote_request = repository.create(data)
    logger.info(
        'Quote request %s received for %s', quote_request.id, quote_request.service_type
    )
    notifications.send_quote_request_notification(quote_request)
    return {'success': True, 'data': {'id': quote_request.id, 'message': SUBMITTED_MESSAGE}}


@router.get('')
async def list_quote_requests(
    page: typing.Annotated[int, fastapi.Query(ge=1)] = 1,
    limit: typing.Annotated[int, fastapi.Query(ge=1, le=100)] = 20,
    status: models.QuoteStatus | None = None,
    service_type: models.QuoteServiceType | None = None,
    repository: services.QuoteRequestRepository = fastapi.Depends(get_repository),
) -> dict[str, typing.Any]:
    """List quote requests newest first with pagination info."""
    rows, total = repository.list_requests(
        page=page, limit=limit, status=status, service_type=service_type
    )
    return {
        'success': True,
        'data': [row.model_dump() for row in rows],
        'pagination': {
            'page': page,
            'limit': limit,
            'total': total,
            'total_pages': math.ceil(total / limit),
        },
    }


@router.get('/stats')
async def quote_request_stats(
    repository: services.QuoteRequestRepository = fastapi.Depends(get_repository),
) -> dict[str, typing.Any]:
    return {'success': True, 'data': repository.statistics()}


@router.patch('/{quote_id}')
async def update_quote_request(
    quote_id: int,
    data: schemas.QuoteRequestUpdate,
    repository: services.QuoteRequestRepository = fastapi.Depends(get_repository),
) -> dict[str, typing.Any]:
    """Apply admin changes. Marking a request QUOTED emails the client."""
    existing = repository.get(quote_id)
    if existing is None:
        raise fastapi.HTTPException(status_code=404, detail='Quote request not found')
    previous_status = existing.status

    quote_request = repository.update(quote_id, data)
    if quote_request is None:
        raise fastapi.HTTPException(status_code=404, detail='Quote request not found')
    notify_if_newly_quoted(quote_request, previous_status)
    return {'success': True, 'data': quote_request.model_dump()}


@router.delete('/{quote_id}')
async def delete_quote_request(
    quote_id: int,
    repository: services.QuoteRequestRepository = fastapi.Depends(get_repository),
) -> dict[str, typing.Any]:
    if not repository.delete(quote_id):
        raise fastapi.HTTPException(status_code=404, detail='Quote request not found')
    return {'success': True}
