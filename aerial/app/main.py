"""FastAPI application for the All Around Photos marketing site."""

import contextlib
import logging
import math
import pathlib
import typing

import fastapi
import fastapi.exception_handlers
import fastapi.responses
import starlette.exceptions
import uvicorn

import common.app
import common.templates

from . import catalog, database, placeholders, settings
from .metadata import display
from .metadata.serializer import MetadataSerializationError
from .photos import models as photo_models
from .photos import routes as photo_routes
from .photos import store
from .quotes import models as quote_models
from .quotes import routes as quote_routes
from .quotes import services as quote_services

logger = logging.getLogger(__name__)

APP_DIR = pathlib.Path(__file__).resolve().parent

FEATURED_PHOTO_COUNT = 6
ADMIN_PAGE_SIZE = 20


@contextlib.asynccontextmanager
async def lifespan(app: fastapi.FastAPI) -> typing.AsyncGenerator[None, None]:
    """Create tables and pick the metadata store once at startup."""
    database.create_db_and_tables()
    app.state.metadata_store = store.select_metadata_store(settings.STORE_BACKEND)
    yield


app = common.app.create_app(
    settings.SITE_NAME, static_dir=APP_DIR / 'static', lifespan=lifespan
)

templates = common.templates.make_templates(
    APP_DIR / 'templates',
    site_name=settings.SITE_NAME,
    contact_phone=settings.CONTACT_PHONE,
    contact_email=settings.CONTACT_EMAIL,
)

app.include_router(photo_routes.router)
app.include_router(quote_routes.router)
app.include_router(placeholders.router)

MetadataStoreDep = typing.Annotated[
    store.MetadataStore, fastapi.Depends(photo_routes.get_metadata_store)
]


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


@app.exception_handler(MetadataSerializationError)
async def metadata_serialization_error_handler(
    request: fastapi.Request, exc: MetadataSerializationError
) -> fastapi.responses.JSONResponse:
    logger.error('Metadata serialization failed for %s %s', request.method, request.url.path)
    return fastapi.responses.JSONResponse(status_code=500, content={'detail': str(exc)})


@app.exception_handler(starlette.exceptions.HTTPException)
async def not_found_handler(
    request: fastapi.Request, exc: starlette.exceptions.HTTPException
) -> fastapi.responses.Response:
    """Render the HTML 404 page for site pages; API errors stay JSON."""
    if exc.status_code != 404 or request.url.path.startswith('/api/'):
        return await fastapi.exception_handlers.http_exception_handler(request, exc)
    return templates.TemplateResponse(
        request=request, name='not_found.html.jinja2', status_code=404
    )


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def gallery_items(photos: list[photo_models.Photo]) -> list[dict[str, typing.Any]]:
    """Pair each photo with its display metadata and a placeholder image."""
    return [
        {
            'photo': photo,
            'display': display.extract_display(store.read_metadata(photo)),
            'placeholder_url': f'/placeholder/{photo.category.lower()}/{index}.svg',
        }
        for index, photo in enumerate(photos)
    ]


@app.get('/', response_class=fastapi.responses.HTMLResponse)
async def home(
    request: fastapi.Request, metadata_store: MetadataStoreDep
) -> fastapi.responses.HTMLResponse:
    """Render the landing page."""
    featured = metadata_store.list_photos(is_public=True, limit=FEATURED_PHOTO_COUNT)
    return templates.TemplateResponse(
        request=request,
        name='home.html.jinja2',
        context={
            'services': catalog.SERVICES,
            'testimonials': catalog.TESTIMONIALS,
            'max_rating': catalog.MAX_RATING,
            'featured': gallery_items(featured),
        },
    )


@app.get('/about', response_class=fastapi.responses.HTMLResponse)
async def about(request: fastapi.Request) -> fastapi.responses.HTMLResponse:
    return templates.TemplateResponse(request=request, name='about.html.jinja2')


@app.get('/services', response_class=fastapi.responses.HTMLResponse)
async def services_page(request: fastapi.Request) -> fastapi.responses.HTMLResponse:
    return templates.TemplateResponse(
        request=request, name='services.html.jinja2', context={'services': catalog.SERVICES}
    )


@app.get('/gallery', response_class=fastapi.responses.HTMLResponse)
async def gallery(
    request: fastapi.Request,
    metadata_store: MetadataStoreDep,
    category: photo_models.PhotoCategory | None = None,
) -> fastapi.responses.HTMLResponse:
    """Render public photos, optionally for one category."""
    photos = metadata_store.list_photos(category=category, is_public=True)
    return templates.TemplateResponse(
        request=request,
        name='gallery.html.jinja2',
        context={
            'items': gallery_items(photos),
            'categories': list(photo_models.PhotoCategory),
            'counts': metadata_store.photo_counts(),
            'selected': category,
            'all_key': store.ALL,
        },
    )


def _quote_form_context(service: str | None) -> dict[str, typing.Any]:
    selected = service if service in set(quote_models.QuoteServiceType) else None
    return {
        'service_types': list(quote_models.QuoteServiceType),
        'session_types': {
            service_type.value: options
            for service_type, options in quote_models.SESSION_TYPES.items()
        },
        'timelines': list(quote_models.Timeline),
        'budgets': list(quote_models.BudgetRange),
        'selected_service': selected,
    }


@app.get('/quote', response_class=fastapi.responses.HTMLResponse)
async def quote(
    request: fastapi.Request, service: str | None = None
) -> fastapi.responses.HTMLResponse:
    """Render the quote request form, preselecting ``service`` when valid."""
    return templates.TemplateResponse(
        request=request, name='quote.html.jinja2', context=_quote_form_context(service)
    )


@app.get('/book', response_class=fastapi.responses.HTMLResponse)
async def book(
    request: fastapi.Request, service: str | None = None
) -> fastapi.responses.HTMLResponse:
    """Render the booking page: the quote form with a preferred date."""
    return templates.TemplateResponse(
        request=request, name='book.html.jinja2', context=_quote_form_context(service)
    )


@app.get('/contact', response_class=fastapi.responses.HTMLResponse)
async def contact(request: fastapi.Request) -> fastapi.responses.HTMLResponse:
    return templates.TemplateResponse(request=request, name='contact.html.jinja2')


@app.get('/privacy', response_class=fastapi.responses.HTMLResponse)
async def privacy(request: fastapi.Request) -> fastapi.responses.HTMLResponse:
    return templates.TemplateResponse(request=request, name='privacy.html.jinja2')


@app.get('/terms', response_class=fastapi.responses.HTMLResponse)
async def terms(request: fastapi.Request) -> fastapi.responses.HTMLResponse:
    return templates.TemplateResponse(request=request, name='terms.html.jinja2')


QuoteRepositoryDep = typing.Annotated[
    quote_services.QuoteRequestRepository, fastapi.Depends(quote_routes.get_repository)
]


@app.get('/admin/quote-requests', response_class=fastapi.responses.HTMLResponse)
async def admin_quote_requests(
    request: fastapi.Request,
    repository: QuoteRepositoryDep,
    status: quote_models.QuoteStatus | None = None,
    service_type: quote_models.QuoteServiceType | None = None,
    email: typing.Annotated[str | None, fastapi.Query(max_length=255)] = None,
    page: typing.Annotated[int, fastapi.Query(ge=1)] = 1,
) -> fastapi.responses.HTMLResponse:
    """Review incoming quote requests.

    The pending queue (new and reviewed, oldest first) is always shown. An
    ``email`` lookup lists every request from that client instead of the
    paginated table.
    """
    email = email.strip() if email else None
    if email:
        rows = repository.find_by_email(email)
        total = len(rows)
        page = 1
        total_pages = 1
    else:
        rows, total = repository.list_requests(
            page=page, limit=ADMIN_PAGE_SIZE, status=status, service_type=service_type
        )
        total_pages = max(1, math.ceil(total / ADMIN_PAGE_SIZE))
    return templates.TemplateResponse(
        request=request,
        name='admin_quote_requests.html.jinja2',
        context={
            'quote_requests': rows,
            'pending': repository.find_pending(),
            'total': total,
            'page': page,
            'total_pages': total_pages,
            'statuses': list(quote_models.QuoteStatus),
            'service_types': list(quote_models.QuoteServiceType),
            'selected_status': status,
            'selected_service_type': service_type,
            'email': email or '',
            'stats': repository.statistics(),
        },
    )


@app.post('/admin/quote-requests/{quote_id}/status')
async def admin_update_quote_status(
    quote_id: int,
    status: typing.Annotated[quote_models.QuoteStatus, fastapi.Form()],
    repository: QuoteRepositoryDep,
    admin_notes: typing.Annotated[str, fastapi.Form(max_length=2000)] = '',
) -> fastapi.responses.RedirectResponse:
    """Change a request's status from the review page. Marking it QUOTED emails the client."""
    existing = repository.get(quote_id)
    if existing is None:
        raise fastapi.HTTPException(status_code=404, detail='Quote request not found')
    previous_status = existing.status

    quote_request = repository.update_status(
        quote_id, status, admin_notes=admin_notes.strip() or None
    )
    if quote_request is None:
        raise fastapi.HTTPException(status_code=404, detail='Quote request not found')
    quote_routes.notify_if_newly_quoted(quote_request, previous_status)
    logger.info('Quote request %d moved from %s to %s', quote_id, previous_status, status)
    return fastapi.responses.RedirectResponse(
        url='/admin/quote-requests', status_code=fastapi.status.HTTP_302_FOUND
    )


if __name__ == '__main__':
    uvicorn.run(app, host='0.0.0.0', port=8000)
