"""FastAPI app factory shared by the site's services."""

import pathlib
from typing import Any

import fastapi
import fastapi.staticfiles

import common.log

_health_router = fastapi.APIRouter()


@_health_router.api_route('/health', methods=['GET', 'HEAD'])
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {'status': 'healthy'}


def create_app(
    title: str,
    static_dir: pathlib.Path | str | None = None,
    **kwargs: Any,
) -> fastapi.FastAPI:
    """Create a FastAPI app with logging configured and a /health endpoint.

    When *static_dir* is given it is served under ``/static`` (route name
    ``static``). Additional keyword arguments are forwarded to
    FastAPI.__init__ (e.g. lifespan).
    """
    common.log.configure_logging()
    app = fastapi.FastAPI(title=title, **kwargs)
    app.include_router(_health_router)
    if static_dir is not None:
        app.mount(
            '/static',
            fastapi.staticfiles.StaticFiles(directory=static_dir),
            name='static',
        )
    return app
