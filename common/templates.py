"""Factory for creating Jinja2Templates with standard site globals."""

import datetime
import pathlib
from typing import Any

import fastapi.templating

import common.settings

DATE_FORMAT = '%b %d, %Y'


def datefmt(value: datetime.date | None, fmt: str = DATE_FORMAT) -> str:
    """Format a date for display; missing dates read 'Not specified'."""
    if not value:
        return 'Not specified'
    return value.strftime(fmt)


def make_templates(
    directory: pathlib.Path | str,
    **extra_globals: Any,
) -> fastapi.templating.Jinja2Templates:
    """Create a Jinja2Templates instance with domain and home_url globals pre-set.

    Any keyword arguments are added as additional template globals. A ``datefmt``
    filter is registered for dates.
    """
    templates = fastapi.templating.Jinja2Templates(directory=str(directory))
    env_globals = templates.env.globals  # type: ignore[reportUnknownMemberType]
    env_globals['domain'] = common.settings.DOMAIN
    env_globals['home_url'] = common.settings.HOME_URL
    env_globals['current_year'] = datetime.datetime.now(datetime.UTC).year
    env_globals.update(extra_globals)
    templates.env.filters['datefmt'] = datefmt  # type: ignore[reportUnknownMemberType]
    return templates
