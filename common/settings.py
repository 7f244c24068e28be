"""Shared application settings read from environment variables."""

import os

DOMAIN: str = os.environ.get('DOMAIN', '.allaroundphotos.com')
HOME_URL: str = 'https://' + DOMAIN[1:]
LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO').upper()
