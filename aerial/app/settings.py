"""Settings for the aerial photography site, read from environment variables."""

import os

DATA_DIR: str = os.environ.get('DATA_DIR', 'data')
DATABASE_URL: str = os.environ.get('DATABASE_URL', f'sqlite:///{DATA_DIR}/aerial.db')

# Which MetadataStore to build at startup: 'database' or 'stub'.
STORE_BACKEND: str = os.environ.get('STORE_BACKEND', 'database').lower()

SITE_NAME: str = os.environ.get('SITE_NAME', 'All Around Photos LLC')
PHOTOGRAPHER_EMAIL: str = os.environ.get(
    'PHOTOGRAPHER_EMAIL', 'photographer@allaroundphotos.com'
)
CONTACT_PHONE: str = os.environ.get('CONTACT_PHONE', '(555) 123-4567')
CONTACT_EMAIL: str = os.environ.get('CONTACT_EMAIL', 'info@allaroundphotos.com')
