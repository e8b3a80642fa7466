"""Settings for local development and tests."""

from server.settings.components import config

DEBUG = True

# Never used outside of development
SECRET_KEY = config(
    'DJANGO_SECRET_KEY',
    default='development-only-insecure-secret-key',
)

ALLOWED_HOSTS = [
    'localhost',
    '0.0.0.0',  # noqa: S104
    '127.0.0.1',
    'testserver',
]
