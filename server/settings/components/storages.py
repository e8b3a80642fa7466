"""Django storage configuration for the media manager disks.

Two backends are supported:
- Local filesystem storage under ``MEDIA_ROOT`` (default)
- S3-compatible storage (MinIO, Cloudflare R2, AWS) via django-storages

``MEDIA_MANAGER_BACKEND=s3`` switches the default disk to S3.
"""

from typing import Any, Final

from server.settings.components import config
from server.settings.components.common import MEDIA_ROOT, MEDIA_URL

_BACKEND: Final = config('MEDIA_MANAGER_BACKEND', default='local')

if _BACKEND == 's3':
    _DEFAULT_STORAGE: dict[str, Any] = {
        'BACKEND': 'server.apps.media.infrastructure.storage.FileStorage',
        'OPTIONS': {
            'bucket_name': config('AWS_STORAGE_BUCKET_NAME'),
            'access_key': config('AWS_ACCESS_KEY_ID'),
            'secret_key': config('AWS_SECRET_ACCESS_KEY'),
            'endpoint_url': config(
                'AWS_S3_ENDPOINT_URL',
                default=None,
            ),
            'region_name': config(
                'AWS_S3_REGION_NAME',
                default='auto',
            ),
            'file_overwrite': False,  # Prevent accidental overwrites
            'default_acl': None,  # Inherit bucket ACL
        },
    }
else:
    _DEFAULT_STORAGE = {
        'BACKEND': (
            'server.apps.media.infrastructure.storage.LocalFileStorage'
        ),
        'OPTIONS': {
            'location': MEDIA_ROOT,
            'base_url': MEDIA_URL,
        },
    }

STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': _DEFAULT_STORAGE,
    'staticfiles': {
        # Keep static files separate from managed media
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
