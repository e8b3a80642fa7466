"""Media manager settings."""

from server.settings.components import config

# Alias in STORAGES used as the managed disk
MEDIA_MANAGER_DISK = config('MEDIA_MANAGER_DISK', default='default')

# Application origin, stripped from public URLs to build relative paths
MEDIA_MANAGER_BASE_URL = config('APP_URL', default='')

# Extra extension -> MIME type mappings, e.g. {'heic': 'image/heic'}
MEDIA_MANAGER_MIME_TYPES: dict[str, str] = {}
