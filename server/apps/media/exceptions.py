"""Exceptions for media app."""

from django.core.exceptions import ImproperlyConfigured


class MediaManagerConfigurationError(ImproperlyConfigured):
    """Raised when the configured disk cannot manage directories."""

    def __init__(self, disk_alias: str, backend: type) -> None:
        """Initialize MediaManagerConfigurationError.

        Args:
            disk_alias: Alias of the disk in STORAGES.
            backend: Class of the configured storage backend.
        """
        self.disk_alias = disk_alias
        self.backend = backend
        super().__init__(
            f'Storage "{disk_alias}" ({backend.__qualname__}) does not '
            'support directory operations, use LocalFileStorage or '
            'FileStorage from server.apps.media.infrastructure.storage',
        )
