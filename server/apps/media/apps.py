"""Django app configuration for media app."""

from django.apps import AppConfig


class MediaConfig(AppConfig):
    """Configuration for media app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.media'
    verbose_name = 'Media manager'
