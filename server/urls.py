"""Main URL mapping configuration file."""

from django.urls import include, path

urlpatterns = [
    path('browser/', include('server.apps.media.urls')),
]
