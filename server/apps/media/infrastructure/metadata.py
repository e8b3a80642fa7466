"""MIME type lookup by file extension."""

import mimetypes
from pathlib import PurePosixPath
from typing import Final

from django.conf import settings

UNKNOWN_MIME_TYPE: Final = 'unknown/type'

# Python's bundled table only, independent of the host's mime.types
_MIME_DATABASE: Final = mimetypes.MimeTypes()


def get_file_extension(filename: str) -> str:
    """Get file extension from filename.

    Args:
        filename: Filename or path (e.g., '/docs/document.PDF').

    Returns:
        Extension without dot, lowercase (e.g., 'pdf').
        Returns empty string if no extension.
    """
    extension = PurePosixPath(filename).suffix
    return extension.lstrip('.').lower()


def find_mime_type(extension: str) -> str | None:
    """Look an extension up in the MIME database.

    ``MEDIA_MANAGER_MIME_TYPES`` entries take precedence over the
    bundled table.

    Args:
        extension: Extension without dot (e.g., 'pdf').

    Returns:
        MIME type string, or None if the extension is not registered.
    """
    extension = extension.lower()
    if not extension:
        return None

    extra_types = getattr(settings, 'MEDIA_MANAGER_MIME_TYPES', {})
    if extension in extra_types:
        return extra_types[extension]

    suffix = f'.{extension}'
    strict_types, common_types = _MIME_DATABASE.types_map
    return strict_types.get(suffix) or common_types.get(suffix)


def detect_mime_type(path: str) -> str:
    """Detect MIME type of a file from its extension.

    Args:
        path: File path (e.g., '/docs/report.pdf').

    Returns:
        MIME type string (e.g., 'application/pdf').
        Returns 'unknown/type' if type cannot be determined.
    """
    mime_type = find_mime_type(get_file_extension(path))
    if mime_type is None:
        return UNKNOWN_MIME_TYPE
    return mime_type
