"""Path helpers for the media manager.

Media manager paths are what users see: ``/documents/report.pdf``.
They are always rooted at ``/``. Storage names are the same paths
without the leading separator (``documents/report.pdf``), which is
what Django storages expect.
"""

import re
from typing import Final

ROOT_PATH: Final = '/'
ROOT_LABEL: Final = 'Root'

_PATH_SEPARATOR: Final = '/'
_PARENT_REFERENCE: Final = '..'
_HIDDEN_PREFIX: Final = '.'

_REPEATED_SEPARATORS: Final = re.compile('/{2,}')
# Keeps the two slashes that follow a URL scheme (``https://``)
_URL_DUPLICATE_SLASHES: Final = re.compile('([^:])(/{2,})')


def clean_folder(folder: str) -> str:
    """Sanitize a user supplied path.

    Every ``..`` is removed, repeated separators are collapsed and the
    result is rooted at a single ``/``.

    Args:
        folder: Raw path (e.g., ``docs/../../etc//``).

    Returns:
        Clean path (e.g., ``/docs/etc``). Returns ``/`` for empty input.
    """
    cleaned = folder.replace(_PARENT_REFERENCE, '')
    cleaned = _REPEATED_SEPARATORS.sub(_PATH_SEPARATOR, cleaned)
    return _PATH_SEPARATOR + cleaned.strip(_PATH_SEPARATOR)


def breadcrumbs(folder: str) -> dict[str, str]:
    """Build breadcrumbs leading to a folder.

    The first crumb is always the root. The last crumb is the folder
    itself, callers pop it to get the folder display name.

    Args:
        folder: Clean folder path (e.g., ``/a/b``).

    Returns:
        Ordered mapping of path to label
        (e.g., ``{'/': 'Root', '/a': 'a', '/a/b': 'b'}``).
    """
    crumbs = {ROOT_PATH: ROOT_LABEL}
    path = ''
    for segment in folder.strip(_PATH_SEPARATOR).split(_PATH_SEPARATOR):
        if not segment:
            continue
        path = f'{path}{_PATH_SEPARATOR}{segment}'
        crumbs[path] = segment
    return crumbs


def pop_last_crumb(crumbs: dict[str, str]) -> str:
    """Remove the last breadcrumb and return its label."""
    _, label = crumbs.popitem()
    return label


def basename(path: str) -> str:
    """Get the last segment of a path.

    Returns:
        Name component, empty string for the root path.
    """
    return path.rstrip(_PATH_SEPARATOR).rsplit(_PATH_SEPARATOR, 1)[-1]


def join_path(folder: str, name: str) -> str:
    """Join a folder and an item name into a clean path."""
    return clean_folder(f'{folder}{_PATH_SEPARATOR}{name}')


def to_storage_name(path: str) -> str:
    """Convert a media manager path to a Django storage name."""
    return path.strip(_PATH_SEPARATOR)


def to_media_path(name: str) -> str:
    """Convert a Django storage name to a media manager path."""
    return _PATH_SEPARATOR + name.lstrip(_PATH_SEPARATOR)


def is_hidden(path: str) -> bool:
    """Check if an item is hidden (its name begins with a dot)."""
    return path.rsplit(_PATH_SEPARATOR, 1)[-1].startswith(_HIDDEN_PREFIX)


def starts_hidden(path: str) -> bool:
    """Check if a path begins with a hidden item (e.g., `.git/objects`)."""
    return path.lstrip(_PATH_SEPARATOR).startswith(_HIDDEN_PREFIX)


def is_inside(folder: str, candidate: str) -> bool:
    """Check if ``candidate`` lies below ``folder``.

    Containment is checked per path segment: ``/a/b`` is inside ``/a``,
    ``/ab`` is not.
    """
    prefix = folder.rstrip(_PATH_SEPARATOR) + _PATH_SEPARATOR
    return candidate.startswith(prefix)


def collapse_url_slashes(url: str) -> str:
    """Remove duplicate slashes from a URL, keeping ``scheme://``."""
    return _URL_DUPLICATE_SLASHES.sub(r'\1/', url)


def relative_url(url: str, base_url: str) -> str:
    """Strip the application origin from a URL.

    Args:
        url: Absolute public URL of a file.
        base_url: Application base URL (e.g., ``https://example.com``).

    Returns:
        URL without the base prefix and with spaces encoded as ``%20``.
    """
    if base_url:
        url = url.removeprefix(base_url)
    return url.replace(' ', '%20')
