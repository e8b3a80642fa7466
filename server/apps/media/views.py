"""JSON endpoints of the media browser.

Each request builds its own ``MediaManager``, so error messages never
leak between requests. Operation failures are reported with HTTP 200
and ``success: false``; missing parameters are HTTP 400.
"""

import logging
from typing import Final

from django.http import HttpRequest, JsonResponse, QueryDict
from django.views.decorators.http import require_GET, require_POST

from server.apps.media.infrastructure.paths import ROOT_PATH
from server.apps.media.logic.media_manager import MediaManager

logger = logging.getLogger(__name__)

_HTTP_BAD_REQUEST: Final = 400
_MOVE_TYPES: Final = frozenset(('file', 'folder'))


def _missing(params: QueryDict, *names: str) -> list[str]:
    return [name for name in names if not params.get(name)]


def _bad_request(messages: list[str]) -> JsonResponse:
    return JsonResponse(
        {'success': False, 'errors': messages},
        status=_HTTP_BAD_REQUEST,
    )


def _missing_parameters(names: list[str]) -> JsonResponse:
    logger.warning('Media request missing parameters: %s', ', '.join(names))
    return _bad_request([
        f'The "{name}" parameter is required.' for name in names
    ])


@require_GET
def folder_info(request: HttpRequest) -> JsonResponse:
    """List a folder: ``?path=/docs``."""
    info = MediaManager().folder_info(request.GET.get('path', ROOT_PATH))
    return JsonResponse({'success': True, 'errors': [], **info.to_json()})


@require_GET
def all_directories(request: HttpRequest) -> JsonResponse:
    """Directory picker used by the move dialog."""
    return JsonResponse({
        'success': True,
        'errors': [],
        'directories': MediaManager().all_directories(),
    })


@require_POST
def create_folder(request: HttpRequest) -> JsonResponse:
    """Create a folder: ``folder``."""
    missing = _missing(request.POST, 'folder')
    if missing:
        return _missing_parameters(missing)

    result = MediaManager().create_directory(request.POST['folder'])
    return JsonResponse(result.to_json())


@require_POST
def delete_folder(request: HttpRequest) -> JsonResponse:
    """Delete an empty folder: ``folder``."""
    missing = _missing(request.POST, 'folder')
    if missing:
        return _missing_parameters(missing)

    result = MediaManager().delete_directory(request.POST['folder'])
    return JsonResponse(result.to_json())


@require_POST
def delete_file(request: HttpRequest) -> JsonResponse:
    """Delete a file: ``path``."""
    missing = _missing(request.POST, 'path')
    if missing:
        return _missing_parameters(missing)

    result = MediaManager().delete_file(request.POST['path'])
    return JsonResponse(result.to_json())


@require_POST
def rename(request: HttpRequest) -> JsonResponse:
    """Rename an item: ``path`` (folder), ``original``, ``new_name``."""
    missing = _missing(request.POST, 'original', 'new_name')
    if missing:
        return _missing_parameters(missing)

    result = MediaManager().rename(
        request.POST.get('path', ROOT_PATH),
        request.POST['original'],
        request.POST['new_name'],
    )
    return JsonResponse(result.to_json())


@require_POST
def move(request: HttpRequest) -> JsonResponse:
    """Move an item: ``current``, ``new`` and ``type`` (file or folder)."""
    missing = _missing(request.POST, 'current', 'new')
    if missing:
        return _missing_parameters(missing)

    item_type = request.POST.get('type', 'file')
    if item_type not in _MOVE_TYPES:
        return _bad_request([f'Unknown item type "{item_type}".'])

    manager = MediaManager()
    if item_type == 'folder':
        result = manager.move_folder(
            request.POST['current'],
            request.POST['new'],
        )
    else:
        result = manager.move_file(request.POST['current'], request.POST['new'])
    return JsonResponse(result.to_json())


@require_POST
def upload(request: HttpRequest) -> JsonResponse:
    """Store uploaded ``files`` in ``folder``."""
    files = request.FILES.getlist('files')
    if not files:
        return _missing_parameters(['files'])

    result = MediaManager().save_uploaded_files(
        files,
        request.POST.get('folder', ROOT_PATH),
    )
    return JsonResponse(result.to_json())
