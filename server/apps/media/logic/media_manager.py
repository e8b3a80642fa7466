"""Media manager: browse and manage files on a storage disk.

The manager is a thin layer over a ``DirectoryStorage`` disk. It
sanitizes paths, filters hidden items, builds listings and breadcrumbs
and checks for name collisions before anything is created, moved or
deleted.

Failures are never raised. Every mutating call returns a result that
carries its own messages, and the manager also keeps all messages of
its lifetime in ``errors`` (one manager per request).
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import final

from django.conf import settings
from django.core.files.storage import storages
from django.core.files.uploadedfile import UploadedFile
from django.utils import timezone
from django.utils.translation import gettext

from server.apps.media.exceptions import MediaManagerConfigurationError
from server.apps.media.infrastructure.metadata import detect_mime_type
from server.apps.media.infrastructure.paths import (
    ROOT_LABEL,
    ROOT_PATH,
    basename,
    breadcrumbs,
    clean_folder,
    collapse_url_slashes,
    is_hidden,
    is_inside,
    join_path,
    pop_last_crumb,
    relative_url,
    starts_hidden,
    to_media_path,
    to_storage_name,
)
from server.apps.media.infrastructure.storage import DirectoryStorage
from server.apps.media.logic.results import (
    FileEntry,
    FolderEntry,
    FolderInfo,
    OperationResult,
    UploadResult,
)

logger = logging.getLogger(__name__)

# Indentation unit of the directory picker: 4 non-breaking spaces per level
_PICKER_INDENT = '\u00a0' * 4


@final
class MediaManager:
    """Browse and manage the files of one disk."""

    def __init__(
        self,
        disk: DirectoryStorage | None = None,
        base_url: str | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            disk: Storage to manage. Defaults to the STORAGES alias named
                by ``MEDIA_MANAGER_DISK``.
            base_url: Application origin stripped from public URLs.
                Defaults to ``MEDIA_MANAGER_BASE_URL``.

        Raises:
            MediaManagerConfigurationError: If the disk cannot manage
                directories.
        """
        if disk is None:
            disk_alias = settings.MEDIA_MANAGER_DISK
            disk = storages[disk_alias]
            if not isinstance(disk, DirectoryStorage):
                raise MediaManagerConfigurationError(disk_alias, type(disk))
        if base_url is None:
            base_url = settings.MEDIA_MANAGER_BASE_URL

        self._disk = disk
        self._base_url = base_url
        self._errors: list[str] = []

    @property
    def errors(self) -> list[str]:
        """All error messages produced by this manager, oldest first."""
        return list(self._errors)

    def reset_errors(self) -> None:
        """Forget collected error messages."""
        self._errors.clear()

    def folder_info(self, folder: str = ROOT_PATH) -> FolderInfo:
        """Return files and directories within a folder.

        Hidden items (names starting with a dot) are skipped. A missing
        folder is listed as empty.

        Args:
            folder: Folder path, sanitized before use.

        Returns:
            FolderInfo with breadcrumbs, subfolders and files.
        """
        folder = clean_folder(folder)
        crumbs = breadcrumbs(folder)
        folder_name = pop_last_crumb(crumbs)
        name = to_storage_name(folder)

        sub_folders = [
            self._folder_details(directory)
            for directory in self._disk.directories(name)
            if not is_hidden(directory)
        ]
        files = [
            self._file_details(path)
            for path in self._disk.files(name)
            if not is_hidden(path)
        ]
        logger.debug(
            'Listed folder %s: %d folders, %d files',
            folder,
            len(sub_folders),
            len(files),
        )

        return FolderInfo(
            folder=folder,
            folder_name=folder_name,
            bread_crumbs=crumbs,
            sub_folders=sub_folders,
            files=files,
        )

    def file_mime_type(self, path: str) -> str:
        """Return the MIME type of a file, 'unknown/type' if unregistered."""
        return detect_mime_type(path)

    def file_size(self, path: str) -> int:
        """Return the file size in bytes."""
        return self._disk.size(to_storage_name(path))

    def file_modified(self, path: str) -> datetime:
        """Return the last modified time of a file or folder.

        Not every disk can report timestamps (S3 directory prefixes,
        missing items). In that case the current time is returned
        instead of failing the whole listing.

        Args:
            path: Item path.

        Returns:
            Last modified time, or now when it cannot be read.
        """
        try:
            return self._disk.get_modified_time(to_storage_name(path))
        except Exception:
            logger.debug('No modified time for %s, using now', path)
            return timezone.now()

    def file_webpath(self, path: str) -> str:
        """Return the public URL of a file."""
        return collapse_url_slashes(self._disk.url(to_storage_name(path)))

    def file_relative_path(self, path: str) -> str:
        """Return the public URL of a file without the application origin."""
        return relative_url(self.file_webpath(path), self._base_url)

    def create_directory(self, folder: str) -> OperationResult:
        """Create a new directory.

        Args:
            folder: Path of the directory to create.

        Returns:
            Result, failed if the path is already taken.
        """
        folder = clean_folder(folder)
        if self._disk.exists(to_storage_name(folder)):
            return self._fail(f'Folder "{folder}" already exists.')

        return self._outcome(
            self._disk.make_directory(to_storage_name(folder)),
        )

    def delete_directory(self, folder: str) -> OperationResult:
        """Delete an empty directory.

        Args:
            folder: Path of the directory to delete.

        Returns:
            Result, failed if the directory still has content.
        """
        folder = clean_folder(folder)
        if not self._disk.is_empty_directory(to_storage_name(folder)):
            return self._fail('The directory must be empty to delete it.')

        return self._outcome(
            self._disk.delete_directory(to_storage_name(folder)),
        )

    def delete_file(self, path: str) -> OperationResult:
        """Delete a file.

        Args:
            path: Path of the file to delete.

        Returns:
            Result, failed if the file does not exist.
        """
        path = clean_folder(path)
        if not self._disk.exists(to_storage_name(path)):
            return self._fail('File does not exist.')

        return self._outcome(self._disk.delete_file(to_storage_name(path)))

    def rename(
        self,
        path: str,
        original_name: str,
        new_name: str,
    ) -> OperationResult:
        """Rename an item inside its folder.

        Args:
            path: Folder holding the item.
            original_name: Current item name.
            new_name: New item name.

        Returns:
            Result, failed if an item named ``new_name`` already exists.
        """
        folder = clean_folder(path)
        target = join_path(folder, new_name)
        if self._disk.exists(to_storage_name(target)):
            return self._fail(
                f'The file "{new_name}" already exists in this folder.',
            )

        return self._outcome(
            self._disk.move(
                to_storage_name(join_path(folder, original_name)),
                to_storage_name(target),
            ),
        )

    def all_directories(self) -> dict[str, str]:
        """Show all directories that an item can be moved to.

        Returns:
            Ordered mapping of path to indented label, root first.
        """
        directories = {ROOT_PATH: ROOT_LABEL}
        for name in self._disk.all_directories():
            if starts_hidden(name):
                continue
            directory = to_media_path(name)
            depth = len(directory.split('/'))
            directories[directory] = (
                _PICKER_INDENT * depth + basename(directory)
            )
        return directories

    def move_file(self, current_file: str, new_file: str) -> OperationResult:
        """Move a file to a new path.

        Args:
            current_file: Current file path.
            new_file: Destination file path.

        Returns:
            Result, failed if the destination is taken.
        """
        current_file = clean_folder(current_file)
        new_file = clean_folder(new_file)
        if self._disk.exists(to_storage_name(new_file)):
            return self._fail('File already exists.')

        return self._outcome(
            self._disk.move(
                to_storage_name(current_file),
                to_storage_name(new_file),
            ),
        )

    def move_folder(
        self,
        current_folder: str,
        new_folder: str,
    ) -> OperationResult:
        """Move a folder to a new path.

        Args:
            current_folder: Current folder path.
            new_folder: Destination folder path.

        Returns:
            Result, failed if the destination is the folder itself or
            lies inside it.
        """
        current_folder = clean_folder(current_folder)
        new_folder = clean_folder(new_folder)
        if new_folder == current_folder:
            return self._fail(
                'Please select another folder to move this folder into.',
            )

        if is_inside(current_folder, new_folder):
            return self._fail('You can not move this folder inside of itself.')

        return self._outcome(
            self._disk.move(
                to_storage_name(current_folder),
                to_storage_name(new_folder),
            ),
        )

    def save_uploaded_files(
        self,
        files: Iterable[UploadedFile],
        path: str = ROOT_PATH,
    ) -> UploadResult:
        """Save files uploaded during a request to a folder.

        Files are stored under their client filename, sanitized like any
        other path. A file whose name is already taken in the folder is
        skipped.

        Args:
            files: Uploaded files, in the order they should be stored.
            path: Destination folder.

        Returns:
            UploadResult with the number of stored files.
        """
        folder = clean_folder(path)
        uploaded = 0
        messages: list[str] = []
        for upload in files:
            target = join_path(folder, upload.name)
            file_name = basename(target)
            if self._disk.exists(to_storage_name(target)):
                logger.warning('Upload rejected, %s already exists', target)
                messages.append(f'File {target} already exists in this folder.')
                continue

            if not self._disk.store_upload(
                to_storage_name(folder),
                file_name,
                upload,
            ):
                messages.append(
                    gettext('There was an error uploading "%(entity)s".') % {
                        'entity': file_name,
                    },
                )
                continue
            uploaded += 1

        self._errors.extend(messages)
        logger.info('Uploaded %d files to %s', uploaded, folder)
        return UploadResult(count=uploaded, messages=tuple(messages))

    def _folder_details(self, name: str) -> FolderEntry:
        path = to_media_path(name)
        return FolderEntry(
            name=basename(path),
            full_path=path,
            modified=self.file_modified(path),
        )

    def _file_details(self, name: str) -> FileEntry:
        path = to_media_path(name)
        return FileEntry(
            name=basename(path),
            full_path=path,
            web_path=self.file_webpath(path),
            mime_type=self.file_mime_type(path),
            size=self.file_size(path),
            modified=self.file_modified(path),
            relative_path=self.file_relative_path(path),
        )

    def _fail(self, message: str) -> OperationResult:
        logger.warning('Media operation rejected: %s', message)
        self._errors.append(message)
        return OperationResult(success=False, messages=(message,))

    def _outcome(self, success: bool) -> OperationResult:
        return OperationResult(success=success)
