"""Storage backends (disks) for the media manager.

Django's storage API covers files only. The media manager also needs
directory operations (create, delete, move, recursive listing), so both
backends extend their Django storage with them:
- ``LocalFileStorage`` for the local filesystem
- ``FileStorage`` for S3-compatible storage (MinIO, R2, AWS)

Names passed to these methods are Django storage names, relative to
the storage root ('' is the root).
"""

import logging
import os
import posixpath
import shutil
from typing import Any, ClassVar, Final, final, override

from botocore.exceptions import BotoCoreError, ClientError
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import FileSystemStorage, Storage
from storages.backends.s3 import S3Storage
from storages.utils import clean_name

logger = logging.getLogger(__name__)

_HTTP_NOT_FOUND: Final = 404


class DirectoryStorage(Storage):
    """Storage that can also manage directories.

    Write operations return a success flag instead of raising: provider
    errors listed in ``storage_errors`` are logged and reported as
    ``False``.
    """

    storage_errors: ClassVar[tuple[type[Exception], ...]] = (
        SuspiciousFileOperation,
    )

    def directories(self, name: str) -> list[str]:
        """List immediate subdirectories of a directory.

        Args:
            name: Directory storage name.

        Returns:
            Sorted storage names of subdirectories. Empty for a
            missing directory.
        """
        directories, _ = self._list(name)
        return [posixpath.join(name, directory) for directory in directories]

    def files(self, name: str) -> list[str]:
        """List immediate files of a directory.

        Args:
            name: Directory storage name.

        Returns:
            Sorted storage names of files. Empty for a missing directory.
        """
        _, files = self._list(name)
        return [posixpath.join(name, file_name) for file_name in files]

    def all_directories(self, name: str = '') -> list[str]:
        """List every directory below ``name``, depth first."""
        found: list[str] = []
        for directory in self.directories(name):
            found.append(directory)
            found.extend(self.all_directories(directory))
        return found

    def is_empty_directory(self, name: str) -> bool:
        """Check that a directory holds no files and no subdirectories."""
        directories, files = self._list(name)
        return not directories and not files

    def store_upload(self, directory: str, filename: str, content: Any) -> bool:
        """Save uploaded content under its original filename.

        Args:
            directory: Destination directory storage name.
            filename: Client supplied filename.
            content: Django ``File`` (e.g., an ``UploadedFile``).

        Returns:
            True if the content was stored.
        """
        name = posixpath.join(directory, filename)
        try:
            saved_name = self.save(name, content)
        except self.storage_errors:
            logger.exception('Failed to store upload: %s', name)
            return False
        logger.info('Stored upload: %s', saved_name)
        return True

    def make_directory(self, name: str) -> bool:
        """Create a directory."""
        raise NotImplementedError(
            'subclasses of DirectoryStorage must provide make_directory()',
        )

    def delete_file(self, name: str) -> bool:
        """Delete a file."""
        raise NotImplementedError(
            'subclasses of DirectoryStorage must provide delete_file()',
        )

    def delete_directory(self, name: str) -> bool:
        """Delete a directory with everything inside it."""
        raise NotImplementedError(
            'subclasses of DirectoryStorage must provide delete_directory()',
        )

    def move(self, source: str, destination: str) -> bool:
        """Move or rename a file or a directory."""
        raise NotImplementedError(
            'subclasses of DirectoryStorage must provide move()',
        )

    def _list(self, name: str) -> tuple[list[str], list[str]]:
        try:
            directories, files = self.listdir(name)
        except (FileNotFoundError, NotADirectoryError):
            return [], []
        return sorted(directories), sorted(files)


@final
class LocalFileStorage(DirectoryStorage, FileSystemStorage):
    """Local filesystem disk rooted at ``location`` (``MEDIA_ROOT``)."""

    storage_errors = (OSError, SuspiciousFileOperation)

    @override
    def make_directory(self, name: str) -> bool:
        """Create a directory, including missing parents.

        Args:
            name: Directory storage name.

        Returns:
            True if the directory was created.
        """
        try:
            os.makedirs(self.path(name))
        except self.storage_errors:
            logger.exception('Failed to create directory: %s', name)
            return False
        logger.info('Created directory: %s', name)
        return True

    @override
    def delete_file(self, name: str) -> bool:
        """Delete a file from disk.

        Args:
            name: File storage name.

        Returns:
            True if the file was deleted.
        """
        try:
            os.remove(self.path(name))
        except self.storage_errors:
            logger.exception('Failed to delete file: %s', name)
            return False
        logger.info('Deleted file: %s', name)
        return True

    @override
    def delete_directory(self, name: str) -> bool:
        """Delete a directory tree from disk.

        Args:
            name: Directory storage name.

        Returns:
            True if the directory was deleted.
        """
        try:
            shutil.rmtree(self.path(name))
        except self.storage_errors:
            logger.exception('Failed to delete directory: %s', name)
            return False
        logger.info('Deleted directory: %s', name)
        return True

    @override
    def move(self, source: str, destination: str) -> bool:
        """Move a file or directory, creating missing parent directories.

        Args:
            source: Current storage name.
            destination: New storage name.

        Returns:
            True if the item was moved.
        """
        try:
            destination_path = self.path(destination)
            os.makedirs(os.path.dirname(destination_path), exist_ok=True)
            os.rename(self.path(source), destination_path)
        except self.storage_errors:
            logger.exception('Move failed: %s -> %s', source, destination)
            return False
        logger.info('Moved: %s -> %s', source, destination)
        return True


@final
class FileStorage(DirectoryStorage, S3Storage):
    """S3-compatible disk.

    S3 has no real directories. A directory is a key prefix, created
    empty as a zero-byte ``name/`` marker object. Moves are server-side
    copies followed by deletion of the source keys.
    """

    storage_errors = (ClientError, BotoCoreError, SuspiciousFileOperation)

    @override
    def save(  # noqa: WPS211
        self,
        name: str,
        content: Any,
        max_length: int | None = None,
    ) -> str:
        """Save file to S3 with logging.

        Args:
            name: Storage path for the file.
            content: File content (file-like object).
            max_length: Optional maximum length for the filename.

        Returns:
            Actual storage path used (may differ from name if conflicts).

        Raises:
            ClientError: If S3 upload fails.
        """
        try:
            logger.info('Uploading file to storage: %s', name)
            saved_name = super().save(name, content, max_length)
            logger.info('Successfully uploaded file: %s', saved_name)
        except Exception:
            logger.exception('Failed to upload file to storage: %s', name)
            raise
        else:
            return saved_name

    @override
    def exists(self, name: str) -> bool:
        """Check for an object or a directory prefix.

        Args:
            name: Storage name of a file or directory.

        Returns:
            True if an object with this key or any key below it exists.
            False if the lookup itself failed (e.g., access denied).
        """
        key = self._key(name)
        if not key:
            return True
        try:
            return self._object_exists(key) or self._prefix_exists(key)
        except self.storage_errors:
            logger.exception('Failed to check existence: %s', name)
            return False

    @override
    def listdir(self, name: str) -> tuple[list[str], list[str]]:
        """List a prefix, skipping directory marker objects."""
        directories, files = super().listdir(name)
        return directories, [
            file_name
            for file_name in files
            if file_name not in {'', '.'}
        ]

    @override
    def make_directory(self, name: str) -> bool:
        """Create an empty directory marker.

        Args:
            name: Directory storage name.

        Returns:
            True if the marker object was written.
        """
        try:
            self.bucket.put_object(Key=f'{self._key(name)}/', Body=b'')
        except self.storage_errors:
            logger.exception('Failed to create directory: %s', name)
            return False
        logger.info('Created directory: %s', name)
        return True

    @override
    def delete_file(self, name: str) -> bool:
        """Delete an object from S3.

        Args:
            name: File storage name.

        Returns:
            True if the object was deleted.
        """
        try:
            logger.info('Deleting file from storage: %s', name)
            self.delete(name)
        except self.storage_errors:
            logger.exception('Failed to delete file from storage: %s', name)
            return False
        logger.info('Successfully deleted file: %s', name)
        return True

    @override
    def delete_directory(self, name: str) -> bool:
        """Delete every object below a directory prefix.

        Args:
            name: Directory storage name.

        Returns:
            True if the objects were deleted.
        """
        try:
            self.bucket.objects.filter(Prefix=f'{self._key(name)}/').delete()
        except self.storage_errors:
            logger.exception('Failed to delete directory: %s', name)
            return False
        logger.info('Deleted directory: %s', name)
        return True

    @override
    def move(self, source: str, destination: str) -> bool:
        """Move an object or a whole prefix.

        Note: This operation is not atomic. If a copy succeeds but the
        delete fails, both keys will exist.

        Args:
            source: Current storage name.
            destination: New storage name.

        Returns:
            True if every key was moved.
        """
        source_key = self._key(source)
        destination_key = self._key(destination)
        try:
            logger.info('Moving: %s -> %s', source, destination)
            for key in self._keys_below(source_key):
                copy_source = {
                    'Bucket': self.bucket_name,
                    'Key': key,
                }
                target = destination_key + key[len(source_key):]
                self.bucket.copy(copy_source, target)
                self.bucket.Object(key).delete()
        except self.storage_errors:
            logger.exception('Move failed: %s -> %s', source, destination)
            return False
        logger.info('Moved: %s -> %s', source, destination)
        return True

    def _key(self, name: str) -> str:
        return self._normalize_name(clean_name(name)).rstrip('/')

    def _object_exists(self, key: str) -> bool:
        try:
            self.connection.meta.client.head_object(
                Bucket=self.bucket_name,
                Key=key,
            )
        except ClientError as error:
            status = error.response['ResponseMetadata']['HTTPStatusCode']
            if status == _HTTP_NOT_FOUND:
                return False
            raise
        return True

    def _prefix_exists(self, key: str) -> bool:
        objects = self.bucket.objects.filter(Prefix=f'{key}/').limit(1)
        return any(True for _ in objects)

    def _keys_below(self, key: str) -> list[str]:
        keys = [
            s3_object.key
            for s3_object in self.bucket.objects.filter(Prefix=f'{key}/')
        ]
        if self._object_exists(key):
            keys.append(key)
        return keys
