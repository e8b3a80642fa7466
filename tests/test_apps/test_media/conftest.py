"""Shared fixtures for media app tests."""

import boto3
import pytest
from moto import mock_aws

from server.apps.media.infrastructure.storage import (
    FileStorage,
    LocalFileStorage,
)
from server.apps.media.logic.media_manager import MediaManager

_BASE_URL = 'http://testserver'
_MEDIA_URL = 'http://testserver/media/'


@pytest.fixture
def media_root(tmp_path):
    """Empty directory used as the disk root.

    Returns:
        Path of the disk root.
    """
    root = tmp_path / 'media'
    root.mkdir()
    return root


@pytest.fixture
def disk(media_root):
    """Local disk rooted at media_root.

    Returns:
        LocalFileStorage instance.
    """
    return LocalFileStorage(location=str(media_root), base_url=_MEDIA_URL)


@pytest.fixture
def manager(disk):
    """Media manager over the local test disk.

    Returns:
        MediaManager instance.
    """
    return MediaManager(disk=disk, base_url=_BASE_URL)


@pytest.fixture
def make_file(media_root):
    """Factory writing a file below the disk root.

    Returns:
        Callable taking a media path and optional content.
    """
    def factory(path, content=b'test file content'):
        target = media_root / path.lstrip('/')
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        return target

    return factory


@pytest.fixture
def make_folder(media_root):
    """Factory creating a directory below the disk root.

    Returns:
        Callable taking a media path.
    """
    def factory(path):
        target = media_root / path.lstrip('/')
        target.mkdir(parents=True, exist_ok=True)
        return target

    return factory


@pytest.fixture
def configured_disk(settings, media_root):
    """Point the default disk used by views and commands at media_root.

    Returns:
        Path of the disk root.
    """
    settings.STORAGES = {
        'default': {
            'BACKEND': (
                'server.apps.media.infrastructure.storage.LocalFileStorage'
            ),
            'OPTIONS': {
                'location': str(media_root),
                'base_url': _MEDIA_URL,
            },
        },
        'staticfiles': {
            'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
        },
    }
    settings.MEDIA_MANAGER_DISK = 'default'
    settings.MEDIA_MANAGER_BASE_URL = _BASE_URL
    return media_root


@pytest.fixture
def mock_s3():
    """Mock S3 service with media bucket.

    Yields:
        boto3 S3 resource with media bucket created.
    """
    with mock_aws():
        # Create S3 resource
        conn = boto3.resource('s3', region_name='us-east-1')

        # Create bucket
        conn.create_bucket(Bucket='media')

        yield conn


@pytest.fixture
def s3_disk(mock_s3):
    """S3 disk backed by the mocked bucket.

    Returns:
        FileStorage instance.
    """
    return FileStorage(
        bucket_name='media',
        access_key='testing',
        secret_key='testing',
        region_name='us-east-1',
    )
