"""Tests for MIME type lookup."""

from server.apps.media.infrastructure.metadata import (
    detect_mime_type,
    find_mime_type,
    get_file_extension,
)


def test_detect_mime_type():
    """Test MIME type detection from extension."""
    assert detect_mime_type('x.pdf') == 'application/pdf'
    assert detect_mime_type('/docs/test.txt') == 'text/plain'
    assert detect_mime_type('photo.jpg') == 'image/jpeg'
    assert detect_mime_type('/images/logo.png') == 'image/png'


def test_detect_mime_type_unknown():
    """Test MIME type detection for unknown extension."""
    assert detect_mime_type('x.unknownext') == 'unknown/type'


def test_detect_mime_type_without_extension():
    """Test files without extension have an unknown type."""
    assert detect_mime_type('/docs/README') == 'unknown/type'


def test_detect_mime_type_ignores_case():
    """Test upper case extensions are recognised."""
    assert detect_mime_type('SCAN.PDF') == 'application/pdf'


def test_find_mime_type_extra_types(settings):
    """Test configured mappings extend the database."""
    settings.MEDIA_MANAGER_MIME_TYPES = {'heic': 'image/heic'}

    assert find_mime_type('heic') == 'image/heic'
    assert detect_mime_type('/photos/IMG_0001.HEIC') == 'image/heic'


def test_find_mime_type_miss():
    """Test unregistered and empty extensions are absent."""
    assert find_mime_type('unknownext') is None
    assert find_mime_type('') is None


def test_get_file_extension():
    """Test file extension extraction."""
    assert get_file_extension('test.pdf') == 'pdf'
    assert get_file_extension('test.TXT') == 'txt'  # Lowercase
    assert get_file_extension('test') == ''  # No extension
    assert get_file_extension('test.tar.gz') == 'gz'  # Last extension
    assert get_file_extension('/dir.d/file') == ''
