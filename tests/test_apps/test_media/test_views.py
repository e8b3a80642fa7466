"""Tests for media browser JSON endpoints."""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

pytestmark = pytest.mark.usefixtures('configured_disk')


class TestBrowsing:
    """Tests for read-only endpoints."""

    def test_folder_info(self, client, make_file, make_folder):
        """Test a folder listing is returned as JSON."""
        make_folder('docs/images')
        make_file('docs/report.pdf')

        response = client.get(reverse('media:folder'), {'path': '/docs'})

        assert response.status_code == 200
        payload = response.json()
        assert payload['success'] is True
        assert payload['folder'] == '/docs'
        assert payload['folderName'] == 'docs'
        assert payload['breadCrumbs'] == {'/': 'Root'}
        assert [item['name'] for item in payload['subFolders']] == ['images']
        assert payload['files'][0]['mimeType'] == 'application/pdf'
        assert payload['itemsCount'] == 2

    def test_folder_info_defaults_to_root(self, client):
        """Test the root folder is listed without a path."""
        response = client.get(reverse('media:folder'))

        assert response.json()['folderName'] == 'Root'

    def test_directories(self, client, make_folder):
        """Test the directory picker."""
        make_folder('a')

        response = client.get(reverse('media:directories'))

        assert response.json()['directories'] == {
            '/': 'Root',
            '/a': '\u00a0' * 8 + 'a',
        }

    def test_post_not_allowed(self, client):
        """Test listing endpoints only accept GET."""
        response = client.post(reverse('media:folder'))

        assert response.status_code == 405


class TestFolderOperations:
    """Tests for folder endpoints."""

    def test_create_folder(self, client, configured_disk):
        """Test a folder is created."""
        response = client.post(
            reverse('media:create_folder'),
            {'folder': '/new'},
        )

        assert response.json() == {'success': True, 'errors': []}
        assert (configured_disk / 'new').is_dir()

    def test_create_existing_folder(self, client, make_folder):
        """Test creating an existing folder reports an error."""
        make_folder('docs')

        response = client.post(
            reverse('media:create_folder'),
            {'folder': '/docs'},
        )

        assert response.status_code == 200
        assert response.json() == {
            'success': False,
            'errors': ['Folder "/docs" already exists.'],
        }

    def test_create_folder_requires_name(self, client):
        """Test a missing parameter is a bad request."""
        response = client.post(reverse('media:create_folder'))

        assert response.status_code == 400
        assert response.json()['errors'] == [
            'The "folder" parameter is required.',
        ]

    def test_delete_folder_not_empty(self, client, make_file):
        """Test a folder with content is not deleted."""
        make_file('docs/a.txt')

        response = client.post(
            reverse('media:delete_folder'),
            {'folder': '/docs'},
        )

        assert response.json()['success'] is False

    def test_get_not_allowed(self, client):
        """Test mutating endpoints only accept POST."""
        response = client.get(reverse('media:create_folder'))

        assert response.status_code == 405


class TestFileOperations:
    """Tests for file endpoints."""

    def test_delete_file(self, client, make_file):
        """Test a file is deleted."""
        target = make_file('a.txt')

        response = client.post(reverse('media:delete_file'), {'path': '/a.txt'})

        assert response.json()['success'] is True
        assert not target.exists()

    def test_rename(self, client, make_file, configured_disk):
        """Test an item is renamed."""
        make_file('docs/a.txt')

        response = client.post(reverse('media:rename'), {
            'path': '/docs',
            'original': 'a.txt',
            'new_name': 'b.txt',
        })

        assert response.json()['success'] is True
        assert (configured_disk / 'docs' / 'b.txt').exists()

    def test_move_file(self, client, make_file, configured_disk):
        """Test a file is moved."""
        make_file('a.txt')

        response = client.post(reverse('media:move'), {
            'current': '/a.txt',
            'new': '/archive/a.txt',
            'type': 'file',
        })

        assert response.json()['success'] is True
        assert (configured_disk / 'archive' / 'a.txt').exists()

    def test_move_folder_inside_itself(self, client, make_folder):
        """Test a folder cannot be moved below itself."""
        make_folder('a')

        response = client.post(reverse('media:move'), {
            'current': '/a',
            'new': '/a/b',
            'type': 'folder',
        })

        assert response.json() == {
            'success': False,
            'errors': ['You can not move this folder inside of itself.'],
        }

    def test_move_unknown_type(self, client):
        """Test an unknown item type is a bad request."""
        response = client.post(reverse('media:move'), {
            'current': '/a',
            'new': '/b',
            'type': 'link',
        })

        assert response.status_code == 400

    def test_upload(self, client, make_file, configured_disk):
        """Test uploads are stored and collisions reported."""
        make_file('docs/a.txt', b'original')

        response = client.post(reverse('media:upload'), {
            'folder': '/docs',
            'files': [
                SimpleUploadedFile('a.txt', b'new'),
                SimpleUploadedFile('b.txt', b'b'),
            ],
        })

        assert response.json() == {
            'success': False,
            'errors': ['File /docs/a.txt already exists in this folder.'],
            'uploaded': 1,
        }
        assert (configured_disk / 'docs' / 'b.txt').read_bytes() == b'b'

    def test_upload_without_files(self, client):
        """Test an upload without files is a bad request."""
        response = client.post(reverse('media:upload'), {'folder': '/'})

        assert response.status_code == 400
