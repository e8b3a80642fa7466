"""Tests for media_tree management command."""

from io import StringIO

import pytest
from django.core.management import call_command

pytestmark = pytest.mark.usefixtures('configured_disk')


def test_prints_tree(make_folder):
    """Test the directory tree is printed with indentation."""
    make_folder('a/b')
    make_folder('.git')

    out = StringIO()
    call_command('media_tree', stdout=out)

    lines = out.getvalue().splitlines()
    assert lines == ['Root', ' ' * 8 + 'a', ' ' * 12 + 'b']


def test_lists_folder(make_file, make_folder):
    """Test a folder listing shows folders and files."""
    make_folder('docs/images')
    make_file('docs/report.pdf')

    out = StringIO()
    call_command('media_tree', folder='/docs', stdout=out)

    output = out.getvalue()
    assert '/docs (2 items)' in output
    assert '  images/' in output
    assert 'report.pdf' in output
    assert 'application/pdf' in output
    assert 'Listed /docs' in output
