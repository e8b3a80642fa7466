"""Management command to inspect the managed disk."""

from typing import Any

from django.core.management.base import BaseCommand
from django.template.defaultfilters import filesizeformat

from server.apps.media.logic.media_manager import MediaManager


class Command(BaseCommand):
    """Print the directory tree, or the content of one folder."""

    help = 'Show the media directory tree or list a folder'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--folder',
            default=None,
            help='List this folder instead of printing the tree',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the command.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        manager = MediaManager()
        folder = options['folder']

        if folder is None:
            for label in manager.all_directories().values():
                self.stdout.write(label.replace('\u00a0', ' '))
            return

        info = manager.folder_info(folder)
        self.stdout.write(f'{info.folder} ({info.items_count} items)')
        for sub_folder in info.sub_folders:
            self.stdout.write(f'  {sub_folder.name}/')
        for file_entry in info.files:
            self.stdout.write(
                f'  {file_entry.name}  '
                f'{filesizeformat(file_entry.size)}  '
                f'{file_entry.mime_type}',
            )
        self.stdout.write(self.style.SUCCESS(f'Listed {info.folder}'))
