"""Result types returned by the media manager.

Every type serialises to the camelCase JSON shape consumed by the
browser templates via ``to_json()``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, final


@final
@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a mutating operation.

    Truthy when the operation succeeded, so callers can write
    ``if manager.create_directory(path): ...``.
    """

    success: bool
    messages: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        """Operation success flag."""
        return self.success

    def to_json(self) -> dict[str, Any]:
        """JSON representation."""
        return {'success': self.success, 'errors': list(self.messages)}


@final
@dataclass(frozen=True, slots=True)
class UploadResult:
    """Outcome of an upload batch."""

    count: int
    messages: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        """True when no file of the batch was rejected."""
        return not self.messages

    def to_json(self) -> dict[str, Any]:
        """JSON representation."""
        return {
            'success': self.success,
            'errors': list(self.messages),
            'uploaded': self.count,
        }


@final
@dataclass(frozen=True, slots=True)
class FolderEntry:
    """A subfolder shown in a folder listing."""

    name: str
    full_path: str
    modified: datetime
    mime_type: str = 'folder'

    def to_json(self) -> dict[str, Any]:
        """JSON representation."""
        return {
            'name': self.name,
            'mimeType': self.mime_type,
            'fullPath': self.full_path,
            'modified': self.modified.isoformat(),
        }


@final
@dataclass(frozen=True, slots=True)
class FileEntry:
    """A file shown in a folder listing."""

    name: str
    full_path: str
    web_path: str
    mime_type: str
    size: int
    modified: datetime
    relative_path: str

    def to_json(self) -> dict[str, Any]:
        """JSON representation."""
        return {
            'name': self.name,
            'fullPath': self.full_path,
            'webPath': self.web_path,
            'mimeType': self.mime_type,
            'size': self.size,
            'modified': self.modified.isoformat(),
            'relativePath': self.relative_path,
        }


@final
@dataclass(frozen=True, slots=True)
class FolderInfo:
    """Contents of a folder with its breadcrumb trail.

    ``bread_crumbs`` holds the ancestors only: the current folder has
    been popped off into ``folder_name``.
    """

    folder: str
    folder_name: str
    bread_crumbs: dict[str, str]
    sub_folders: list[FolderEntry] = field(default_factory=list)
    files: list[FileEntry] = field(default_factory=list)

    @property
    def items_count(self) -> int:
        """Combined count of subfolders and files."""
        return len(self.sub_folders) + len(self.files)

    def to_json(self) -> dict[str, Any]:
        """JSON representation."""
        return {
            'folder': self.folder,
            'folderName': self.folder_name,
            'breadCrumbs': self.bread_crumbs,
            'subFolders': [entry.to_json() for entry in self.sub_folders],
            'files': [entry.to_json() for entry in self.files],
            'itemsCount': self.items_count,
        }
