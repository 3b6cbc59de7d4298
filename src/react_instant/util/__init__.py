"""
Shared utility helpers for filesystem access and folder naming.
"""

from .filesystem import remove_path, write_text_file
from .naming import FolderChoice, resolve_folder_name

__all__ = [
    "remove_path",
    "write_text_file",
    "FolderChoice",
    "resolve_folder_name",
]
