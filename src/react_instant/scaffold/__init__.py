"""
Project scaffolding: generator, installs, cleanup and template files.
"""

from .cleanup import cleanup_cli_files, remove_extra_dependency_dirs
from .manifest import ManifestError, merge_scripts
from .project import GeneratorError, ScaffoldReport, create_project

__all__ = [
    "cleanup_cli_files",
    "remove_extra_dependency_dirs",
    "ManifestError",
    "merge_scripts",
    "GeneratorError",
    "ScaffoldReport",
    "create_project",
]
