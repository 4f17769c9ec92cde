"""React Native project scaffolder -- generates the project layout.

Takes a ``ScaffoldConfig`` and renders the ``src/`` tree, the optional
navigation/storage/state-management/bottom-tab files, the utility
placeholders and ``tsconfig.json`` under a root directory.

Quick usage::

    from rn_scaffolder.config import ScaffoldConfig, StorageChoice
    from rn_scaffolder.scaffolder import ProjectScaffolder

    config = ScaffoldConfig(storage=StorageChoice.MMKV, navigation_setup=True)
    written = await ProjectScaffolder(config).generate("/tmp/my-app")
"""

from rn_scaffolder.scaffolder.files import FilesystemError, FileSpec
from rn_scaffolder.scaffolder.generator import BASE_DIRECTORIES, ProjectScaffolder
from rn_scaffolder.scaffolder.templates import TemplateRenderer

__all__ = [
    "BASE_DIRECTORIES",
    "FileSpec",
    "FilesystemError",
    "ProjectScaffolder",
    "TemplateRenderer",
]
