"""Storage helper generation.

Exactly one helper is written for the chosen backend:

- Async Storage -> ``src/utils/asyncStorage.ts``
- MMKV          -> ``src/utils/mmkvStorage.ts``

Both expose the same static API (``setItem``, ``getItem``, ``deleteItem``,
``clearAll``).  Every generated method catches and logs its own storage
errors and falls back to a harmless return value, so callers of the helper
never see an exception.
"""

from __future__ import annotations

from pathlib import Path

from rn_scaffolder.config import ScaffoldConfig, StorageChoice

from .files import FileSpec, write_file_specs
from .templates import TemplateRenderer

ASYNC_STORAGE_PATH = "src/utils/asyncStorage.ts"
MMKV_STORAGE_PATH = "src/utils/mmkvStorage.ts"


class StorageGenerator:
    """Generates the storage helper for the selected backend."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def enabled(self, config: ScaffoldConfig) -> bool:
        return config.storage is not StorageChoice.NONE

    def file_specs(self, config: ScaffoldConfig) -> list[FileSpec]:
        """Return the helper file for ``config.storage``.

        Raises:
            ValueError: ``config.storage`` is not a known backend.
        """
        context = config.template_context()
        choice = config.storage

        if choice is StorageChoice.ASYNC_STORAGE:
            return [
                FileSpec(
                    ASYNC_STORAGE_PATH,
                    self.renderer.render("storage/asyncStorage.ts.j2", context),
                )
            ]
        elif choice is StorageChoice.MMKV:
            return [
                FileSpec(
                    MMKV_STORAGE_PATH,
                    self.renderer.render("storage/mmkvStorage.ts.j2", context),
                )
            ]
        elif choice is StorageChoice.NONE:
            return []
        raise ValueError(f"Unknown storage choice: {choice!r}")

    async def generate(self, root: Path, config: ScaffoldConfig) -> list[Path]:
        """Write the storage helper under *root*.

        Returns:
            List of written file paths (empty when storage is ``none``).
        """
        return await write_file_specs(
            root, self.file_specs(config), kind="storage file", color="cyan"
        )
