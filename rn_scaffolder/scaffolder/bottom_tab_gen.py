"""Bottom tab navigation scaffolding.

Creates the ``src/assets/icons/BottomTabIcons`` directory and a placeholder
``src/navigation/BottomTabNavigator.tsx``.
"""

from __future__ import annotations

from pathlib import Path

from rn_scaffolder.config import ScaffoldConfig
from rn_scaffolder.utils import print_created

from .files import FileSpec, make_directory, write_file_specs
from .templates import TemplateRenderer

BOTTOM_TAB_DIRECTORIES: list[str] = [
    "src/assets/icons/BottomTabIcons",
]

BOTTOM_TAB_NAVIGATOR_PATH = "src/navigation/BottomTabNavigator.tsx"


class BottomTabGenerator:
    """Generates the bottom tab icon directory and navigator placeholder."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def enabled(self, config: ScaffoldConfig) -> bool:
        return config.bottom_navigation

    def file_specs(self, config: ScaffoldConfig) -> list[FileSpec]:
        return [
            FileSpec(
                BOTTOM_TAB_NAVIGATOR_PATH,
                self.renderer.render(
                    "navigation/BottomTabNavigator.tsx.j2", config.template_context()
                ),
            )
        ]

    async def generate(self, root: Path, config: ScaffoldConfig) -> list[Path]:
        """Create the icon directory, then write the navigator placeholder.

        Returns:
            List of written file paths (directories are not included).
        """
        for rel_dir in BOTTOM_TAB_DIRECTORIES:
            await make_directory(root, rel_dir)
            print_created("Bottom Nav directory", rel_dir, "blue")

        return await write_file_specs(
            root, self.file_specs(config), kind="Bottom Nav file", color="yellow"
        )
