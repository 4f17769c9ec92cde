"""Navigation helper generation.

Generates:
- ``src/navigation/RootNavigator.tsx`` -- root navigator entry point
- ``src/navigation/NavigationRef.ts`` -- ``navigate``, ``goBack`` and
  ``resetNavigationStack`` helpers usable outside React components
"""

from __future__ import annotations

from pathlib import Path

from rn_scaffolder.config import ScaffoldConfig

from .files import FileSpec, write_file_specs
from .templates import TemplateRenderer


class NavigationGenerator:
    """Generates the root navigator and the navigation-ref helpers."""

    # Template name -> output path
    _FILES: dict[str, str] = {
        "navigation/RootNavigator.tsx.j2": "src/navigation/RootNavigator.tsx",
        "navigation/NavigationRef.ts.j2": "src/navigation/NavigationRef.ts",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def enabled(self, config: ScaffoldConfig) -> bool:
        return config.navigation_setup

    def file_specs(self, config: ScaffoldConfig) -> list[FileSpec]:
        context = config.template_context()
        return [
            FileSpec(output, self.renderer.render(template, context))
            for template, output in self._FILES.items()
        ]

    async def generate(self, root: Path, config: ScaffoldConfig) -> list[Path]:
        """Write both navigation files under *root*.

        Returns:
            List of written file paths.
        """
        return await write_file_specs(
            root, self.file_specs(config), kind="navigation file", color="magenta"
        )
