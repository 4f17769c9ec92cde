"""Unconditional outputs: utility placeholders and ``tsconfig.json``.

The ``tsconfig.json`` maps one ``@<dir>/*`` alias onto each top-level
``src/`` directory that the scaffolder creates, resolved against
``baseUrl = "./src"``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rn_scaffolder.config import ScaffoldConfig
from rn_scaffolder.utils import print_created, save_json

from .files import FileSpec, FilesystemError, write_file_specs
from .templates import TemplateRenderer

MEDIA_HANDLER_PATH = "src/utils/MediaHandler.ts"
RESPONSIVE_SCREEN_PATH = "src/utils/responsive-screen.ts"
TSCONFIG_PATH = "tsconfig.json"

TSCONFIG_EXTENDS = "@react-native/typescript-config/tsconfig.json"

# One alias per top-level src/ directory.
PATH_ALIAS_DIRS: list[str] = [
    "assets",
    "features",
    "navigation",
    "components",
    "store",
    "service",
    "styles",
    "utils",
    "i18n",
    "theme",
    "types",
    "constants",
    "context",
    "hooks",
]


def build_tsconfig() -> dict[str, Any]:
    """Return the ``tsconfig.json`` document."""
    return {
        "extends": TSCONFIG_EXTENDS,
        "compilerOptions": {
            "typeRoots": ["node_modules/@types", "src/types"],
            "types": ["jest"],
            "baseUrl": "./src",
            "paths": {f"@{name}/*": [f"{name}/*"] for name in PATH_ALIAS_DIRS},
        },
    }


class UtilityGenerator:
    """Writes the media/responsive placeholders and the TypeScript config."""

    # Template name -> output path
    _FILES: dict[str, str] = {
        "utils/MediaHandler.ts.j2": MEDIA_HANDLER_PATH,
        "utils/responsive-screen.ts.j2": RESPONSIVE_SCREEN_PATH,
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def file_specs(self, config: ScaffoldConfig) -> list[FileSpec]:
        context = config.template_context()
        return [
            FileSpec(output, self.renderer.render(template, context))
            for template, output in self._FILES.items()
        ]

    async def generate(self, root: Path, config: ScaffoldConfig) -> list[Path]:
        """Write the utility placeholders, then ``tsconfig.json``.

        Returns:
            List of written file paths, ``tsconfig.json`` last.
        """
        written = await write_file_specs(
            root, self.file_specs(config), kind="utility file", color="yellow"
        )
        written.append(await self.write_tsconfig(root))
        return written

    async def write_tsconfig(self, root: Path) -> Path:
        """Create or overwrite ``<root>/tsconfig.json``."""
        target = root / TSCONFIG_PATH
        try:
            await save_json(build_tsconfig(), target)
        except OSError as exc:
            raise FilesystemError(TSCONFIG_PATH, exc.strerror or str(exc)) from exc
        print_created("config file", TSCONFIG_PATH, "blue")
        return target
