"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and materializes the React Native project layout
under a root directory: the fixed ``src/`` tree, the optional navigation,
storage, state-management and bottom-tab files, then the utility
placeholders and ``tsconfig.json``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rn_scaffolder.config import ScaffoldConfig
from rn_scaffolder.utils import print_created

from .bottom_tab_gen import BottomTabGenerator
from .files import make_directory
from .navigation_gen import NavigationGenerator
from .state_gen import StateManagementGenerator
from .storage_gen import StorageGenerator
from .templates import TemplateRenderer
from .utility_gen import UtilityGenerator


# ---------------------------------------------------------------------------
# Fixed directory layout
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: list[str] = [
    # Assets
    "src/assets/fonts",
    "src/assets/icons/imageIcons",
    "src/assets/icons/svgIcons",
    "src/assets/images/PngAndJpgImages",
    "src/assets/images/SvgImages",
    "src/assets/images/OtherImages",
    # Components
    "src/components/global",
    "src/components/forms",
    "src/store",
    "src/constants",
    "src/hooks",
    "src/context",
    # Screens grouped by feature
    "src/features/auth",
    "src/features/dashboard",
    "src/features/settings",
    "src/features/chat",
    "src/i18n/locales",
    "src/service",
    "src/styles",
    "src/theme",
    "src/types",
    "src/utils",
    "src/navigation",
]


# ---------------------------------------------------------------------------
# Main scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Main scaffolding orchestrator.

    Given a ``ScaffoldConfig``, generates under the root directory:
    - The fixed ``src/`` directory tree
    - Bottom tab icon directory and navigator placeholder (optional)
    - Async Storage or MMKV helper (optional)
    - Root navigator and navigation-ref helpers (optional)
    - Redux Toolkit, Zustand or Context API counter example (optional)
    - Media and responsive-screen placeholders and ``tsconfig.json``

    Nothing is rolled back on failure; a re-run with the same answers is
    safe because directory creation is idempotent and files are overwritten.
    """

    def __init__(self, config: ScaffoldConfig) -> None:
        self.config = config
        self.renderer = TemplateRenderer()
        self.bottom_tab_gen = BottomTabGenerator(self.renderer)
        self.storage_gen = StorageGenerator(self.renderer)
        self.navigation_gen = NavigationGenerator(self.renderer)
        self.state_gen = StateManagementGenerator(self.renderer)
        self.utility_gen = UtilityGenerator(self.renderer)

    # -- Public API --------------------------------------------------------

    async def generate(self, root: str | Path) -> list[Path]:
        """Generate the project structure under *root*.

        Args:
            root: Directory that receives ``src/`` and ``tsconfig.json``.
                It is created if missing.

        Returns:
            Every file written, in write order within each generator.

        Raises:
            FilesystemError: A directory or file could not be created.  Work
                already done is left in place.
        """
        root_path = Path(root)

        # 1. Create the skeleton directory structure
        await self.create_base_directories(root_path)

        # 2. Conditional generators write disjoint paths, so run them together
        conditional = [
            gen
            for gen in (
                self.bottom_tab_gen,
                self.storage_gen,
                self.navigation_gen,
                self.state_gen,
            )
            if gen.enabled(self.config)
        ]
        results = await asyncio.gather(
            *(gen.generate(root_path, self.config) for gen in conditional)
        )

        written: list[Path] = [path for paths in results for path in paths]

        # 3. Utility placeholders and tsconfig.json
        written.extend(await self.utility_gen.generate(root_path, self.config))

        return written

    # -- Directory structure -----------------------------------------------

    async def create_base_directories(self, root: Path) -> list[Path]:
        """Create the fixed ``src/`` directory tree under *root*."""
        created: list[Path] = []
        for rel_dir in BASE_DIRECTORIES:
            created.append(await make_directory(root, rel_dir))
            print_created("directory", rel_dir)
        return created
