"""State-management example generation.

Each paradigm gets a minimal counter (``value`` starting at 0, with
``increment`` and ``decrement``) written in its own idiom:

- Redux Toolkit -> ``src/store/index.ts`` + ``src/store/slices/exampleSlice.ts``
- Zustand       -> ``src/store/zustand/exampleStore.ts``
- Context API   -> ``src/context/providers/ExampleProvider.tsx``
"""

from __future__ import annotations

from pathlib import Path

from rn_scaffolder.config import ScaffoldConfig, StateManagementChoice

from .files import FileSpec, write_file_specs
from .templates import TemplateRenderer

REDUX_STORE_PATH = "src/store/index.ts"
REDUX_SLICE_PATH = "src/store/slices/exampleSlice.ts"
ZUSTAND_STORE_PATH = "src/store/zustand/exampleStore.ts"
CONTEXT_PROVIDER_PATH = "src/context/providers/ExampleProvider.tsx"


class StateManagementGenerator:
    """Generates the counter example for the selected paradigm."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def enabled(self, config: ScaffoldConfig) -> bool:
        return config.state_management is not StateManagementChoice.NONE

    def file_specs(self, config: ScaffoldConfig) -> list[FileSpec]:
        """Return the files for ``config.state_management``.

        Raises:
            ValueError: ``config.state_management`` is not a known paradigm.
        """
        ctx = config.template_context()
        choice = config.state_management

        if choice is StateManagementChoice.REDUX_TOOLKIT:
            return [
                FileSpec(REDUX_STORE_PATH, self.renderer.render("state/redux/index.ts.j2", ctx)),
                FileSpec(
                    REDUX_SLICE_PATH,
                    self.renderer.render("state/redux/exampleSlice.ts.j2", ctx),
                ),
            ]
        elif choice is StateManagementChoice.ZUSTAND:
            return [
                FileSpec(
                    ZUSTAND_STORE_PATH,
                    self.renderer.render("state/zustand/exampleStore.ts.j2", ctx),
                )
            ]
        elif choice is StateManagementChoice.CONTEXT_API:
            return [
                FileSpec(
                    CONTEXT_PROVIDER_PATH,
                    self.renderer.render("state/context/ExampleProvider.tsx.j2", ctx),
                )
            ]
        elif choice is StateManagementChoice.NONE:
            return []
        raise ValueError(f"Unknown state management choice: {choice!r}")

    async def generate(self, root: Path, config: ScaffoldConfig) -> list[Path]:
        return await write_file_specs(
            root, self.file_specs(config), kind="state management file", color="cyan"
        )
