"""rn-scaffolder -- interactive React Native project scaffolder.

Asks four questions (bottom tabs, storage, navigation, state management) and
generates a fixed ``src/`` layout plus the matching boilerplate files and a
``tsconfig.json`` with path aliases.
"""

__version__ = "0.1.0"
