"""Exceptions raised by the scaffolder.

Filesystem failures are not wrapped: ``OSError`` (and subclasses such as
``PermissionError``) raised while creating directories or writing files
propagate to the caller unchanged.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every scaffolder error."""


class DirectoryAlreadyExistsError(ScaffoldError):
    """Raised by the pre-flight check when the target path already exists."""

    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        super().__init__(f'Project directory "{project_name}" already exists.')


class UnknownArchetypeError(ScaffoldError):
    """Raised when no generator is registered for a project type."""

    def __init__(self, archetype: str) -> None:
        self.archetype = archetype
        super().__init__(f"Unknown project type: {archetype}")


class UnsupportedLanguageError(ScaffoldError):
    """Raised for a language value other than js/ts (or typed/untyped)."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Unsupported language: {language}")
