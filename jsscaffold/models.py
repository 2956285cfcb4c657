"""Pydantic v2 models and enumerations shared by the scaffolder.

``ArchetypeId`` and ``Language`` are closed enumerations.  Their ``parse``
class methods also accept the descriptive aliases (``plain-runtime``,
``typed``, ...) so callers can use either vocabulary.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .errors import UnknownArchetypeError, UnsupportedLanguageError

PROJECT_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArchetypeId(str, Enum):
    """Supported project types."""
    NODEJS = "nodejs"
    EXPRESS = "express"
    NEXTJS = "nextjs"
    REACT = "react"
    NEST = "nest"
    ELECTRON = "electron"
    REACT_NATIVE = "react-native"

    @classmethod
    def parse(cls, value: Any) -> "ArchetypeId":
        """Resolve a canonical id or alias, raising ``UnknownArchetypeError``."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        if key in _ARCHETYPE_ALIASES:
            return _ARCHETYPE_ALIASES[key]
        raise UnknownArchetypeError(str(value))

    @property
    def display_name(self) -> str:
        return _ARCHETYPE_DISPLAY_NAMES[self]


_ARCHETYPE_ALIASES: dict[str, ArchetypeId] = {
    "plain-runtime": ArchetypeId.NODEJS,
    "http-framework": ArchetypeId.EXPRESS,
    "fullstack-framework": ArchetypeId.NEXTJS,
    "frontend-library": ArchetypeId.REACT,
    "structured-backend-framework": ArchetypeId.NEST,
    "desktop-shell": ArchetypeId.ELECTRON,
    "mobile-shell": ArchetypeId.REACT_NATIVE,
}

_ARCHETYPE_DISPLAY_NAMES: dict[ArchetypeId, str] = {
    ArchetypeId.NODEJS: "Node.js (Basic)",
    ArchetypeId.EXPRESS: "Express.js (MVC)",
    ArchetypeId.NEXTJS: "Next.js",
    ArchetypeId.REACT: "React",
    ArchetypeId.NEST: "NestJS",
    ArchetypeId.ELECTRON: "Electron",
    ArchetypeId.REACT_NATIVE: "React Native",
}


class Language(str, Enum):
    """Source language variant. ``ts`` is the statically typed dialect."""
    JS = "js"
    TS = "ts"

    @classmethod
    def parse(cls, value: Any) -> "Language":
        """Resolve ``js``/``ts`` or ``untyped``/``typed``."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        if key in _LANGUAGE_ALIASES:
            return _LANGUAGE_ALIASES[key]
        raise UnsupportedLanguageError(str(value))

    @property
    def is_typed(self) -> bool:
        return self is Language.TS

    @property
    def display_name(self) -> str:
        return "TypeScript" if self.is_typed else "JavaScript"


_LANGUAGE_ALIASES: dict[str, Language] = {
    "untyped": Language.JS,
    "javascript": Language.JS,
    "typed": Language.TS,
    "typescript": Language.TS,
}


# ---------------------------------------------------------------------------
# Project descriptor
# ---------------------------------------------------------------------------

class ProjectDescriptor(BaseModel):
    """Fully resolved user intent: what to generate and where.

    The name pattern is enforced here, at the entry point.  The dispatcher
    itself accepts any string and treats it as trusted.
    """

    name: str = Field(
        ...,
        min_length=1,
        pattern=PROJECT_NAME_PATTERN,
        description="Project directory name (letters, numbers, hyphens, underscores)",
    )
    archetype: ArchetypeId = Field(..., description="Project type to generate")
    language: Language = Field(default=Language.JS, description="js or ts")

    @field_validator("archetype", mode="before")
    @classmethod
    def _parse_archetype(cls, value: Any) -> ArchetypeId:
        return ArchetypeId.parse(value)

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value: Any) -> Language:
        return Language.parse(value)


# ---------------------------------------------------------------------------
# File tree
# ---------------------------------------------------------------------------

class FileTree(BaseModel):
    """Directories and file contents produced by one archetype.

    Paths are relative, ``/``-separated.  Every ancestor directory of every
    file must appear in ``directories``.
    """

    directories: list[str] = Field(default_factory=list)
    files: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_directory_coverage(self) -> "FileTree":
        missing = self.missing_directories()
        if missing:
            raise ValueError(
                "File paths use undeclared directories: " + ", ".join(missing)
            )
        return self

    def missing_directories(self) -> list[str]:
        """Return ancestor directories of file paths not listed in ``directories``."""
        declared = {str(PurePosixPath(d)) for d in self.directories}
        missing: list[str] = []
        for file_path in self.files:
            for parent in reversed(PurePosixPath(file_path).parents):
                name = str(parent)
                if name == "." or name in declared or name in missing:
                    continue
                missing.append(name)
        return missing

    def source_files(self) -> list[str]:
        """Return the ``.js``/``.ts`` source paths.

        Tool configuration files keep the names their tools look up
        (``*.config.js``, ``.eslintrc.js``) and are not counted as source.
        """
        sources: list[str] = []
        for path in self.files:
            pure = PurePosixPath(path)
            if pure.suffix not in (".js", ".ts"):
                continue
            if pure.name.startswith(".") or pure.stem.endswith(".config"):
                continue
            sources.append(path)
        return sources
