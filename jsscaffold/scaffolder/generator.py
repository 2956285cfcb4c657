"""Archetype registry and the project dispatcher.

``ProjectGenerator`` turns ``(project_name, archetype, language)`` into a new
directory under the configured working directory:

1. the target must not exist yet (checked before anything is touched),
2. the empty target directory is created,
3. the archetype's generator writes its tree into it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path

from ..config import Config
from ..errors import DirectoryAlreadyExistsError, UnknownArchetypeError
from ..models import ArchetypeId, Language, ProjectDescriptor
from .archetypes import electron, express, nest, nextjs, nodejs, react, react_native
from .base import ArchetypeGenerator


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

GENERATORS: dict[ArchetypeId, ArchetypeGenerator] = {
    ArchetypeId.NODEJS: ArchetypeGenerator(ArchetypeId.NODEJS, nodejs.build_file_tree),
    ArchetypeId.EXPRESS: ArchetypeGenerator(ArchetypeId.EXPRESS, express.build_file_tree),
    ArchetypeId.NEXTJS: ArchetypeGenerator(ArchetypeId.NEXTJS, nextjs.build_file_tree),
    ArchetypeId.REACT: ArchetypeGenerator(ArchetypeId.REACT, react.build_file_tree),
    ArchetypeId.NEST: ArchetypeGenerator(ArchetypeId.NEST, nest.build_file_tree),
    ArchetypeId.ELECTRON: ArchetypeGenerator(ArchetypeId.ELECTRON, electron.build_file_tree),
    ArchetypeId.REACT_NATIVE: ArchetypeGenerator(
        ArchetypeId.REACT_NATIVE, react_native.build_file_tree
    ),
}


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Entry point of the scaffolding core.

    ``project_name`` is trusted here; validate it with ``ProjectDescriptor``
    (or use :meth:`generate_descriptor`) when it comes from a user.
    """

    def __init__(
        self,
        config: Config | None = None,
        registry: Mapping[ArchetypeId, ArchetypeGenerator] | None = None,
    ) -> None:
        self.config = config or Config()
        self.registry = registry if registry is not None else GENERATORS

    # -- Public API --------------------------------------------------------

    async def generate_project(
        self,
        project_name: str,
        archetype: ArchetypeId | str,
        language: Language | str = Language.JS,
    ) -> Path:
        """Create ``<working_dir>/<project_name>`` and fill it.

        Returns:
            Path to the generated project root.

        Raises:
            UnsupportedLanguageError: *language* is not ``js``/``ts``.  Raised
                before the filesystem is inspected.
            DirectoryAlreadyExistsError: the target path already exists,
                including as a dangling symlink.  Nothing has been written.
            FileNotFoundError: the working directory does not exist.  It is
                not created on the caller's behalf.
            UnknownArchetypeError: *archetype* has no registered generator.
                The empty target directory is removed again.
            OSError: any filesystem failure, unchanged.  Files written so
                far are left in place.
        """
        language = Language.parse(language)
        target_dir = self.config.resolve_working_dir() / project_name

        if await asyncio.to_thread(_is_taken, target_dir):
            raise DirectoryAlreadyExistsError(project_name)

        await asyncio.to_thread(target_dir.mkdir)

        try:
            generator = self._lookup(archetype)
        except UnknownArchetypeError:
            await asyncio.to_thread(target_dir.rmdir)
            raise

        await generator.generate(target_dir, project_name, language)
        return target_dir

    def generate_project_sync(
        self,
        project_name: str,
        archetype: ArchetypeId | str,
        language: Language | str = Language.JS,
    ) -> Path:
        """Blocking wrapper around :meth:`generate_project`."""
        return asyncio.run(self.generate_project(project_name, archetype, language))

    async def generate_descriptor(self, descriptor: ProjectDescriptor) -> Path:
        """Generate from an already validated ``ProjectDescriptor``."""
        return await self.generate_project(
            descriptor.name, descriptor.archetype, descriptor.language
        )

    # -- Internals ---------------------------------------------------------

    def _lookup(self, archetype: ArchetypeId | str) -> ArchetypeGenerator:
        archetype_id = ArchetypeId.parse(archetype)
        try:
            return self.registry[archetype_id]
        except KeyError:
            raise UnknownArchetypeError(str(archetype)) from None


def _is_taken(path: Path) -> bool:
    # A dangling symlink also occupies the name.
    return path.exists() or path.is_symlink()
