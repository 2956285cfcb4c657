"""The generator contract shared by every archetype."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..models import ArchetypeId, FileTree, Language
from .emitter import FileEmitter

BuildFileTree = Callable[[str, Language], FileTree]


class ArchetypeGenerator:
    """Pairs an archetype's ``build_file_tree`` with a ``FileEmitter``.

    ``generate`` is not transactional: if writing fails part-way, whatever
    was already created stays on disk.
    """

    def __init__(
        self,
        archetype: ArchetypeId,
        build_file_tree: BuildFileTree,
        emitter: FileEmitter | None = None,
    ) -> None:
        self.archetype = archetype
        self.build_file_tree = build_file_tree
        self.emitter = emitter or FileEmitter()

    async def generate(
        self, target_dir: str | Path, project_name: str, language: Language | str
    ) -> FileTree:
        """Build the archetype's tree and write it into *target_dir*.

        All directories are created before the first file is written.

        Returns:
            The ``FileTree`` that was written.
        """
        tree = self.build_file_tree(project_name, Language.parse(language))
        await self.emitter.ensure_directories(target_dir, tree.directories)
        await self.emitter.write_files(target_dir, tree.files)
        return tree

    def __repr__(self) -> str:
        return f"ArchetypeGenerator({self.archetype.value!r})"
