"""Writes a ``FileTree`` to disk.

Directory creation is idempotent.  Files are always (re)written with the
caller's content.  Filesystem errors propagate unchanged and nothing is
cleaned up, so callers must not assume atomicity across files.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from pathlib import Path


class FileEmitter:
    """Creates directories and writes files below a root directory.

    Both operations run their per-path work concurrently in worker threads.
    Callers that need directories to exist before files are written (the
    generator does) await :meth:`ensure_directories` first.
    """

    async def ensure_directories(
        self, root: str | Path, paths: Iterable[str]
    ) -> list[Path]:
        """Create every directory in *paths* (and its parents) under *root*.

        Existing directories are left alone.

        Returns:
            The directory paths under *root*, in input order.
        """
        base = Path(root)
        targets = [base / rel for rel in paths]
        await asyncio.gather(*(asyncio.to_thread(_make_dir, p) for p in targets))
        return targets

    async def write_files(
        self, root: str | Path, files: Mapping[str, str]
    ) -> list[Path]:
        """Write each ``relative path -> content`` pair under *root*.

        Missing parent directories are created.  Content is stripped of
        surrounding whitespace and overwrites any existing file.

        Returns:
            The written file paths, in input order.
        """
        base = Path(root)
        pairs = [(base / rel, content) for rel, content in files.items()]
        await asyncio.gather(
            *(asyncio.to_thread(_write_file, path, content) for path, content in pairs)
        )
        return [path for path, _ in pairs]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write trimmed content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content.strip(), encoding="utf-8")
