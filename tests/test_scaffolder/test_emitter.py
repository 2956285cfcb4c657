"""Tests for FileEmitter (jsscaffold.scaffolder.emitter)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from jsscaffold.scaffolder.emitter import FileEmitter


pytestmark = pytest.mark.unit


class TestEnsureDirectories:
    @pytest.mark.asyncio
    async def test_creates_nested_directories(self, tmp_path: Path):
        created = await FileEmitter().ensure_directories(
            tmp_path, ["src", "src/common/decorators"]
        )
        assert created == [tmp_path / "src", tmp_path / "src/common/decorators"]
        assert (tmp_path / "src/common/decorators").is_dir()

    @pytest.mark.asyncio
    async def test_existing_directory_is_not_an_error(self, tmp_path: Path):
        (tmp_path / "src").mkdir()
        await FileEmitter().ensure_directories(tmp_path, ["src", "src"])
        assert (tmp_path / "src").is_dir()

    @pytest.mark.asyncio
    async def test_empty_list(self, tmp_path: Path):
        assert await FileEmitter().ensure_directories(tmp_path, []) == []


class TestWriteFiles:
    @pytest.mark.asyncio
    async def test_content_is_trimmed(self, tmp_path: Path):
        await FileEmitter().write_files(tmp_path, {"README.md": "\n\n# Title\n\n"})
        assert (tmp_path / "README.md").read_text(encoding="utf-8") == "# Title"

    @pytest.mark.asyncio
    async def test_missing_parents_are_created(self, tmp_path: Path):
        await FileEmitter().write_files(tmp_path, {"a/b/c.js": "x"})
        assert (tmp_path / "a/b/c.js").read_text(encoding="utf-8") == "x"

    @pytest.mark.asyncio
    async def test_existing_file_is_overwritten(self, tmp_path: Path):
        target = tmp_path / "index.js"
        target.write_text("old content that is longer", encoding="utf-8")
        await FileEmitter().write_files(tmp_path, {"index.js": "new"})
        assert target.read_text(encoding="utf-8") == "new"

    @pytest.mark.asyncio
    async def test_utf8_content(self, tmp_path: Path):
        await FileEmitter().write_files(tmp_path, {"README.md": "├── src/ © ✓"})
        assert (tmp_path / "README.md").read_bytes() == "├── src/ © ✓".encode("utf-8")

    @pytest.mark.asyncio
    async def test_os_error_propagates(self, tmp_path: Path):
        with patch.object(Path, "write_text", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError, match="denied"):
                await FileEmitter().write_files(tmp_path, {"index.js": "x"})
