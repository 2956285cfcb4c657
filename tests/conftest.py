"""Shared pytest fixtures for the jsscaffold test suite.

Provides reusable fixtures for:
- A temporary working directory the dispatcher writes into
- A ``Config`` / ``ProjectGenerator`` pointed at that directory
- Every ``(archetype, language)`` combination
"""

from __future__ import annotations

import itertools
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from jsscaffold.config import Config
from jsscaffold.models import ArchetypeId, Language
from jsscaffold.scaffolder import ProjectGenerator


ALL_VARIANTS = list(itertools.product(ArchetypeId, Language))


def variant_id(variant: tuple[ArchetypeId, Language]) -> str:
    archetype, language = variant
    return f"{archetype.value}-{language.value}"


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory that is also the process cwd."""
    directory = tmp_path / "work"
    directory.mkdir()
    monkeypatch.chdir(directory)
    yield directory


@pytest.fixture(autouse=True)
def clean_env():
    """Keep JSSCAFFOLD_* variables from the developer's shell out of tests."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("JSSCAFFOLD_")}
    with patch.dict(os.environ, env, clear=True):
        yield


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------

@pytest.fixture
def config(work_dir: Path) -> Config:
    return Config(working_dir=work_dir, interactive=False)


@pytest.fixture
def generator(config: Config) -> ProjectGenerator:
    return ProjectGenerator(config)


@pytest.fixture(params=ALL_VARIANTS, ids=variant_id)
def variant(request) -> tuple[ArchetypeId, Language]:
    """Every ``(archetype, language)`` pair."""
    return request.param
