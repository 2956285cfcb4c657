"""Unit tests for Config (jsscaffold.config).

Tests cover:
- Defaults and resolve_working_dir
- Field parsing of archetype and language aliases
- from_env for every recognised variable, including invalid values
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from jsscaffold.config import Config
from jsscaffold.errors import UnknownArchetypeError, UnsupportedLanguageError
from jsscaffold.models import ArchetypeId, Language


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.working_dir is None
        assert config.default_archetype is None
        assert config.default_language is Language.JS
        assert config.interactive is True

    @pytest.mark.unit
    def test_working_dir_follows_cwd(self, work_dir: Path):
        assert Config().resolve_working_dir() == Path.cwd()

    @pytest.mark.unit
    def test_explicit_working_dir(self, tmp_path: Path):
        assert Config(working_dir=tmp_path).resolve_working_dir() == tmp_path

    @pytest.mark.unit
    def test_aliases_accepted(self):
        config = Config(default_archetype="desktop-shell", default_language="typed")
        assert config.default_archetype is ArchetypeId.ELECTRON
        assert config.default_language is Language.TS


# ---------------------------------------------------------------------------
# Config.from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_defaults_when_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_all_variables(self, tmp_path: Path):
        env = {
            "JSSCAFFOLD_WORKING_DIR": str(tmp_path),
            "JSSCAFFOLD_TYPE": "react-native",
            "JSSCAFFOLD_LANGUAGE": "ts",
            "JSSCAFFOLD_INTERACTIVE": "0",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.working_dir == tmp_path
        assert config.default_archetype is ArchetypeId.REACT_NATIVE
        assert config.default_language is Language.TS
        assert config.interactive is False

    @pytest.mark.unit
    def test_invalid_type(self):
        with patch.dict(os.environ, {"JSSCAFFOLD_TYPE": "angular"}, clear=True):
            with pytest.raises(UnknownArchetypeError):
                Config.from_env()

    @pytest.mark.unit
    def test_invalid_language(self):
        with patch.dict(os.environ, {"JSSCAFFOLD_LANGUAGE": "rust"}, clear=True):
            with pytest.raises(UnsupportedLanguageError):
                Config.from_env()

    @pytest.mark.unit
    def test_invalid_interactive_flag(self):
        with patch.dict(os.environ, {"JSSCAFFOLD_INTERACTIVE": "maybe"}, clear=True):
            with pytest.raises(ValueError, match="boolean"):
                Config.from_env()
