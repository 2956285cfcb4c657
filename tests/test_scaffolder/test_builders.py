"""Tests for the shared manifest and config builders."""

from __future__ import annotations

import json

import pytest

from jsscaffold.errors import UnsupportedLanguageError
from jsscaffold.models import Language
from jsscaffold.scaffolder.builders import (
    TYPESCRIPT_VERSION,
    file_extension,
    gitignore,
    node_tsconfig,
    package_json,
    readme,
    typescript_dev_dependencies,
)


pytestmark = pytest.mark.unit


class TestFileExtension:
    def test_mapping(self):
        assert file_extension(Language.JS) == "js"
        assert file_extension(Language.TS) == "ts"

    def test_accepts_aliases(self):
        assert file_extension("typed") == "ts"

    def test_rejects_unknown(self):
        with pytest.raises(UnsupportedLanguageError):
            file_extension("py")


class TestPackageJson:
    def test_key_order_and_defaults(self):
        manifest = json.loads(package_json("demo"))
        assert list(manifest) == [
            "name", "version", "description", "main", "scripts",
            "dependencies", "devDependencies", "keywords", "author", "license",
        ]
        assert manifest["name"] == "demo"
        assert manifest["version"] == "1.0.0"
        assert manifest["description"] == "A demo project"
        assert manifest["scripts"] == {"start": "node src/index.js"}
        assert manifest["dependencies"] == {}
        assert manifest["devDependencies"] == {}
        assert manifest["license"] == "MIT"

    def test_start_follows_main(self):
        manifest = json.loads(package_json("demo", main="dist/index.js"))
        assert manifest["scripts"]["start"] == "node dist/index.js"

    def test_explicit_start_wins(self):
        manifest = json.loads(package_json("demo", scripts={"start": "vite", "build": "x"}))
        assert manifest["scripts"] == {"start": "vite", "build": "x"}

    def test_two_space_indent(self):
        assert package_json("demo").splitlines()[1].startswith('  "name"')


class TestTypescriptHelpers:
    def test_dev_dependencies(self):
        deps = typescript_dev_dependencies(**{"@types/express": "^4"})
        assert deps["typescript"] == TYPESCRIPT_VERSION
        assert "@types/node" in deps
        assert deps["@types/express"] == "^4"

    def test_node_tsconfig(self):
        options = json.loads(node_tsconfig())["compilerOptions"]
        assert options["outDir"] == "./dist"
        assert options["rootDir"] == "./src"
        assert options["declaration"] is True


class TestCommonPayloads:
    def test_gitignore(self):
        assert "node_modules/" in gitignore()

    def test_readme(self):
        text = readme("demo", "Some description.", "ts")
        assert text.startswith("# demo")
        assert "Some description." in text
