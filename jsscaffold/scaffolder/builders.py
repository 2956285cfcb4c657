"""Helpers shared by every archetype.

* extension selection (``js`` -> ``"js"``, ``ts`` -> ``"ts"``)
* ``package.json`` and ``tsconfig.json`` builders
* rendering of the payloads common to several archetypes (README, .gitignore)
"""

from __future__ import annotations

import json
from typing import Any

from ..models import Language
from .templates import get_renderer

# Versions pinned into generated manifests.
TYPESCRIPT_VERSION = "^5.3.2"
NODE_TYPES_VERSION = "^20.10.0"
NODEMON_VERSION = "^3.0.2"
TS_NODE_VERSION = "^10.9.1"
DOTENV_VERSION = "^16.3.1"


def file_extension(language: Language) -> str:
    """Map a language variant to the extension of its source files."""
    return "ts" if Language.parse(language).is_typed else "js"


def dump_json(data: Any) -> str:
    """Serialise *data* the way every generated ``.json`` file is written."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def render(template_path: str, **context: Any) -> str:
    """Render a packaged payload with keyword context."""
    return get_renderer().render(template_path, context)


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------

def package_json(
    project_name: str,
    *,
    main: str = "src/index.js",
    scripts: dict[str, str] | None = None,
    dependencies: dict[str, str] | None = None,
    dev_dependencies: dict[str, str] | None = None,
    description: str | None = None,
) -> str:
    """Build the project manifest.

    ``scripts.start`` defaults to ``node <main>``; an explicit ``start`` in
    *scripts* replaces it.  ``dependencies`` and ``devDependencies`` are
    always present, possibly empty.
    """
    manifest = {
        "name": project_name,
        "version": "1.0.0",
        "description": description or f"A {project_name} project",
        "main": main,
        "scripts": {"start": f"node {main}", **(scripts or {})},
        "dependencies": dict(dependencies or {}),
        "devDependencies": dict(dev_dependencies or {}),
        "keywords": [],
        "author": "",
        "license": "MIT",
    }
    return dump_json(manifest)


def typescript_dev_dependencies(**extra: str) -> dict[str, str]:
    """Type-checker toolchain entries, with extra ``@types`` packages appended."""
    deps = {
        "@types/node": NODE_TYPES_VERSION,
        "typescript": TYPESCRIPT_VERSION,
    }
    deps.update(extra)
    return deps


# ---------------------------------------------------------------------------
# tsconfig.json
# ---------------------------------------------------------------------------

def node_tsconfig() -> str:
    """Compiler settings for projects compiled from ``src/`` into ``dist/``."""
    return dump_json({
        "compilerOptions": {
            "target": "ES2020",
            "module": "commonjs",
            "lib": ["ES2020"],
            "outDir": "./dist",
            "rootDir": "./src",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "resolveJsonModule": True,
            "declaration": True,
            "declarationMap": True,
            "sourceMap": True,
        },
        "include": ["src/**/*"],
        "exclude": ["node_modules", "dist", "**/*.test.ts"],
    })


# ---------------------------------------------------------------------------
# Common payloads
# ---------------------------------------------------------------------------

def gitignore() -> str:
    return render("common/gitignore.j2")


def readme(project_name: str, description: str, ext: str = "js") -> str:
    """Generic README used by archetypes without a dedicated one."""
    return render(
        "common/README.md.j2",
        project_name=project_name,
        description=description,
        ext=ext,
    )
