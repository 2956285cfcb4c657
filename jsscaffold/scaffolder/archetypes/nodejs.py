"""Plain Node.js runtime project: an entry point, a logger and a config module."""

from __future__ import annotations

from ...models import FileTree, Language
from ..builders import (
    DOTENV_VERSION,
    NODEMON_VERSION,
    TS_NODE_VERSION,
    file_extension,
    gitignore,
    node_tsconfig,
    package_json,
    readme,
    render,
    typescript_dev_dependencies,
)

DIRECTORIES = [
    "src",
    "src/utils",
    "src/config",
]

DEPENDENCIES = {
    "dotenv": DOTENV_VERSION,
}


def build_file_tree(project_name: str, language: Language) -> FileTree:
    ext = file_extension(language)
    ctx = {"project_name": project_name, "ext": ext}

    files: dict[str, str] = {
        f"src/index.{ext}": render(f"nodejs/index.{ext}.j2", **ctx),
        f"src/utils/logger.{ext}": render(f"nodejs/logger.{ext}.j2", **ctx),
        f"src/config/app.{ext}": render(f"nodejs/app-config.{ext}.j2", **ctx),
    }

    if language.is_typed:
        files["package.json"] = package_json(
            project_name,
            main="dist/index.js",
            scripts={
                "start": "node dist/index.js",
                "dev": "nodemon --exec ts-node src/index.ts",
                "build": "tsc",
            },
            dependencies=DEPENDENCIES,
            dev_dependencies=typescript_dev_dependencies(
                nodemon=NODEMON_VERSION, **{"ts-node": TS_NODE_VERSION}
            ),
        )
        files["tsconfig.json"] = node_tsconfig()
    else:
        files["package.json"] = package_json(
            project_name,
            scripts={
                "start": "node src/index.js",
                "dev": "nodemon src/index.js",
                "build": "echo 'No build step needed for JavaScript'",
            },
            dependencies=DEPENDENCIES,
            dev_dependencies={"nodemon": NODEMON_VERSION},
        )

    files[".gitignore"] = gitignore()
    files["README.md"] = readme(project_name, "A basic Node.js project.", ext)
    files[".env.example"] = render("nodejs/env.example.j2", **ctx)

    return FileTree(directories=list(DIRECTORIES), files=files)
