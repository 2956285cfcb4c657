"""Express.js server with an MVC layout.

Controllers, models, routes and middleware each get their own directory
under ``src/``, with one example module per directory.
"""

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
    "src/controllers",
    "src/models",
    "src/routes",
    "src/middleware",
    "src/config",
    "src/utils",
]

# Output path (without extension) -> payload stem under templates/express/
SOURCES = {
    "src/app": "app",
    "src/controllers/exampleController": "exampleController",
    "src/models/exampleModel": "exampleModel",
    "src/routes/exampleRoute": "exampleRoute",
    "src/middleware/errorHandler": "errorHandler",
    "src/config/database": "database",
    "src/utils/logger": "logger",
    "src/index": "index",
}

DEPENDENCIES = {
    "express": "^4.18.2",
    "cors": "^2.8.5",
    "helmet": "^7.1.0",
    "morgan": "^1.10.0",
    "dotenv": DOTENV_VERSION,
}

TYPE_PACKAGES = {
    "@types/express": "^4.17.21",
    "@types/cors": "^2.8.17",
    "@types/morgan": "^1.9.9",
}


def build_file_tree(project_name: str, language: Language) -> FileTree:
    ext = file_extension(language)
    ctx = {"project_name": project_name, "ext": ext}

    files: dict[str, str] = {
        f"{path}.{ext}": render(f"express/{stem}.{ext}.j2", **ctx)
        for path, stem in SOURCES.items()
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
            dev_dependencies={
                **TYPE_PACKAGES,
                **typescript_dev_dependencies(
                    nodemon=NODEMON_VERSION, **{"ts-node": TS_NODE_VERSION}
                ),
            },
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
    files["README.md"] = readme(
        project_name, "A Node.js Express.js project with MVC structure.", ext
    )
    files[".env.example"] = render("express/env.example.j2", **ctx)

    return FileTree(directories=list(DIRECTORIES), files=files)
