"""Electron desktop app with separate main, preload and renderer sources."""

from __future__ import annotations

from ...models import FileTree, Language
from ..builders import (
    dump_json,
    file_extension,
    package_json,
    render,
    typescript_dev_dependencies,
)

DIRECTORIES = [
    "src",
    "src/main",
    "src/renderer",
    "src/renderer/components",
    "src/renderer/styles",
    "src/preload",
    "public",
    "build",
]

DEV_DEPENDENCIES = {
    "cross-env": "^7.0.3",
    "electron": "^27.0.0",
    "electron-builder": "^24.6.4",
}

PACKAGE_TARGETS = {
    "dist": "electron-builder",
    "dist:win": "electron-builder --win",
    "dist:mac": "electron-builder --mac",
    "dist:linux": "electron-builder --linux",
}


def builder_config(project_name: str, output_root: str) -> str:
    """electron-builder settings; *output_root* is where the app's JS lives."""
    return dump_json({
        "appId": f"com.example.{project_name}",
        "productName": project_name,
        "directories": {"output": "release", "buildResources": "build"},
        "files": [f"{output_root}/**/*", "package.json"],
        "mac": {"category": "public.app-category.utilities", "target": "dmg"},
        "win": {"target": "nsis"},
        "linux": {"target": "AppImage"},
    })


def tsconfig() -> str:
    return dump_json({
        "compilerOptions": {
            "target": "ES2020",
            "module": "commonjs",
            "lib": ["ES2020", "DOM"],
            "outDir": "./dist",
            "rootDir": "./src",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "resolveJsonModule": True,
            "sourceMap": True,
        },
        "include": ["src/**/*"],
        "exclude": ["node_modules", "dist", "release"],
    })


def build_file_tree(project_name: str, language: Language) -> FileTree:
    ext = file_extension(language)
    ctx = {"project_name": project_name, "ext": ext}

    files: dict[str, str] = {
        f"src/main/main.{ext}": render(f"electron/main.{ext}.j2", **ctx),
        f"src/preload/preload.{ext}": render(f"electron/preload.{ext}.j2", **ctx),
        "src/renderer/index.html": render("electron/index.html.j2", **ctx),
        f"src/renderer/renderer.{ext}": render(f"electron/renderer.{ext}.j2", **ctx),
        "src/renderer/styles/main.css": render("electron/main.css.j2", **ctx),
    }

    if language.is_typed:
        files["package.json"] = package_json(
            project_name,
            main="dist/main/main.js",
            scripts={
                "start": "electron .",
                "prestart": "npm run build",
                "dev": "npm run build && cross-env NODE_ENV=development electron .",
                "build": "tsc && npm run copy:renderer",
                "copy:renderer": 'copyfiles -u 1 "src/renderer/**/*.{html,css}" dist',
                "predist": "npm run build",
                **PACKAGE_TARGETS,
            },
            dev_dependencies={
                **DEV_DEPENDENCIES,
                **typescript_dev_dependencies(copyfiles="^2.4.1"),
            },
        )
        files["tsconfig.json"] = tsconfig()
        files["electron-builder.json"] = builder_config(project_name, "dist")
    else:
        files["package.json"] = package_json(
            project_name,
            main="src/main/main.js",
            scripts={
                "start": "electron .",
                "dev": "cross-env NODE_ENV=development electron .",
                **PACKAGE_TARGETS,
            },
            dev_dependencies=DEV_DEPENDENCIES,
        )
        files["electron-builder.json"] = builder_config(project_name, "src")

    files[".gitignore"] = render("electron/gitignore.j2", **ctx)
    files["README.md"] = render("electron/README.md.j2", **ctx)

    return FileTree(directories=list(DIRECTORIES), files=files)
