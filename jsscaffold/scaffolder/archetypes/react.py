"""React single-page app bundled with Vite."""

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
    "src/components",
    "src/hooks",
    "src/utils",
    "src/styles",
    "public",
]

REACT_VERSION = "^18.2.0"

DEPENDENCIES = {
    "react": REACT_VERSION,
    "react-dom": REACT_VERSION,
}

DEV_DEPENDENCIES = {
    "@vitejs/plugin-react": "^4.2.0",
    "eslint": "^8.55.0",
    "eslint-plugin-react-hooks": "^4.6.0",
    "eslint-plugin-react-refresh": "^0.4.5",
    "vite": "^5.0.0",
}

TYPED_DEV_DEPENDENCIES = {
    "@types/react": REACT_VERSION,
    "@types/react-dom": REACT_VERSION,
    "@typescript-eslint/eslint-plugin": "^6.14.0",
    "@typescript-eslint/parser": "^6.14.0",
}


def tsconfig() -> str:
    return dump_json({
        "compilerOptions": {
            "target": "ES2020",
            "useDefineForClassFields": True,
            "lib": ["ES2020", "DOM", "DOM.Iterable"],
            "module": "ESNext",
            "skipLibCheck": True,
            "moduleResolution": "bundler",
            "allowImportingTsExtensions": True,
            "resolveJsonModule": True,
            "isolatedModules": True,
            "noEmit": True,
            "jsx": "react-jsx",
            "strict": True,
            "noUnusedLocals": True,
            "noUnusedParameters": True,
            "noFallthroughCasesInSwitch": True,
        },
        "include": ["src"],
        "references": [{"path": "./tsconfig.node.json"}],
    })


def tsconfig_node() -> str:
    """Settings for the Vite config file, which runs under Node."""
    return dump_json({
        "compilerOptions": {
            "composite": True,
            "skipLibCheck": True,
            "module": "ESNext",
            "moduleResolution": "bundler",
            "allowSyntheticDefaultImports": True,
        },
        "include": ["vite.config.ts"],
    })


def build_file_tree(project_name: str, language: Language) -> FileTree:
    ext = file_extension(language)
    ctx = {"project_name": project_name, "ext": ext}

    files: dict[str, str] = {
        f"vite.config.{ext}": render(f"react/vite.config.{ext}.j2", **ctx),
        f"src/main.{ext}": render(f"react/main.{ext}.j2", **ctx),
        f"src/App.{ext}": render("react/App.j2", **ctx),
        "src/index.css": render("react/index.css.j2", **ctx),
        f"src/components/Header.{ext}": render("react/Header.j2", **ctx),
        f"src/components/Footer.{ext}": render("react/Footer.j2", **ctx),
        f"src/hooks/useLocalStorage.{ext}": render(
            f"react/useLocalStorage.{ext}.j2", **ctx
        ),
        f"src/utils/helpers.{ext}": render(f"react/helpers.{ext}.j2", **ctx),
    }

    scripts = {
        "start": "vite",
        "dev": "vite",
        "build": "vite build",
        "preview": "vite preview",
        "lint": f"eslint . --ext {ext} --report-unused-disable-directives --max-warnings 0",
    }
    dev_dependencies = dict(DEV_DEPENDENCIES)
    if language.is_typed:
        dev_dependencies.update(typescript_dev_dependencies(**TYPED_DEV_DEPENDENCIES))

    files["package.json"] = package_json(
        project_name,
        main=f"src/main.{ext}",
        scripts=scripts,
        dependencies=DEPENDENCIES,
        dev_dependencies=dev_dependencies,
    )
    if language.is_typed:
        files["tsconfig.json"] = tsconfig()
        files["tsconfig.node.json"] = tsconfig_node()

    files["index.html"] = render("react/index.html.j2", **ctx)
    files[".eslintrc.cjs"] = render(f"react/eslintrc.{ext}.j2", **ctx)
    files[".gitignore"] = render("react/gitignore.j2", **ctx)
    files["README.md"] = render("react/README.md.j2", **ctx)

    return FileTree(directories=list(DIRECTORIES), files=files)
