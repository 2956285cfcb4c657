"""Next.js App Router project styled with Tailwind CSS."""

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
    "src/lib",
    "src/styles",
    "src/app",
    "src/app/api",
    "src/app/api/hello",
    "public",
]

REACT_VERSION = "^18.2.0"

DEPENDENCIES = {
    "next": "14.0.4",
    "react": REACT_VERSION,
    "react-dom": REACT_VERSION,
}

DEV_DEPENDENCIES = {
    "autoprefixer": "^10.4.16",
    "eslint": "^8.55.0",
    "eslint-config-next": "14.0.4",
    "postcss": "^8.4.32",
    "tailwindcss": "^3.3.6",
}

SCRIPTS = {
    "dev": "next dev",
    "build": "next build",
    "start": "next start",
    "lint": "next lint",
}


def eslint_config() -> str:
    return dump_json({"extends": "next/core-web-vitals"})


def tsconfig() -> str:
    return dump_json({
        "compilerOptions": {
            "target": "es5",
            "lib": ["dom", "dom.iterable", "es6"],
            "allowJs": True,
            "skipLibCheck": True,
            "strict": True,
            "noEmit": True,
            "esModuleInterop": True,
            "module": "esnext",
            "moduleResolution": "bundler",
            "resolveJsonModule": True,
            "isolatedModules": True,
            "jsx": "preserve",
            "incremental": True,
            "plugins": [{"name": "next"}],
            "paths": {"@/*": ["./src/*"]},
        },
        "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
        "exclude": ["node_modules"],
    })


def build_file_tree(project_name: str, language: Language) -> FileTree:
    ext = file_extension(language)
    ctx = {"project_name": project_name, "ext": ext}

    files: dict[str, str] = {
        f"src/app/layout.{ext}": render(f"nextjs/layout.{ext}.j2", **ctx),
        f"src/app/page.{ext}": render("nextjs/page.j2", **ctx),
        "src/app/globals.css": render("nextjs/globals.css.j2", **ctx),
        f"src/app/api/hello/route.{ext}": render(f"nextjs/route.{ext}.j2", **ctx),
        f"src/components/Header.{ext}": render("nextjs/Header.j2", **ctx),
        f"src/components/Footer.{ext}": render("nextjs/Footer.j2", **ctx),
        f"src/lib/utils.{ext}": render(f"nextjs/utils.{ext}.j2", **ctx),
    }

    scripts = dict(SCRIPTS)
    dev_dependencies = dict(DEV_DEPENDENCIES)
    if language.is_typed:
        dev_dependencies.update(typescript_dev_dependencies(**{
            "@types/react": REACT_VERSION,
            "@types/react-dom": REACT_VERSION,
        }))

    files["package.json"] = package_json(
        project_name,
        main=f"src/app/page.{ext}",
        scripts=scripts,
        dependencies=DEPENDENCIES,
        dev_dependencies=dev_dependencies,
    )
    if language.is_typed:
        files["tsconfig.json"] = tsconfig()

    files["next.config.js"] = render("nextjs/next.config.js.j2", **ctx)
    files["tailwind.config.js"] = render("nextjs/tailwind.config.js.j2", **ctx)
    files["postcss.config.js"] = render("nextjs/postcss.config.js.j2", **ctx)
    files[".eslintrc.json"] = eslint_config()
    files[".gitignore"] = render("nextjs/gitignore.j2", **ctx)
    files["README.md"] = render("nextjs/README.md.j2", **ctx)

    return FileTree(directories=list(DIRECTORIES), files=files)
