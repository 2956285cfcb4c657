"""React Native app with stack navigation.

``android/`` and ``ios/`` are created empty; the native projects are left to
the React Native CLI.
"""

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
    "src/screens",
    "src/navigation",
    "src/services",
    "src/utils",
    "src/assets",
    "src/assets/images",
    "src/assets/icons",
    "android",
    "ios",
]

DEPENDENCIES = {
    "react": "18.2.0",
    "react-native": "0.72.6",
    "@react-navigation/native": "^6.1.9",
    "@react-navigation/stack": "^6.3.20",
    "react-native-gesture-handler": "^2.13.4",
    "react-native-reanimated": "^3.5.4",
    "react-native-safe-area-context": "^4.7.4",
    "react-native-screens": "^3.25.0",
}

DEV_DEPENDENCIES = {
    "@babel/core": "^7.20.0",
    "@react-native/metro-config": "^0.72.11",
    "eslint": "^8.19.0",
    "jest": "^29.2.1",
    "metro-react-native-babel-preset": "0.76.8",
}

TYPED_DEV_DEPENDENCIES = {
    "@babel/plugin-transform-typescript": "^7.23.0",
    "@tsconfig/react-native": "^3.0.2",
    "@types/react": "^18.2.6",
}

SCRIPTS = {
    "android": "react-native run-android",
    "ios": "react-native run-ios",
    "start": "react-native start",
    "test": "jest",
    "lint": "eslint . --ext .js,.jsx,.ts,.tsx",
}

# Metro compiles through babel, which reads JSX in .ts files; tsc does not.
BUNDLE_SCRIPT = (
    "mkdir -p build && react-native bundle --platform android --dev false "
    "--entry-file index.ts --bundle-output build/index.android.bundle "
    "--assets-dest build"
)


def app_config(project_name: str) -> str:
    """``app.json``; ``name`` must match the component registered in ``index``."""
    return dump_json({"name": project_name, "displayName": project_name})


def tsconfig() -> str:
    return dump_json({
        "extends": "@tsconfig/react-native/tsconfig.json",
        "compilerOptions": {"jsx": "react-native", "strict": True},
        "include": ["App.ts", "index.ts", "src/**/*"],
    })


def build_file_tree(project_name: str, language: Language) -> FileTree:
    ext = file_extension(language)
    ctx = {"project_name": project_name, "ext": ext}

    files: dict[str, str] = {
        f"App.{ext}": render("react_native/App.j2", **ctx),
        f"index.{ext}": render("react_native/index.j2", **ctx),
        f"src/components/Header.{ext}": render(f"react_native/Header.{ext}.j2", **ctx),
        f"src/screens/HomeScreen.{ext}": render("react_native/HomeScreen.j2", **ctx),
        f"src/navigation/AppNavigator.{ext}": render(
            "react_native/AppNavigator.j2", **ctx
        ),
        f"src/services/api.{ext}": render(f"react_native/api.{ext}.j2", **ctx),
        f"src/utils/helpers.{ext}": render(f"react_native/helpers.{ext}.j2", **ctx),
        "app.json": app_config(project_name),
        "metro.config.js": render("react_native/metro.config.js.j2", **ctx),
        "react-native.config.js": render("react_native/react-native.config.js.j2", **ctx),
    }

    scripts = dict(SCRIPTS)
    dev_dependencies = dict(DEV_DEPENDENCIES)
    if language.is_typed:
        scripts["build"] = BUNDLE_SCRIPT
        dev_dependencies.update(typescript_dev_dependencies(**TYPED_DEV_DEPENDENCIES))
        files["babel.config.js"] = render("react_native/babel.config.typed.js.j2", **ctx)
        files["tsconfig.json"] = tsconfig()
    else:
        files["babel.config.js"] = render("react_native/babel.config.js.j2", **ctx)

    files["package.json"] = package_json(
        project_name,
        main=f"index.{ext}",
        scripts=scripts,
        dependencies=DEPENDENCIES,
        dev_dependencies=dev_dependencies,
    )
    files[".gitignore"] = render("react_native/gitignore.j2", **ctx)
    files["README.md"] = render("react_native/README.md.j2", **ctx)

    return FileTree(directories=list(DIRECTORIES), files=files)
