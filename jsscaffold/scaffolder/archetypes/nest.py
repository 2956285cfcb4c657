"""NestJS API server.

NestJS is TypeScript-first, so this archetype always emits the typed
variant and ignores the requested language.
"""

from __future__ import annotations

from ...models import FileTree, Language
from ..builders import (
    TS_NODE_VERSION,
    dump_json,
    package_json,
    render,
    typescript_dev_dependencies,
)

DIRECTORIES = [
    "src",
    "src/controllers",
    "src/services",
    "src/modules",
    "src/dto",
    "src/entities",
    "src/config",
    "src/common",
    "src/common/decorators",
    "src/common/guards",
    "src/common/interceptors",
    "test",
]

# Output path -> payload under templates/nest/
SOURCES = {
    "src/main.ts": "main.ts.j2",
    "src/app.ts": "app.ts.j2",
    "src/app.module.ts": "app.module.ts.j2",
    "src/controllers/app.controller.ts": "app.controller.ts.j2",
    "src/services/app.service.ts": "app.service.ts.j2",
    "src/dto/create-example.dto.ts": "create-example.dto.ts.j2",
    "src/entities/example.entity.ts": "example.entity.ts.j2",
    "src/config/database.config.ts": "database.config.ts.j2",
    "src/common/decorators/api-response.decorator.ts": "api-response.decorator.ts.j2",
    "test/app.e2e-spec.ts": "app.e2e-spec.ts.j2",
}

NEST_VERSION = "^10.0.0"

DEPENDENCIES = {
    "@nestjs/common": NEST_VERSION,
    "@nestjs/core": NEST_VERSION,
    "@nestjs/platform-express": NEST_VERSION,
    "@nestjs/swagger": "^7.0.0",
    "@nestjs/typeorm": "^10.0.1",
    "class-transformer": "^0.5.1",
    "class-validator": "^0.14.0",
    "pg": "^8.11.3",
    "reflect-metadata": "^0.1.13",
    "rxjs": "^7.8.1",
    "typeorm": "^0.3.17",
}

DEV_DEPENDENCIES = {
    "@nestjs/cli": NEST_VERSION,
    "@nestjs/schematics": NEST_VERSION,
    "@nestjs/testing": NEST_VERSION,
    "@types/express": "^4.17.21",
    "@types/jest": "^29.5.2",
    "@types/supertest": "^2.0.12",
    "@typescript-eslint/eslint-plugin": "^6.14.0",
    "@typescript-eslint/parser": "^6.14.0",
    "eslint": "^8.55.0",
    "eslint-config-prettier": "^9.1.0",
    "eslint-plugin-prettier": "^5.0.1",
    "jest": "^29.5.0",
    "prettier": "^3.1.1",
    "source-map-support": "^0.5.21",
    "supertest": "^6.3.3",
    "ts-jest": "^29.1.0",
    "ts-loader": "^9.4.3",
    "ts-node": TS_NODE_VERSION,
    "tsconfig-paths": "^4.2.1",
}

SCRIPTS = {
    "build": "nest build",
    "format": 'prettier --write "src/**/*.ts" "test/**/*.ts"',
    "start": "nest start",
    "start:dev": "nest start --watch",
    "start:debug": "nest start --debug --watch",
    "start:prod": "node dist/main",
    "lint": 'eslint "{src,apps,libs,test}/**/*.ts" --fix',
    "test": "jest",
    "test:watch": "jest --watch",
    "test:cov": "jest --coverage",
    "test:debug": (
        "node --inspect-brk -r tsconfig-paths/register -r ts-node/register "
        "node_modules/.bin/jest --runInBand"
    ),
    "test:e2e": "jest --config ./test/jest-e2e.json",
}


def tsconfig() -> str:
    return dump_json({
        "compilerOptions": {
            "module": "commonjs",
            "declaration": True,
            "removeComments": True,
            "emitDecoratorMetadata": True,
            "experimentalDecorators": True,
            "allowSyntheticDefaultImports": True,
            "target": "ES2020",
            "sourceMap": True,
            "outDir": "./dist",
            "baseUrl": "./",
            "incremental": True,
            "skipLibCheck": True,
            "strictNullChecks": False,
            "noImplicitAny": False,
            "strictBindCallApply": False,
            "forceConsistentCasingInFileNames": False,
            "noFallthroughCasesInSwitch": False,
        },
    })


def tsconfig_build() -> str:
    return dump_json({
        "extends": "./tsconfig.json",
        "exclude": ["node_modules", "test", "dist", "**/*spec.ts"],
    })


def jest_e2e_config() -> str:
    return dump_json({
        "moduleFileExtensions": ["js", "json", "ts"],
        "rootDir": ".",
        "testEnvironment": "node",
        "testRegex": ".e2e-spec.ts$",
        "transform": {"^.+\\.(t|j)s$": "ts-jest"},
    })


def nest_cli_config() -> str:
    return dump_json({
        "collection": "@nestjs/schematics",
        "sourceRoot": "src",
        "entryFile": "main",
    })


def prettier_config() -> str:
    return dump_json({"singleQuote": True, "trailingComma": "all"})


def build_file_tree(project_name: str, language: Language) -> FileTree:
    """Build the NestJS tree. *language* is accepted and ignored."""
    ctx = {"project_name": project_name, "ext": "ts"}

    files: dict[str, str] = {
        path: render(f"nest/{payload}", **ctx) for path, payload in SOURCES.items()
    }
    files["test/jest-e2e.json"] = jest_e2e_config()

    files["package.json"] = package_json(
        project_name,
        main="dist/main.js",
        scripts=SCRIPTS,
        dependencies=DEPENDENCIES,
        dev_dependencies={
            **DEV_DEPENDENCIES,
            **typescript_dev_dependencies(),
        },
    )
    files["tsconfig.json"] = tsconfig()
    files["tsconfig.build.json"] = tsconfig_build()
    files["nest-cli.json"] = nest_cli_config()
    files["jest.config.js"] = render("nest/jest.config.js.j2", **ctx)
    files[".eslintrc.js"] = render("nest/eslintrc.js.j2", **ctx)
    files[".prettierrc"] = prettier_config()
    files[".gitignore"] = render("nest/gitignore.j2", **ctx)
    files["README.md"] = render("nest/README.md.j2", **ctx)

    return FileTree(directories=list(DIRECTORIES), files=files)
