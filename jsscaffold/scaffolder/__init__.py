"""Project scaffolder -- writes JavaScript/TypeScript starter projects.

Each archetype (``nodejs``, ``express``, ``nextjs``, ``react``, ``nest``,
``electron``, ``react-native``) builds a ``FileTree`` from a project name and
a language variant; ``ProjectGenerator`` checks the destination and hands the
tree to a ``FileEmitter``.

Quick usage::

    from jsscaffold.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    project_path = await generator.generate_project("my-api", "express", "ts")
"""

from jsscaffold.scaffolder.base import ArchetypeGenerator
from jsscaffold.scaffolder.emitter import FileEmitter
from jsscaffold.scaffolder.generator import GENERATORS, ProjectGenerator
from jsscaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArchetypeGenerator",
    "FileEmitter",
    "GENERATORS",
    "ProjectGenerator",
    "TemplateRenderer",
]
