"""jsscaffold -- generate JavaScript and TypeScript starter projects."""

from jsscaffold.errors import (
    DirectoryAlreadyExistsError,
    ScaffoldError,
    UnknownArchetypeError,
    UnsupportedLanguageError,
)
from jsscaffold.models import ArchetypeId, FileTree, Language, ProjectDescriptor

__version__ = "1.0.0"

__all__ = [
    "ArchetypeId",
    "DirectoryAlreadyExistsError",
    "FileTree",
    "Language",
    "ProjectDescriptor",
    "ScaffoldError",
    "UnknownArchetypeError",
    "UnsupportedLanguageError",
    "__version__",
]
