"""jsscaffold configuration.

Typed settings for the CLI and the dispatcher.  Like every other model in the
package this is a Pydantic v2 model, so it can be validated on construction
and rebuilt from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .models import ArchetypeId, Language

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Config(BaseModel):
    """Global jsscaffold configuration.

    ``working_dir`` of ``None`` means "the current directory at the time of
    the call", so a ``Config`` built at import time still follows ``chdir``.
    """

    working_dir: Path | None = Field(
        default=None, description="Directory new projects are created in"
    )
    default_archetype: ArchetypeId | None = Field(
        default=None, description="Project type used when none is given"
    )
    default_language: Language = Field(
        default=Language.JS, description="Language used when none is given"
    )
    interactive: bool = Field(
        default=True, description="Prompt for values missing from the command line"
    )

    @field_validator("default_archetype", mode="before")
    @classmethod
    def _parse_archetype(cls, value: Any) -> ArchetypeId | None:
        if value is None or value == "":
            return None
        return ArchetypeId.parse(value)

    @field_validator("default_language", mode="before")
    @classmethod
    def _parse_language(cls, value: Any) -> Language:
        return Language.parse(value)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def resolve_working_dir(self) -> Path:
        """Base directory for new projects."""
        if self.working_dir is None:
            return Path.cwd()
        return Path(self.working_dir)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            JSSCAFFOLD_WORKING_DIR, JSSCAFFOLD_TYPE, JSSCAFFOLD_LANGUAGE,
            JSSCAFFOLD_INTERACTIVE.

        Raises:
            UnknownArchetypeError: JSSCAFFOLD_TYPE is not a known project type.
            UnsupportedLanguageError: JSSCAFFOLD_LANGUAGE is not js/ts.
            ValueError: JSSCAFFOLD_INTERACTIVE is not a boolean word.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("JSSCAFFOLD_WORKING_DIR"):
            kwargs["working_dir"] = Path(os.environ["JSSCAFFOLD_WORKING_DIR"])
        if os.environ.get("JSSCAFFOLD_TYPE"):
            kwargs["default_archetype"] = ArchetypeId.parse(os.environ["JSSCAFFOLD_TYPE"])
        if os.environ.get("JSSCAFFOLD_LANGUAGE"):
            kwargs["default_language"] = Language.parse(os.environ["JSSCAFFOLD_LANGUAGE"])
        if os.environ.get("JSSCAFFOLD_INTERACTIVE"):
            kwargs["interactive"] = _parse_bool(os.environ["JSSCAFFOLD_INTERACTIVE"])
        return cls(**kwargs)


def _parse_bool(value: str) -> bool:
    key = value.strip().lower()
    if key in _TRUE_VALUES:
        return True
    if key in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean value, got {value!r}")
