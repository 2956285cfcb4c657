"""Jinja2 loading for the static file payloads of each archetype.

Payloads live as ``.j2`` files under ``jsscaffold/scaffolder/templates/``,
one sub-directory per archetype plus ``common/``.  They only interpolate known
values (``project_name``, ``ext``); choosing which payload goes where is done
by the archetype modules in Python.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders ``.j2`` payloads with a small context dictionary.

    Undefined variables raise instead of rendering as empty strings, so a
    typo in a payload fails loudly at generation time.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"nodejs/index.js.j2"``).
            context: Variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))


@lru_cache(maxsize=1)
def get_renderer() -> TemplateRenderer:
    """Shared renderer over the packaged template directory."""
    return TemplateRenderer()
