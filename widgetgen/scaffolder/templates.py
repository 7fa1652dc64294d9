"""Jinja2 template rendering for widget scaffolding.

Provides the TemplateRenderer class which loads templates from the widget
template tree (``widgetgen/templates/`` by default) and renders them with
one of the bound contexts.  Template files are marked by a leading
underscore in their file name; everything else in the tree is a static asset.
"""

from __future__ import annotations

import asyncio
import errno
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from widgetgen.config import DEFAULT_TEMPLATE_DIR


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders widget templates.

    Undefined context keys raise instead of rendering as empty strings, so a
    template can never silently lose a value its context failed to provide.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def source_path(self, template_path: str) -> Path:
        """Absolute path of *template_path* inside the template tree."""
        return self.template_dir / template_path

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"src/js/_widget.js"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            FileNotFoundError: If the template does not exist.
            jinja2.TemplateError: If the template is malformed or uses a key
                the context does not provide.
        """
        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as exc:
            raise FileNotFoundError(
                errno.ENOENT, "template not found", str(self.source_path(template_path))
            ) from exc
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  Returns the output
        path.
        """
        content = await asyncio.to_thread(self.render, template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
