"""Main scaffolding orchestrator.

Takes a destination, a widget name and the prompt answers, and runs the
resolve -> bind -> materialize sequence that produces a web-widget project.
The destination is always passed explicitly; the process working directory
is never changed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from widgetgen.config import GeneratorConfig

from .contexts import bind_contexts
from .features import FeatureFlags, normalize
from .manifest import ManifestEntry, resolve_manifest
from .materializer import Materializer
from .templates import TemplateRenderer


class GenerationResult(BaseModel):
    """Outcome of a successful generation run."""

    root: Path = Field(..., description="Absolute destination root")
    flags: FeatureFlags
    manifest: list[ManifestEntry] = Field(default_factory=list)
    written: list[Path] = Field(default_factory=list)


class WidgetGenerator:
    """Generates a widget project from prompt answers.

    Example::

        generator = WidgetGenerator(GeneratorConfig(quiet=True))
        root = await generator.generate(
            "./stock-ticker",
            "Stock Ticker",
            {
                "enablePreferencesSupport": True,
                "enableEventsSupport": False,
                "enableDataSourceSupport": True,
                "enableQuotesSupport": True,
            },
        )
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = TemplateRenderer(self.config.template_dir)
        self.materializer = Materializer(self.renderer, quiet=self.config.quiet)

    # -- Public API --------------------------------------------------------

    async def generate(
        self,
        destination: str | Path,
        name: str,
        answers: Mapping[str, Any],
    ) -> Path:
        """Generate the project and return its absolute root directory."""
        result = await self.run(destination, name, answers)
        return result.root

    async def run(
        self,
        destination: str | Path,
        name: str,
        answers: Mapping[str, Any],
    ) -> GenerationResult:
        """Generate the project and return the full ``GenerationResult``.

        Args:
            destination: Project root; created if missing.
            name: Widget name used when the answers leave ``widgetName``
                blank.
            answers: The prompting collaborator's answer object.

        Raises:
            ValidationError: If the answers do not yield a widget name.
            MaterializeError: If any file operation fails.
        """
        flags = normalize(with_widget_name(answers, name))
        root = Path(destination).resolve()
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

        manifest = resolve_manifest(flags)
        contexts = bind_contexts(flags)
        written = await self.materializer.materialize(manifest, contexts, root)

        return GenerationResult(root=root, flags=flags, manifest=manifest, written=written)


def with_widget_name(answers: Mapping[str, Any], name: str) -> dict[str, Any]:
    """Return a copy of *answers* whose ``widgetName`` falls back to *name*."""
    merged = dict(answers)
    current = merged.get("widgetName", merged.get("widget_name"))
    if not str(current or "").strip():
        merged.pop("widget_name", None)
        merged["widgetName"] = name
    return merged
