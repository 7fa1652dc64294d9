"""widgetgen configuration.

Typed settings for a generation run. Uses a Pydantic v2 model so values are
validated at construction time and can be serialised to/from JSON or read
from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Settings shared by the generator, the materializer and the CLI."""

    template_dir: Path = Field(
        default=DEFAULT_TEMPLATE_DIR,
        description="Root of the widget template tree (static assets and _-prefixed templates)",
    )
    quiet: bool = Field(default=False, description="Suppress per-file 'create' output")

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            WIDGETGEN_TEMPLATE_DIR, WIDGETGEN_QUIET.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("WIDGETGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["WIDGETGEN_TEMPLATE_DIR"])
        if os.environ.get("WIDGETGEN_QUIET"):
            kwargs["quiet"] = os.environ["WIDGETGEN_QUIET"].strip().lower() in _TRUTHY
        return cls(**kwargs)
