"""File manifest resolution.

Maps a ``FeatureFlags`` selection to the ordered list of template-tree
entries a generated widget needs.  Which files belong to which feature, and
which shared files a feature depends on, lives in ``FEATURE_RULES`` below
rather than in branching code: a rule is active when its flag is set or when
an active rule requires it, and every active rule contributes its entries.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .contexts import COMPOSITION_CONTEXT, METADATA_CONTEXT, PROJECT_CONTEXT
from .features import FeatureFlags

TEMPLATE_MARKER = "_"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class EntryKind(str, Enum):
    """What the materializer does with a manifest entry."""
    COPY = "copy"
    RENDER = "render"
    ENSURE_DIR = "ensure_dir"


class ManifestEntry(BaseModel):
    """A single file-system effect in the generated project."""

    model_config = ConfigDict(frozen=True)

    source: Optional[str] = Field(default=None, description="Path relative to the template root")
    dest: str = Field(..., description="Path relative to the destination root")
    kind: EntryKind
    context: Optional[str] = Field(
        default=None, description="Template context name, for render entries"
    )

    @property
    def key(self) -> tuple[EntryKind, str]:
        return (self.kind, self.dest)


def _copy(path: str) -> ManifestEntry:
    """Copy *path* (file or directory) verbatim to the same relative path."""
    return ManifestEntry(source=path, dest=path, kind=EntryKind.COPY)


def _render(path: str, context: str) -> ManifestEntry:
    """Render template *path* with *context*; the output drops the ``_`` marker."""
    return ManifestEntry(
        source=path, dest=compiled_name(path), kind=EntryKind.RENDER, context=context
    )


def _ensure_dir(path: str) -> ManifestEntry:
    """Make sure *path* exists, even when nothing is written into it."""
    return ManifestEntry(dest=path, kind=EntryKind.ENSURE_DIR)


def compiled_name(template_path: str) -> str:
    """Return the output path for a template: ``src/js/_widget.js`` -> ``src/js/widget.js``."""
    path = PurePosixPath(template_path)
    name = path.name
    if name.startswith(TEMPLATE_MARKER):
        name = name[len(TEMPLATE_MARKER):]
    return str(path.with_name(name))


# ---------------------------------------------------------------------------
# Feature dependency table
# ---------------------------------------------------------------------------


class FeatureRule(BaseModel):
    """A feature, the flag that turns it on, and the entries it provides."""

    model_config = ConfigDict(frozen=True)

    name: str
    # Attribute of ``FeatureFlags``; ``None`` means always active.
    enabled_by: Optional[str] = None
    requires: tuple[str, ...] = ()
    entries: tuple[ManifestEntry, ...] = ()

    def is_enabled(self, flags: FeatureFlags) -> bool:
        if self.enabled_by is None:
            return True
        return bool(getattr(flags, self.enabled_by))


FEATURE_RULES: tuple[FeatureRule, ...] = (
    FeatureRule(
        name="project",
        entries=(
            _copy("Gruntfile.js"),
            _copy("LICENSE"),
            _copy("README.md"),
            _render("_package.json", PROJECT_CONTEXT),
            _render("_bower.json", PROJECT_CONTEXT),
            _render("_.appsngenrc", PROJECT_CONTEXT),
        ),
    ),
    FeatureRule(
        name="assets",
        entries=(
            _copy("src/js/debug.js"),
            _copy("src/styles"),
            _copy("src/images"),
        ),
    ),
    FeatureRule(
        name="composed-ui",
        enabled_by="has_composed_ui",
        entries=(_copy("src/js/base-builder.ui.js"),),
    ),
    FeatureRule(
        name="data-fetchers",
        enabled_by="has_data_fetchers",
        requires=("composed-ui",),
        entries=(
            _copy("src/js/data-builder.js"),
            _copy("src/js/data-builder.ui.js"),
            _copy("src/js/waiting-builder.ui.js"),
        ),
    ),
    FeatureRule(
        name="news",
        enabled_by="enable_news",
        requires=("data-fetchers",),
        entries=(_copy("src/js/news-builder.ui.js"),),
    ),
    FeatureRule(
        name="quotes",
        enabled_by="enable_quotes",
        requires=("data-fetchers",),
        entries=(_copy("src/js/quotes-builder.ui.js"),),
    ),
    # Time series goes through its own request builder, not the generic fetcher.
    FeatureRule(
        name="time-series",
        enabled_by="enable_time_series",
        requires=("data-fetchers",),
        entries=(
            _copy("src/js/request-builder.js"),
            _copy("src/js/request-builder.ui.js"),
        ),
    ),
    FeatureRule(
        name="greeting",
        enabled_by="enable_preferences",
        requires=("composed-ui",),
        entries=(
            _copy("src/js/greeting.js"),
            _copy("src/js/greeting.ui.js"),
        ),
    ),
    FeatureRule(
        name="events",
        enabled_by="enable_events",
        requires=("composed-ui",),
        entries=(
            _copy("src/js/event-builder.js"),
            _copy("src/js/event-builder.ui.js"),
        ),
    ),
    FeatureRule(
        name="markup",
        entries=(
            _render("src/_application.xml", METADATA_CONTEXT),
            _render("src/_index.html", COMPOSITION_CONTEXT),
            _render("src/js/_widget.js", COMPOSITION_CONTEXT),
        ),
    ),
    # Downstream tooling expects these paths to exist even when empty.
    FeatureRule(name="fonts", entries=(_ensure_dir("src/fonts"),)),
    FeatureRule(name="tests", entries=(_copy("tests"),)),
    FeatureRule(name="documentation", entries=(_ensure_dir("documentation"),)),
)

_RULES_BY_NAME: dict[str, FeatureRule] = {rule.name: rule for rule in FEATURE_RULES}


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def rule_names(flags: FeatureFlags) -> list[str]:
    """Return the names of the active rules, in table order."""
    active: set[str] = set()
    pending = [rule.name for rule in FEATURE_RULES if rule.is_enabled(flags)]
    while pending:
        name = pending.pop()
        if name in active:
            continue
        active.add(name)
        pending.extend(_RULES_BY_NAME[name].requires)
    return [rule.name for rule in FEATURE_RULES if rule.name in active]


def resolve_manifest(flags: FeatureFlags) -> list[ManifestEntry]:
    """Compute the ordered manifest for *flags*.

    Deterministic and total: every ``FeatureFlags`` value, including the
    all-false selection, yields a valid manifest.  Entries shared by several
    rules appear once, at the position of the first rule that provides them.
    """
    manifest: list[ManifestEntry] = []
    seen: set[tuple[EntryKind, str]] = set()
    for name in rule_names(flags):
        for entry in _RULES_BY_NAME[name].entries:
            if entry.key in seen:
                continue
            seen.add(entry.key)
            manifest.append(entry)
    return manifest
