"""Template data binding.

Derives the Jinja2 contexts for each template family from ``FeatureFlags``.
Keys are camelCase because the templates they feed are JavaScript, JSON and
XML sources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .features import FeatureFlags

PROJECT_CONTEXT = "project"
METADATA_CONTEXT = "metadata"
COMPOSITION_CONTEXT = "composition"


def project_context(flags: FeatureFlags) -> dict[str, Any]:
    """Context for ``package.json``, ``bower.json`` and ``.appsngenrc``.

    ``includeCodeMirror`` pulls the code-editor dependency into the build
    whenever an example that edits structured data (events or data sources)
    is present.
    """
    return {
        "name": flags.widget_id,
        "description": flags.widget_description,
        "includeCodeMirror": flags.enable_events or flags.enable_data_source,
    }


def metadata_context(flags: FeatureFlags) -> dict[str, Any]:
    """Context for ``src/application.xml``."""
    return {
        "id": flags.widget_id,
        "name": flags.widget_name,
        "description": flags.widget_description,
        "includeDataSource": flags.enable_data_source,
        "includePreferences": flags.enable_preferences,
        "includeEvents": flags.enable_events,
    }


def composition_context(flags: FeatureFlags) -> dict[str, Any]:
    """Context for ``src/index.html`` and ``src/js/widget.js``."""
    context: dict[str, Any] = {
        "includeQuotesDataSource": flags.enable_quotes,
        "includeTimeSeriesDataSource": flags.enable_time_series,
        "includeNewsDataSource": flags.enable_news,
        "includeEventBuilder": flags.enable_events,
        "includeGreeting": flags.enable_preferences,
    }
    context["notEmpty"] = any(context.values())
    return context


def bind_contexts(flags: FeatureFlags) -> dict[str, dict[str, Any]]:
    """Return every template context, keyed by context name."""
    return {
        PROJECT_CONTEXT: project_context(flags),
        METADATA_CONTEXT: metadata_context(flags),
        COMPOSITION_CONTEXT: composition_context(flags),
    }
