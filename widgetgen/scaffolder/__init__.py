"""widgetgen scaffolder -- generates web-widget project structures.

This package turns the answers collected by the prompting step into a
project directory: the feature model validates the answers, the manifest
resolver decides which template-tree entries are needed, the binder derives
the template contexts, and the materializer writes everything to disk.

Quick usage::

    from widgetgen.scaffolder import WidgetGenerator

    generator = WidgetGenerator()
    project_path = await generator.generate(
        "/tmp/output", "Stock Ticker", {
            "enablePreferencesSupport": False,
            "enableEventsSupport": False,
            "enableDataSourceSupport": False,
        },
    )
"""

from widgetgen.scaffolder.contexts import bind_contexts
from widgetgen.scaffolder.features import FeatureFlags, RawAnswers, ValidationError, normalize
from widgetgen.scaffolder.generator import GenerationResult, WidgetGenerator
from widgetgen.scaffolder.manifest import EntryKind, ManifestEntry, resolve_manifest
from widgetgen.scaffolder.materializer import MaterializeError, Materializer
from widgetgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "EntryKind",
    "FeatureFlags",
    "GenerationResult",
    "ManifestEntry",
    "MaterializeError",
    "Materializer",
    "RawAnswers",
    "TemplateRenderer",
    "ValidationError",
    "WidgetGenerator",
    "bind_contexts",
    "normalize",
    "resolve_manifest",
]
