"""Shared pytest fixtures for the widgetgen test suite.

Provides reusable fixtures for:
- Temporary destination directories
- Minimal and full prompt answer objects
- The matching ``FeatureFlags``
- A small throwaway template tree for materializer tests
"""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import Any

import pytest

from widgetgen.scaffolder.features import FeatureFlags

OPTIONAL_FLAGS: tuple[str, ...] = (
    "enable_preferences",
    "enable_events",
    "enable_data_source",
    "enable_quotes",
    "enable_time_series",
    "enable_news",
)


def all_flag_combinations(name: str = "Stock Ticker") -> list[FeatureFlags]:
    """Every ``FeatureFlags`` reachable from the six optional toggles."""
    return [
        FeatureFlags(widget_name=name, **dict(zip(OPTIONAL_FLAGS, values)))
        for values in itertools.product((False, True), repeat=len(OPTIONAL_FLAGS))
    ]


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Destination directory for a generated widget (not created yet)."""
    return tmp_path / "stock-ticker"


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """A tiny template tree with one static file, one directory and one template."""
    root = tmp_path / "templates"
    (root / "assets" / "nested").mkdir(parents=True)
    (root / "static.txt").write_text("static content\n", encoding="utf-8")
    (root / "assets" / "a.css").write_text("a {}\n", encoding="utf-8")
    (root / "assets" / "nested" / "b.css").write_text("b {}\n", encoding="utf-8")
    (root / "_hello.txt").write_text("Hello {{ name }}!\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Answers & flags
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_answers() -> dict[str, Any]:
    """Answers with every optional example declined."""
    return {
        "widgetName": "Stock Ticker",
        "enablePreferencesSupport": False,
        "enableEventsSupport": False,
        "enableDataSourceSupport": False,
    }


@pytest.fixture
def full_answers() -> dict[str, Any]:
    """Answers with every optional example selected."""
    return {
        "widgetName": "Stock Ticker",
        "widgetDescription": "Live prices for a watch list",
        "enablePreferencesSupport": True,
        "enableEventsSupport": True,
        "enableDataSourceSupport": True,
        "enableQuotesSupport": True,
        "enableTimeSeriesSupport": True,
        "enableNewsSupport": True,
    }


@pytest.fixture
def flag_combinations() -> list[FeatureFlags]:
    return all_flag_combinations()


@pytest.fixture
def minimal_flags() -> FeatureFlags:
    return FeatureFlags(widget_name="Stock Ticker")


@pytest.fixture
def full_flags() -> FeatureFlags:
    return FeatureFlags(
        widget_name="Stock Ticker",
        widget_description="Live prices for a watch list",
        **{flag: True for flag in OPTIONAL_FLAGS},
    )
