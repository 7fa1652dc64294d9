"""Feature model: raw prompt answers -> immutable ``FeatureFlags``.

The prompting collaborator hands over a flat answer object keyed in
camelCase (``widgetName``, ``enableDataSourceSupport``, ...).  This module
validates it once, derives the widget id, and enforces that the data-source
sub-flags are only ever set when data-source support itself is enabled.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from widgetgen.utils import slugify


class ValidationError(ValueError):
    """Raised when the answers cannot produce a usable ``FeatureFlags``.

    Callers are expected to re-prompt; the core never corrects input itself.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


# ---------------------------------------------------------------------------
# Raw answers
# ---------------------------------------------------------------------------


class RawAnswers(BaseModel):
    """The prompting collaborator's answer object, as received."""

    model_config = ConfigDict(populate_by_name=True)

    widget_name: str = Field(default="", alias="widgetName")
    widget_description: str = Field(default="", alias="widgetDescription")
    enable_preferences: bool = Field(..., alias="enablePreferencesSupport")
    enable_events: bool = Field(..., alias="enableEventsSupport")
    enable_data_source: bool = Field(..., alias="enableDataSourceSupport")
    # Only asked when data-source support is enabled.
    enable_quotes: Optional[bool] = Field(default=None, alias="enableQuotesSupport")
    enable_time_series: Optional[bool] = Field(default=None, alias="enableTimeSeriesSupport")
    enable_news: Optional[bool] = Field(default=None, alias="enableNewsSupport")

    @field_validator("widget_name", "widget_description", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


# ---------------------------------------------------------------------------
# Feature flags
# ---------------------------------------------------------------------------


class FeatureFlags(BaseModel):
    """Canonical, immutable feature selection for one generation run.

    Direct construction (and ``model_copy``) re-derives ``widget_id`` and
    clears the data-source sub-flags when data-source support is off.  A blank
    name raises ``pydantic.ValidationError`` here; use ``normalize`` to get
    the domain ``ValidationError`` instead.
    """

    model_config = ConfigDict(frozen=True)

    widget_name: str
    widget_description: str = ""
    widget_id: str = ""
    enable_preferences: bool = False
    enable_events: bool = False
    enable_data_source: bool = False
    enable_quotes: bool = False
    enable_time_series: bool = False
    enable_news: bool = False

    @model_validator(mode="before")
    @classmethod
    def _derive(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        name = str(data.get("widget_name") or "").strip()
        data["widget_name"] = name
        data["widget_id"] = slugify(name)
        if not data.get("enable_data_source"):
            data["enable_quotes"] = False
            data["enable_time_series"] = False
            data["enable_news"] = False
        return data

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> FeatureFlags:
        """Copy through validation so derived fields stay consistent."""
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**{**self.model_dump(), **update})

    @field_validator("widget_name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("widget name must not be empty")
        return value

    @field_validator("widget_id")
    @classmethod
    def _id_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("widget name must contain at least one letter or digit")
        return value

    @property
    def has_composed_ui(self) -> bool:
        """True when at least one optional example is selected."""
        return self.enable_preferences or self.enable_events or self.enable_data_source

    @property
    def has_data_fetchers(self) -> bool:
        """True when at least one data-source example is selected."""
        return self.enable_quotes or self.enable_time_series or self.enable_news


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalize(raw_answers: Mapping[str, Any] | RawAnswers) -> FeatureFlags:
    """Validate raw answers and build the ``FeatureFlags`` for a run.

    Args:
        raw_answers: Either a ``RawAnswers`` instance or a mapping using the
            camelCase answer keys (snake_case field names are accepted too).
            The three data-source sub-flags may be absent or ``None``.

    Returns:
        A frozen ``FeatureFlags``.

    Raises:
        ValidationError: If the widget name is empty after trimming, yields
            an empty slug, or the answer object is malformed.
    """
    try:
        answers = (
            raw_answers
            if isinstance(raw_answers, RawAnswers)
            else RawAnswers.model_validate(dict(raw_answers))
        )
        return FeatureFlags(
            widget_name=answers.widget_name,
            widget_description=answers.widget_description,
            enable_preferences=answers.enable_preferences,
            enable_events=answers.enable_events,
            enable_data_source=answers.enable_data_source,
            enable_quotes=bool(answers.enable_quotes),
            enable_time_series=bool(answers.enable_time_series),
            enable_news=bool(answers.enable_news),
        )
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "answers"
        raise ValidationError(field, error["msg"]) from exc
