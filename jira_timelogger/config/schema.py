# jira_timelogger/config/schema.py
"""
Pydantic configuration models for jira-timelogger.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jira_timelogger.models.snapshot import FieldKind, FormField

# JIRA duration phrases: "1w 2d 4h 30m", "1.5h"
DEFAULT_TIME_PATTERN = r"^\s*(\d+(\.\d+)?\s*[wdhm]\s*)+$"
# PROJECT-123 (project keys are matched case-insensitively by JIRA)
DEFAULT_ISSUE_KEY_PATTERN = r"^[A-Za-z][A-Za-z0-9_]*-\d+$"


class ValidationConfig(BaseModel):
    """Patterns used by the live validators and the submit-time check."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    time_pattern: str = Field(
        default=DEFAULT_TIME_PATTERN,
        alias="timePattern",
        description="Regular expression a manual time phrase must match",
    )
    issue_key_pattern: str = Field(
        default=DEFAULT_ISSUE_KEY_PATTERN,
        alias="issueKeyPattern",
        description="Regular expression a full issue key must match",
    )

    @field_validator("time_pattern", "issue_key_pattern")
    @classmethod
    def _must_compile(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid regular expression '{value}': {e}")
        return value

    @property
    def time_regex(self) -> re.Pattern:
        return re.compile(self.time_pattern)

    @property
    def issue_key_regex(self) -> re.Pattern:
        return re.compile(self.issue_key_pattern)


class ViewConfig(BaseModel):
    """Timing knobs for the view controller."""

    model_config = ConfigDict(extra="ignore")

    debounce_ms: int = Field(
        default=500, ge=0, description="Quiet period before a field is validated"
    )
    highlight_fade_ms: int = Field(
        default=1500, ge=0, description="Fade duration for new activity log entries"
    )
    time_rounding: Literal["min", "sec"] = Field(
        default="min", description="Rounding applied to the auto time on submit"
    )


class JiraConfig(BaseModel):
    """JIRA server used for issue summary lookups."""

    model_config = ConfigDict(extra="ignore")

    base_url: str | None = Field(
        default=None, description="JIRA base URL (None = lookups disabled)"
    )
    username: str | None = Field(default=None, description="JIRA username or email")
    api_token: str | None = Field(default=None, description="JIRA API token")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


def _default_form_fields() -> list[FormField]:
    return [
        FormField(name="issue", kind=FieldKind.TEXT, default=""),
        FormField(name="comment", kind=FieldKind.TEXT, default=""),
        FormField(
            name="adjustEstimate",
            kind=FieldKind.ENUM,
            choices=["auto", "leave"],
            default="auto",
        ),
        FormField(name="keepIssue", kind=FieldKind.BOOLEAN, default=False),
    ]


class FormConfig(BaseModel):
    """Declared controls on the logger form."""

    model_config = ConfigDict(extra="ignore")

    fields: list[FormField] = Field(default_factory=_default_form_fields)


class TimeLoggerConfig(BaseModel):
    """Root configuration for jira-timelogger."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    default_project_key: str | None = Field(
        default=None,
        alias="defaultProjectKey",
        description="Prefix turning a bare numeric id into an issue key (None = off)",
    )
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    jira: JiraConfig = Field(default_factory=JiraConfig)
    form: FormConfig = Field(default_factory=FormConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a setting by field name or alias.

        Dotted keys walk into sections ("validation.timePattern").
        Unset and empty values fall back to default.
        """
        node: Any = self
        for part in key.split("."):
            if not isinstance(node, BaseModel):
                return default
            name = _resolve_field_name(node, part)
            if name is None:
                return default
            node = getattr(node, name)

        if node is None or node == "":
            return default
        return node


def _resolve_field_name(model: BaseModel, key: str) -> str | None:
    fields = type(model).model_fields
    if key in fields:
        return key
    for name, info in fields.items():
        if info.alias == key:
            return name
    return None
