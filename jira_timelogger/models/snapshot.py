# jira_timelogger/models/snapshot.py
"""
Form field declarations and the submission snapshot.

Field kinds are declared up front rather than inferred from the rendered
control, so a snapshot only depends on configuration and field values.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldKind(str, Enum):
    """How a form control's value is read into the snapshot."""

    TEXT = "text"
    BOOLEAN = "boolean"
    ENUM = "enum"


class FormField(BaseModel):
    """Declaration of a single control on the logger form."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(description="Control name (key in the snapshot)")
    kind: FieldKind = Field(default=FieldKind.TEXT, description="Value kind")
    choices: list[str] = Field(
        default_factory=list, description="Allowed values for enum fields"
    )
    default: str | bool | None = Field(
        default=None, description="Value restored when the form is reset"
    )

    @model_validator(mode="after")
    def _enum_needs_choices(self) -> "FormField":
        if self.kind is FieldKind.ENUM and not self.choices:
            raise ValueError(f"Enum field '{self.name}' declares no choices")
        return self


class FormSnapshot(BaseModel):
    """Point-in-time aggregation of the logger form used for submission."""

    values: dict[str, str | bool] = Field(
        default_factory=dict, description="Declared field name -> value"
    )
    time: str = Field(description="Manual time phrase or computed elapsed time")
    summary: str | None = Field(
        default=None, description="Issue summary, only when it is real text"
    )

    def as_dict(self) -> dict[str, str | bool]:
        """Flatten into the mapping handed to the submit handler."""
        data: dict[str, str | bool] = dict(self.values)
        data["time"] = self.time
        if self.summary is not None:
            data["summary"] = self.summary
        return data
