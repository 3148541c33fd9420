"""Pydantic models for email template records."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from typing import Mapping
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import field_validator

from template_sync.exceptions import ValidationError


class TemplateSpec(BaseModel):
    """Desired content of a single template."""

    model_config = ConfigDict(frozen=True)

    name: str
    subject_part: str
    text_part: str
    html_part: str

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        # Raised as our own error so it is not wrapped by pydantic.
        if not value or not value.strip():
            raise ValidationError("Template name must not be blank", field="name")
        return value

    def to_ses(self) -> dict[str, str]:
        """Return the SES ``Template`` payload for create/update calls."""
        return {
            "TemplateName": self.name,
            "SubjectPart": self.subject_part,
            "TextPart": self.text_part,
            "HtmlPart": self.html_part,
        }


class TemplateMetadata(BaseModel):
    """Name-only record returned by a template listing."""

    model_config = ConfigDict(frozen=True)

    name: str
    created_timestamp: Optional[datetime] = None

    @classmethod
    def from_ses(cls, payload: Mapping[str, Any]) -> "TemplateMetadata":
        return cls(
            name=payload["Name"],
            created_timestamp=payload.get("CreatedTimestamp"),
        )


class TemplateContent(BaseModel):
    """Full stored template as the store reports it."""

    model_config = ConfigDict(frozen=True)

    name: str
    subject_part: Optional[str] = None
    text_part: Optional[str] = None
    html_part: Optional[str] = None

    @classmethod
    def from_ses(cls, payload: Mapping[str, Any]) -> "TemplateContent":
        """Parse the ``Template`` body of a SES ``GetTemplate`` response."""
        return cls(
            name=payload["TemplateName"],
            subject_part=payload.get("SubjectPart"),
            text_part=payload.get("TextPart"),
            html_part=payload.get("HtmlPart"),
        )

    def to_log_dict(self) -> dict[str, Any]:
        """Render the content keyed the way the store names it."""
        data: dict[str, Any] = {"TemplateName": self.name}
        if self.subject_part is not None:
            data["SubjectPart"] = self.subject_part
        if self.text_part is not None:
            data["TextPart"] = self.text_part
        if self.html_part is not None:
            data["HtmlPart"] = self.html_part
        return data

    def matches(self, spec: TemplateSpec) -> bool:
        """Return True when subject, text and HTML equal the spec's."""
        return (
            self.name == spec.name
            and (self.subject_part or "") == spec.subject_part
            and (self.text_part or "") == spec.text_part
            and (self.html_part or "") == spec.html_part
        )
