"""Pydantic models for article input and detection output payloads."""
from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from kygeo.detection import DetectionResult


class ArticleText(BaseModel):
    """Headline and body of an article submitted for geo detection."""

    model_config = ConfigDict(extra="ignore")

    #: Article headline; integrations may send it as ``headline``.
    title: str = Field(default="", validation_alias=AliasChoices("title", "headline"))
    #: Article body in plain text; integrations may send it as ``content``.
    body: str = Field(default="", validation_alias=AliasChoices("body", "content"))

    def combined_text(self) -> str:
        parts = [part.strip() for part in (self.title, self.body) if part]
        return "\n".join(part for part in parts if part)


class GeoDetectionPayload(BaseModel):
    """Serializable view of a :class:`DetectionResult`."""

    counties: list[str] = Field(default_factory=list)
    county: str | None = None
    city: str | None = None
    kentucky_context: bool = False
    is_kentucky: bool = False

    @classmethod
    def from_result(cls, result: DetectionResult) -> "GeoDetectionPayload":
        return cls(**result.as_dict())


__all__ = ["ArticleText", "GeoDetectionPayload"]
