from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Signal(str, Enum):
    # Declaration order is the canonical order used for explanations and output.
    CLICKBAIT = "clickbait"
    NO_SOURCES = "no-sources"
    FABRICATED_DATES = "fabricated-dates"
    IMAGE_MANIPULATED = "image-manipulated"
    AUTHORITATIVE_SOURCES = "authoritative-sources"
    MANY_CONTRADICTIONS = "many-contradictions"
    TOO_SHORT = "too-short"


class ContentKind(str, Enum):
    TEXT = "text"
    URL = "url"
    IMAGE = "image"


class Verdict(str, Enum):
    LIKELY_REAL = "Likely Real"
    LIKELY_FAKE = "Likely Fake"
    NEEDS_REVIEW = "Unclear / Needs Review"


def canonical_signals(signals: Any) -> list[Signal]:
    present = set(signals)
    return [signal for signal in Signal if signal in present]


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    content_kind: ContentKind = Field(
        ContentKind.TEXT,
        validation_alias=AliasChoices("contentKind", "content_kind", "type"),
        serialization_alias="contentKind",
    )
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    verdict: Verdict
    confidence: int = Field(ge=0, le=100)
    signals: list[Signal] = Field(default_factory=list)
    explanation: list[str] = Field(min_length=1)
    recommended_actions: list[str] = Field(
        min_length=1,
        validation_alias=AliasChoices("recommendedActions", "recommended_actions"),
        serialization_alias="recommendedActions",
    )

    @field_validator("signals", mode="after")
    @classmethod
    def _dedupe_signals(cls, value: list[Signal]) -> list[Signal]:
        return canonical_signals(value)


class BatchAnalyzeRequest(BaseModel):
    requests: list[AnalysisRequest] = Field(min_length=1, max_length=20)


class BatchAnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    generated_at: str = Field(serialization_alias="generatedAt")
    results: list[AnalysisResult]


class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    query: AnalysisRequest
    timestamp: str
    result: AnalysisResult
