import datetime as dt
from typing import Iterable

from truthlens.log import get_logger
from truthlens.models import AnalysisRequest, AnalysisResult, Signal, Verdict, canonical_signals
from truthlens.services.signals import extract_signals

logger = get_logger(__name__)

BASELINE_CONFIDENCE = 50
LIKELY_REAL_THRESHOLD = 60
LIKELY_FAKE_THRESHOLD = 35

# Clickbait and TooShort are explanation-only flags.
SIGNAL_WEIGHTS = {
    Signal.MANY_CONTRADICTIONS: -30,
    Signal.AUTHORITATIVE_SOURCES: 25,
    Signal.FABRICATED_DATES: -20,
    Signal.NO_SOURCES: -15,
    Signal.IMAGE_MANIPULATED: -25,
}

SIGNAL_EXPLANATIONS = {
    Signal.CLICKBAIT: "Language matches clickbait patterns; be cautious of exaggerated claims.",
    Signal.NO_SOURCES: "Claims use vague 'sources' without links; prefer named, verifiable sources.",
    Signal.FABRICATED_DATES: "The text references dates that appear to be in the future or inconsistent.",
    Signal.IMAGE_MANIPULATED: "Mentions AI-generation or manipulation; images or video may be altered.",
    Signal.AUTHORITATIVE_SOURCES: "Mentions recognized organizations; try to verify via their official channels.",
    Signal.MANY_CONTRADICTIONS: "The text contains contradictory statements; check multiple reputable sources.",
    Signal.TOO_SHORT: "The text is very short; short claims often lack context or sources.",
}
NO_FLAGS_EXPLANATION = "No strong heuristic red flags were detected in this quick check."

RECOMMENDED_ACTIONS = (
    "Cross-check with 2 reputable outlets (official organizations, verified news sites)",
    "Search for the exact claim text in quotes to see if the original context exists",
    "If an image or video is involved, reverse-image-search it or inspect its metadata",
    "Prefer primary sources (official statements, reports) over social posts",
)


def _clamp(value: int, min_val: int = 0, max_val: int = 100) -> int:
    return max(min_val, min(max_val, value))


def confidence_from_signals(signals: Iterable[Signal]) -> int:
    present = set(signals)
    delta = sum(weight for signal, weight in SIGNAL_WEIGHTS.items() if signal in present)
    return _clamp(BASELINE_CONFIDENCE + delta)


def classify_verdict(confidence: int) -> Verdict:
    if confidence >= LIKELY_REAL_THRESHOLD:
        return Verdict.LIKELY_REAL
    if confidence <= LIKELY_FAKE_THRESHOLD:
        return Verdict.LIKELY_FAKE
    return Verdict.NEEDS_REVIEW


def score(signals: Iterable[Signal]) -> tuple[int, Verdict]:
    confidence = confidence_from_signals(signals)
    return confidence, classify_verdict(confidence)


def explain(signals: Iterable[Signal]) -> list[str]:
    lines = [SIGNAL_EXPLANATIONS[signal] for signal in canonical_signals(signals)]
    if not lines:
        lines.append(NO_FLAGS_EXPLANATION)
    return lines


def recommended_actions() -> list[str]:
    return list(RECOMMENDED_ACTIONS)


def analyze_content(request: AnalysisRequest, now: dt.datetime | None = None) -> AnalysisResult:
    signals = extract_signals(request.content, now=now)
    confidence, verdict = score(signals)
    result = AnalysisResult(
        verdict=verdict,
        confidence=confidence,
        signals=canonical_signals(signals),
        explanation=explain(signals),
        recommended_actions=recommended_actions(),
    )
    logger.info(
        "analysis_completed",
        content_kind=request.content_kind.value,
        verdict=verdict.value,
        confidence=confidence,
        signals=[signal.value for signal in result.signals],
    )
    return result
