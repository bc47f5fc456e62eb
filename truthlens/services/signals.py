import datetime as dt
import re
from typing import Any, Callable

from truthlens.models import Signal

MIN_CONTENT_LENGTH = 10

CLICKBAIT_PHRASES = ("shocking", "you won't believe")
UNSOURCED_ATTRIBUTION_PHRASE = "according to our sources"
IMAGE_MANIPULATION_TERMS = ("deepfake", "ai-generated")
CONTRADICTION_MARKERS = ("contradictory", "but then")
AUTHORITY_MARKERS = ("cdc", "who", "nyt")

_URL_LIKE = re.compile(r"https?://|www\.")
_ISO_DATE = re.compile(r"(?<!\d)(\d{4})-(\d{2})-(\d{2})(?!\d)")


def normalize_content(content: Any) -> str:
    if not isinstance(content, str):
        return ""
    return content.casefold()


def _utc(now: dt.datetime | None) -> dt.datetime:
    if now is None:
        return dt.datetime.now(dt.timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=dt.timezone.utc)
    return now


def is_too_short(text: str) -> bool:
    return len(text.strip()) < MIN_CONTENT_LENGTH


def is_clickbait(text: str) -> bool:
    return any(phrase in text for phrase in CLICKBAIT_PHRASES)


def has_unsourced_attribution(text: str) -> bool:
    return UNSOURCED_ATTRIBUTION_PHRASE in text and not _URL_LIKE.search(text)


def iso_dates(text: str) -> list[dt.datetime]:
    dates = []
    for match in _ISO_DATE.finditer(text):
        year, month, day = (int(part) for part in match.groups())
        try:
            dates.append(dt.datetime(year, month, day, tzinfo=dt.timezone.utc))
        except ValueError:
            continue
    return dates


def has_future_date(text: str, now: dt.datetime | None = None) -> bool:
    reference = _utc(now)
    return any(date > reference for date in iso_dates(text))


def mentions_image_manipulation(text: str) -> bool:
    return any(term in text for term in IMAGE_MANIPULATION_TERMS)


def mentions_authority(text: str) -> bool:
    return any(marker in text for marker in AUTHORITY_MARKERS)


def has_contradictions(text: str) -> bool:
    return any(marker in text for marker in CONTRADICTION_MARKERS)


SIGNAL_DETECTORS: dict[Signal, Callable[[str, dt.datetime], bool]] = {
    Signal.CLICKBAIT: lambda text, now: is_clickbait(text),
    Signal.NO_SOURCES: lambda text, now: has_unsourced_attribution(text),
    Signal.FABRICATED_DATES: has_future_date,
    Signal.IMAGE_MANIPULATED: lambda text, now: mentions_image_manipulation(text),
    Signal.AUTHORITATIVE_SOURCES: lambda text, now: mentions_authority(text),
    Signal.MANY_CONTRADICTIONS: lambda text, now: has_contradictions(text),
    Signal.TOO_SHORT: lambda text, now: is_too_short(text),
}


def extract_signals(content: Any, now: dt.datetime | None = None) -> frozenset[Signal]:
    text = normalize_content(content)
    reference = _utc(now)
    return frozenset(
        signal for signal, detector in SIGNAL_DETECTORS.items() if detector(text, reference)
    )
