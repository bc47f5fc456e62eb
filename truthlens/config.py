import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return max(minimum, int(raw))
    except ValueError:
        return default


REMOTE_ANALYZE_URL = os.getenv("TRUTHLENS_REMOTE_URL", "").strip()
REMOTE_TIMEOUT_SECONDS = _env_float("TRUTHLENS_REMOTE_TIMEOUT", 4.0)
HISTORY_CAPACITY = _env_int("TRUTHLENS_HISTORY_CAPACITY", 10)
BATCH_MAX_WORKERS = _env_int("TRUTHLENS_BATCH_MAX_WORKERS", 8)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()
