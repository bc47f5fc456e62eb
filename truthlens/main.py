import concurrent.futures
import datetime as dt

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from truthlens.config import BATCH_MAX_WORKERS
from truthlens.log import get_logger
from truthlens.models import (
    AnalysisRequest,
    AnalysisResult,
    BatchAnalyzeRequest,
    BatchAnalyzeResponse,
    HistoryEntry,
)
from truthlens.services.delegate import analyze_with_fallback
from truthlens.services.history import AnalysisHistory
from truthlens.services.report import render_short_report
from truthlens.services.scoring import analyze_content

logger = get_logger(__name__)

app = FastAPI(
    title="TruthLens",
    description="Explainable heuristic checks for misinformation in text, URLs and images.",
    version="1.0.0",
)
BUILD_ID = "2026-10-19-engine-v1"

history = AnalysisHistory()


@app.middleware("http")
async def no_cache_middleware(request: Request, call_next):
    response = await call_next(request)
    if request.url.path.startswith("/api/") or request.url.path == "/__build":
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
    return response


@app.post("/api/analyze", response_model=AnalysisResult)
def analyze(payload: AnalysisRequest) -> AnalysisResult:
    result = analyze_with_fallback(payload)
    history.record(payload, result)
    return result


@app.post("/api/analyze/batch", response_model=BatchAnalyzeResponse)
def analyze_batch(payload: BatchAnalyzeRequest) -> BatchAnalyzeResponse:
    now = dt.datetime.now(dt.timezone.utc)
    max_workers = min(BATCH_MAX_WORKERS, max(1, len(payload.requests)))
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(lambda item: analyze_content(item, now=now), payload.requests))
    logger.info("batch_completed", count=len(results))
    return BatchAnalyzeResponse(generated_at=now.isoformat(), results=results)


@app.get("/api/history", response_model=list[HistoryEntry])
def list_history() -> list[HistoryEntry]:
    return history.recent()


@app.delete("/api/history", status_code=204)
def clear_history() -> None:
    history.clear()
    logger.info("history_cleared")


@app.post("/api/report", response_class=PlainTextResponse)
def short_report(payload: AnalysisRequest) -> str:
    return render_short_report(payload, analyze_with_fallback(payload))


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/__build")
def build_info() -> dict[str, str]:
    return {"build_id": BUILD_ID}
