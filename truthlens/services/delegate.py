import datetime as dt

import requests

from truthlens.config import REMOTE_ANALYZE_URL, REMOTE_TIMEOUT_SECONDS
from truthlens.log import get_logger
from truthlens.models import AnalysisRequest, AnalysisResult
from truthlens.services.scoring import analyze_content

logger = get_logger(__name__)


def request_remote_analysis(
    request: AnalysisRequest,
    remote_url: str,
    timeout: float,
    session: requests.Session | None = None,
) -> AnalysisResult:
    http = session or requests
    response = http.post(
        remote_url,
        json=request.model_dump(mode="json", by_alias=True),
        headers={"Accept": "application/json"},
        timeout=timeout,
    )
    response.raise_for_status()
    return AnalysisResult.model_validate(response.json())


def analyze_with_fallback(
    request: AnalysisRequest,
    remote_url: str | None = None,
    timeout: float | None = None,
    session: requests.Session | None = None,
    now: dt.datetime | None = None,
) -> AnalysisResult:
    """Try the remote scorer first; any failure falls back to the local engine.

    ``remote_url=None`` uses TRUTHLENS_REMOTE_URL, an empty string skips the
    remote call entirely.
    """
    url = REMOTE_ANALYZE_URL if remote_url is None else remote_url.strip()
    if url:
        try:
            return request_remote_analysis(
                request,
                url,
                REMOTE_TIMEOUT_SECONDS if timeout is None else timeout,
                session=session,
            )
        except (requests.RequestException, ValueError) as exc:
            logger.warning("remote_delegate_failed", url=url, error=str(exc))
    return analyze_content(request, now=now)
