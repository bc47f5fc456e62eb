from truthlens.models import AnalysisRequest, AnalysisResult


def render_short_report(request: AnalysisRequest, result: AnalysisResult) -> str:
    lines = [
        f"Claim: {request.content}",
        f"Verdict: {result.verdict.value} ({result.confidence}%)",
        "Actions:",
    ]
    lines.extend(f"- {action}" for action in result.recommended_actions)
    return "\n".join(lines)
