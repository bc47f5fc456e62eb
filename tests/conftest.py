"""
Pytest fixtures for TruthLens tests.
"""

import datetime as dt

import pytest

FIXED_NOW = dt.datetime(2025, 6, 15, 12, 0, tzinfo=dt.timezone.utc)


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def client(monkeypatch):
    """FastAPI TestClient with a fresh history buffer and no remote delegate."""
    from fastapi.testclient import TestClient

    import truthlens.main as main
    import truthlens.services.delegate as delegate
    from truthlens.services.history import AnalysisHistory

    monkeypatch.setattr(delegate, "REMOTE_ANALYZE_URL", "")
    monkeypatch.setattr(main, "history", AnalysisHistory(capacity=10))
    return TestClient(main.app)
