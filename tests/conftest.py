import pytest


@pytest.fixture(autouse=True)
def _clear_update_flag(monkeypatch) -> None:
    """Golden update mode must be opted into by each test."""
    monkeypatch.delenv("UPDATE_GOLDEN", raising=False)
    monkeypatch.delenv("OTEL_GOLDEN_UPDATE_GOLDEN", raising=False)
