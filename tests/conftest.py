import pytest

FI_ENV = ("FI_OUTPUT_DIR", "FI_LEVEL", "FI_CHUNK_SIZE", "FI_CLEANUP_PARTIAL")

@pytest.fixture(autouse=True)
def _clean_fi_env(monkeypatch):
    for k in FI_ENV:
        monkeypatch.delenv(k, raising=False)
