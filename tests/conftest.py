import pytest

from commitment import commitments

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # CLI and service defaults come from the environment
    for name in ("COMMIT_ACCOUNT_ID", "COMMIT_CHOICE"):
        monkeypatch.delenv(name, raising=False)
    yield

@pytest.fixture
def no_entropy(monkeypatch):
    def _fail(n):
        raise NotImplementedError("no randomness source")
    monkeypatch.setattr(commitments.os, "urandom", _fail)
    yield
