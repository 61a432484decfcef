import pytest


@pytest.fixture(autouse=True)
def _template_output_only(monkeypatch):
    # Keep output independent of whether gofmt happens to be on PATH.
    monkeypatch.setenv("MOCKF_FORMAT", "never")
    monkeypatch.delenv("MOCKF_GO", raising=False)
    monkeypatch.delenv("MOCKF_GOFMT", raising=False)
    yield
