"""Tests for the process entry point."""

import pytest

from signup_dashboard import __main__ as entry

REQUIRED_ENV = [
    "GOOGLE_SHEETS_SPREADSHEET_ID",
    "GOOGLE_SHEETS_CLIENT_EMAIL",
    "GOOGLE_SHEETS_PRIVATE_KEY",
]


@pytest.fixture
def uvicorn_calls(monkeypatch):
    """Record uvicorn.run calls instead of starting a server."""
    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append(kwargs))
    return calls


class TestMainConfiguration:
    """Test that missing or invalid configuration stops startup."""

    def test_missing_configuration_exits_1(self, monkeypatch, tmp_path, uvicorn_calls):
        for name in REQUIRED_ENV:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.chdir(tmp_path)

        assert entry.main() == 1
        assert uvicorn_calls == []

    def test_malformed_key_exits_1(self, monkeypatch, tmp_path, uvicorn_calls):
        monkeypatch.setenv("GOOGLE_SHEETS_SPREADSHEET_ID", "sheet-123")
        monkeypatch.setenv("GOOGLE_SHEETS_CLIENT_EMAIL", "reader@project.iam.gserviceaccount.com")
        monkeypatch.setenv("GOOGLE_SHEETS_PRIVATE_KEY", "not-a-key")
        monkeypatch.chdir(tmp_path)

        assert entry.main() == 1
        assert uvicorn_calls == []

    def test_missing_configuration_is_logged(self, monkeypatch, tmp_path, uvicorn_calls, caplog):
        for name in REQUIRED_ENV:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.chdir(tmp_path)

        entry.main()
        assert "GOOGLE_SHEETS_SPREADSHEET_ID" in caplog.text
