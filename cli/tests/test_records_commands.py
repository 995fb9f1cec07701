from __future__ import annotations

import json

import httpx
from typer.testing import CliRunner

from kintone_cli import main, output
from kintone_client import AuthenticationError, NetworkError


class _DummyClient:
    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.response = response or httpx.Response(200, json={"records": [], "totalCount": None})
        self.error = error
        self.calls: list[tuple] = []
        self.closed = False

    def _call(self, name, app_name, arg):
        self.calls.append((name, app_name, arg))
        if self.error:
            raise self.error
        return self.response

    def search(self, app_name, query):
        return self._call("search", app_name, query)

    def create(self, app_name, records):
        return self._call("create", app_name, records)

    def update(self, app_name, records):
        return self._call("update", app_name, records)

    def destroy(self, app_name, record_ids):
        return self._call("destroy", app_name, record_ids)

    def upload(self, app_name, file_id):
        return self._call("upload", app_name, file_id)

    def close(self) -> None:
        self.closed = True


def _patch(monkeypatch, client: _DummyClient) -> None:
    monkeypatch.setattr(output, "load_config", lambda: None)
    monkeypatch.setattr(output, "make_client", lambda *args, **kwargs: client)


def test_search_prints_response(monkeypatch) -> None:
    client = _DummyClient()
    _patch(monkeypatch, client)
    result = CliRunner().invoke(main.app, ["records", "search", "report", 'Status = "Open"'])

    assert result.exit_code == 0
    assert client.calls == [("search", "report", 'Status = "Open"')]
    assert "HTTP 200" in result.output
    assert "totalCount" in result.output
    assert client.closed


def test_create_reads_records_file(monkeypatch, tmp_path) -> None:
    client = _DummyClient(httpx.Response(200, json={"ids": ["1"], "revisions": ["1"]}))
    _patch(monkeypatch, client)
    src = tmp_path / "records.json"
    src.write_text(json.dumps({"records": [{"title": {"value": "x"}}]}), encoding="utf-8")

    result = CliRunner().invoke(main.app, ["records", "create", "report", "--json", str(src)])

    assert result.exit_code == 0
    assert client.calls == [("create", "report", [{"title": {"value": "x"}}])]


def test_update_reads_records_from_stdin(monkeypatch) -> None:
    client = _DummyClient()
    _patch(monkeypatch, client)
    result = CliRunner().invoke(
        main.app,
        ["records", "update", "report", "--json", "-"],
        input='[{"id": 1, "record": {}}]',
    )
    assert result.exit_code == 0
    assert client.calls == [("update", "report", [{"id": 1, "record": {}}])]


def test_invalid_records_json(monkeypatch, tmp_path) -> None:
    client = _DummyClient()
    _patch(monkeypatch, client)
    src = tmp_path / "records.json"
    src.write_text('{"nope": 1}', encoding="utf-8")
    result = CliRunner().invoke(main.app, ["records", "create", "report", "--json", str(src)])
    assert result.exit_code == 2
    assert client.calls == []


def test_delete_with_yes(monkeypatch) -> None:
    client = _DummyClient(httpx.Response(200, json={}))
    _patch(monkeypatch, client)
    result = CliRunner().invoke(main.app, ["records", "delete", "report", "101", "102", "--yes"])
    assert result.exit_code == 0
    assert client.calls == [("destroy", "report", [101, 102])]


def test_delete_aborted_without_confirmation(monkeypatch) -> None:
    client = _DummyClient()
    _patch(monkeypatch, client)
    result = CliRunner().invoke(main.app, ["records", "delete", "report", "1"], input="n\n")
    assert result.exit_code == 0
    assert client.calls == []


def test_error_status_exits_with_one(monkeypatch) -> None:
    client = _DummyClient(httpx.Response(400, json={"code": "CB_VA01", "message": "invalid"}))
    _patch(monkeypatch, client)
    result = CliRunner().invoke(main.app, ["records", "search", "report", "bad query"])
    assert result.exit_code == 1
    assert "HTTP 400" in result.output


def test_auth_error_exits_with_two(monkeypatch) -> None:
    client = _DummyClient(error=AuthenticationError("Authentication failed"))
    _patch(monkeypatch, client)
    result = CliRunner().invoke(main.app, ["records", "search", "report"])
    assert result.exit_code == 2
    assert "Authentication failed" in result.output
    assert client.closed


def test_network_error_exits_with_two(monkeypatch) -> None:
    client = _DummyClient(error=NetworkError("connection refused"))
    _patch(monkeypatch, client)
    result = CliRunner().invoke(main.app, ["records", "search", "report"])
    assert result.exit_code == 2
    assert "Network error" in result.output


def test_upload_command(monkeypatch, tmp_path) -> None:
    client = _DummyClient(httpx.Response(200, json={"fileKey": "abc-123"}))
    _patch(monkeypatch, client)
    result = CliRunner().invoke(main.app, ["files", "upload", "report", str(tmp_path / "a.png")])
    assert result.exit_code == 0
    assert client.calls == [("upload", "report", str(tmp_path / "a.png"))]
    assert "abc-123" in result.output
