from __future__ import annotations

import json

from typer.testing import CliRunner

from cli.main import app
from cli.ui_components import format_created_at
from core.domain.models import GistResponse

runner = CliRunner()


def test_missing_token_exits_nonzero(mock_api):
    seen = mock_api()
    result = runner.invoke(app, [], input="hello")
    assert result.exit_code == 1
    assert "no token" in result.output
    assert seen == []


def test_stdin_create_prints_summary(mock_api, gist_json):
    seen = mock_api(201, gist_json)
    result = runner.invoke(app, ["-token", "t", "-description", "demo"], input="hello")

    assert result.exit_code == 0, result.output
    assert "ID:" in result.output
    assert gist_json["id"] in result.output
    assert gist_json["html_url"] in result.output
    assert "2010-04-14 02:15:15 +0000 UTC" in result.output

    sent = json.loads(seen[0].content)
    assert sent["files"] == {"gist.txt": {"content": "hello"}}
    assert sent["description"] == "demo"
    assert sent["public"] is False


def test_env_token_and_public_flag(mock_api, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    seen = mock_api()
    result = runner.invoke(app, ["-public", "-filename", "out.log"], input="data")

    assert result.exit_code == 0, result.output
    assert seen[0].headers["Authorization"] == "token env-token"
    sent = json.loads(seen[0].content)
    assert sent["public"] is True
    assert list(sent["files"]) == ["out.log"]


def test_files_mode_with_patch(mock_api, gist_json, tmp_path):
    (tmp_path / "a.txt").write_text("A", encoding="utf-8")
    (tmp_path / "b.py").write_text("print(1)\n", encoding="utf-8")
    seen = mock_api(200, gist_json)

    result = runner.invoke(
        app,
        ["--token", "t", "-patch", "abc123", str(tmp_path / "a.txt"), str(tmp_path / "b.py")],
    )

    assert result.exit_code == 0, result.output
    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/gists/abc123"
    assert json.loads(seen[0].content)["files"] == {
        "a.txt": {"content": "A"},
        "b.py": {"content": "print(1)\n"},
    }


def test_unreadable_file_is_fatal(mock_api, tmp_path):
    seen = mock_api()
    result = runner.invoke(app, ["-token", "t", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "missing.txt" in result.output
    assert seen == []


def test_remote_failure_prints_body_and_exits_zero(mock_api):
    mock_api(404, b'{"message":"Not Found","documentation_url":"https://docs.github.com"}')
    result = runner.invoke(app, ["-token", "t", "-patch", "nope"], input="x")

    assert result.exit_code == 0
    assert "response status code: 404" in result.output
    assert '{"message":"Not Found","documentation_url":"https://docs.github.com"}' in result.output


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("gistpost ")


def test_format_created_at_zero_value():
    assert format_created_at(GistResponse().created_at) == ""


def test_invalid_timeout_setting_is_reported(mock_api, monkeypatch):
    monkeypatch.setenv("GISTPOST_HTTP_TIMEOUT_SECONDS", "abc")
    seen = mock_api()
    result = runner.invoke(app, ["-token", "t"], input="x")

    assert result.exit_code == 1
    assert "error: invalid configuration" in result.output
    assert "http_timeout_seconds" in result.output
    assert "Traceback" not in result.output
    assert seen == []


def test_invalid_log_level_is_reported(mock_api, monkeypatch):
    monkeypatch.setenv("GISTPOST_LOG_LEVEL", "LOUD")
    seen = mock_api()
    result = runner.invoke(app, ["-token", "t"], input="x")

    assert result.exit_code == 1
    assert "error: invalid log level" in result.output
    assert "LOUD" in result.output
    assert seen == []
