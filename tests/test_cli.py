import json
import os

import pytest
from click.testing import CliRunner

from session_gate.cli import main as cli_main
from session_gate.cli import serve as cli_serve
from session_gate.cli.main import main
from session_gate.codec import encode_header
from session_gate.errors import ConnectionError
from session_gate.transport.client import GatewayClient

USER_ID = "683d711e-fe25-443c-8102-43d4245a6884"
GOOD_FRAME = encode_header("create_session", "ECTO-1", USER_ID)


def test_check_valid_frame_json():
    result = CliRunner().invoke(main, ["check", "--json", GOOD_FRAME])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "action": "create_session",
        "session_id": "ECTO-1",
        "user_id": USER_ID,
    }


def test_check_valid_frame_table():
    result = CliRunner().invoke(main, ["check", GOOD_FRAME])
    assert result.exit_code == 0
    assert "create_session" in result.output
    assert USER_ID in result.output


def test_check_reads_stdin():
    result = CliRunner().invoke(main, ["check", "--json"], input=GOOD_FRAME)
    assert result.exit_code == 0
    assert json.loads(result.output)["session_id"] == "ECTO-1"


def test_check_rejected_frame():
    result = CliRunner().invoke(main, ["check", "{ bad json"])
    assert result.exit_code == 1
    envelope = json.loads(result.output)
    assert envelope["status_code"] == 400
    assert envelope["status"] == "bad_request"


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    for name in list(os.environ):
        if name.startswith("SESSION_GATE_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr(cli_main, "_configure_logging", lambda level: None)
    return ["--config", str(tmp_path / "missing.json")]


def _stub_client(monkeypatch, reply):
    sent = []

    async def fake_connect(self):
        pass

    async def fake_disconnect(self):
        pass

    async def fake_send_frame(self, frame):
        sent.append(frame)
        return reply

    monkeypatch.setattr(GatewayClient, "connect", fake_connect)
    monkeypatch.setattr(GatewayClient, "disconnect", fake_disconnect)
    monkeypatch.setattr(GatewayClient, "send_frame", fake_send_frame)
    return sent


def test_send_prints_error_envelope(cli_env, monkeypatch):
    envelope = {"status_code": 400, "status": "bad_request", "message": "Error parsing message: x"}
    sent = _stub_client(monkeypatch, json.dumps(envelope))

    result = CliRunner().invoke(main, cli_env + ["send", "{ bad json"])

    assert result.exit_code == 1
    assert sent == ["{ bad json"]
    assert '"bad_request"' in result.output


def test_send_without_reply_means_accepted(cli_env, monkeypatch):
    sent = _stub_client(monkeypatch, None)

    result = CliRunner().invoke(main, cli_env + ["send", GOOD_FRAME, "--timeout", "0.5"])

    assert result.exit_code == 0
    assert sent == [GOOD_FRAME]
    assert "frame accepted" in result.output


def test_send_connection_failure(cli_env, monkeypatch):
    async def failing_connect(self):
        raise ConnectionError("Could not connect to http://127.0.0.1:1")

    monkeypatch.setattr(GatewayClient, "connect", failing_connect)

    result = CliRunner().invoke(main, cli_env + ["send", GOOD_FRAME, "--url", "http://127.0.0.1:1"])

    assert result.exit_code == 1
    assert "Could not connect" in result.output


def test_serve_applies_overrides(cli_env, monkeypatch):
    received = []
    monkeypatch.setattr(cli_serve, "serve", lambda config: received.append(config))

    result = CliRunner().invoke(
        main, cli_env + ["serve", "--host", "0.0.0.0", "--port", "9001", "--log-level", "debug"],
    )

    assert result.exit_code == 0
    (config,) = received
    assert config.host == "0.0.0.0"
    assert config.port == 9001
    assert config.log_level == "DEBUG"
    assert config.socketio_path == "socket.io"


def test_serve_rejects_bad_config(cli_env, monkeypatch):
    monkeypatch.setattr(cli_serve, "serve", lambda config: pytest.fail("should not serve"))

    result = CliRunner().invoke(main, cli_env + ["serve", "--log-level", "chatty"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
