import pytest

from webflow_mcp.core.config import RuntimeSettings, WebflowSettings
from webflow_mcp.mcp import server as server_module
from webflow_mcp.mcp.server import create_server, run_server
from webflow_mcp.scripts import run_server as entry_point


class RecordingServer:
    def __init__(self) -> None:
        self.runs: list[dict] = []

    def run(self, **kwargs) -> None:
        self.runs.append(kwargs)


def test_main_without_token_exits_before_building_server(isolated_env, monkeypatch):
    def fail_create_server(*args, **kwargs):
        raise AssertionError("server must not be built without a token")

    monkeypatch.setattr(server_module, "create_server", fail_create_server)
    monkeypatch.setattr(server_module, "run_server", fail_create_server)

    with pytest.raises(SystemExit) as excinfo:
        entry_point.main()

    assert excinfo.value.code == 1


def test_main_builds_and_runs_server(isolated_env, monkeypatch):
    monkeypatch.setenv("WEBFLOW_API_TOKEN", "wf-token")
    calls: dict = {}
    sentinel = object()

    def fake_create_server(settings):
        calls["settings"] = settings
        return sentinel

    def fake_run_server(server, settings):
        calls["server"] = server

    monkeypatch.setattr(server_module, "create_server", fake_create_server)
    monkeypatch.setattr(server_module, "run_server", fake_run_server)

    entry_point.main()

    assert calls["settings"].webflow_api_token.get_secret_value() == "wf-token"
    assert calls["server"] is sentinel


def test_run_server_stdio_passes_no_bind_address():
    server = RecordingServer()

    run_server(server, RuntimeSettings(mcp_transport="stdio"))

    assert server.runs == [{"transport": "stdio"}]


@pytest.mark.parametrize("transport", ["http", "sse"])
def test_run_server_network_transports_bind_host_and_port(transport):
    server = RecordingServer()

    run_server(server, RuntimeSettings(mcp_transport=transport, mcp_host="0.0.0.0", mcp_port=9123))

    assert server.runs == [{"transport": transport, "host": "0.0.0.0", "port": 9123}]


def test_create_server_uses_injected_provider(isolated_env, monkeypatch, fake_provider):
    monkeypatch.setenv("WEBFLOW_API_TOKEN", "wf-token")

    server = create_server(WebflowSettings(), provider_factory=lambda: fake_provider)

    assert server.name == "webflow-mcp-server"
