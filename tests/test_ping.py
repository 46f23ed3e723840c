from types import SimpleNamespace

import pytest

from basic_fixture import *

import bcc.net.ping as ping
from bcc.net.ping import ServerInfo, ping_server, query_status


class FakeMotd:
    def __init__(self, text):
        self.text = text

    def to_plain(self):
        return self.text


class FakeBedrockServer:
    status_result = None
    error = None
    created = []

    def __init__(self, host, port, timeout=3):
        self.created.append((host, port, timeout))

    def status(self):
        if self.error is not None:
            raise self.error
        return self.status_result


@pytest.fixture
def server(monkeypatch):
    FakeBedrockServer.created = []
    FakeBedrockServer.error = None
    FakeBedrockServer.status_result = SimpleNamespace(
        motd=FakeMotd("A Bedrock Server"),
        map_name="Bedrock level",
        version=SimpleNamespace(name="1.21.0"),
        players=SimpleNamespace(online=2, max=10),
    )
    monkeypatch.setattr(ping, "BedrockServer", FakeBedrockServer)
    return FakeBedrockServer


def test_query_status(server):
    info = query_status("play.example.com", 19132)
    assert info == ServerInfo("A Bedrock Server", "Bedrock level", "1.21.0", 2, 10)
    assert server.created == [("play.example.com", 19132, 3)]


def test_ping_logs_summary(server, logger, log_handler):
    info = run_trio(ping_server, "play.example.com", 19132, logger)
    assert info.players_online == 2
    assert log_handler.messages == [
        "> Host: play.example.com:19132",
        "> MOTD: A Bedrock Server (Bedrock level)",
        "> Version: 1.21.0",
        "> Players: 2/10",
    ]


def test_ping_failure_is_not_fatal(server, logger, log_handler):
    server.error = TimeoutError("timed out")
    assert run_trio(ping_server, "play.example.com", 19132, logger) is None
    assert log_handler.messages[0] == "Failed to connect: play.example.com:19132"
    assert log_handler.has("Status query failed")
