"""Tests for environment settings and startup address discovery."""

from pathlib import Path

import socket

from facturas_api import network
from facturas_api.config import DEFAULT_FACTURAS_FILE, DEFAULT_PORT, get_settings


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "FACTURAS_FILE", "DGII_TIMBRE_URL", "LOG_LEVEL", "API_RELOAD"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings.port == DEFAULT_PORT == 3000
    assert settings.host == "0.0.0.0"
    assert settings.facturas_file == DEFAULT_FACTURAS_FILE
    assert settings.facturas_file.name == "facturas_result.json"
    assert settings.log_level == "info"
    assert settings.reload is False


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FACTURAS_FILE", str(tmp_path / "data.json"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("API_RELOAD", "true")

    settings = get_settings()
    assert settings.port == 8080
    assert settings.facturas_file == Path(tmp_path / "data.json")
    assert settings.log_level == "debug"
    assert settings.reload is True


def test_get_local_ip_address_falls_back_to_loopback(monkeypatch):
    class _NoNetworkSocket:
        def __init__(self, *args, **kwargs):
            pass

        def connect(self, address):
            raise OSError("network unreachable")

        def close(self):
            pass

    monkeypatch.setattr(network.socket, "socket", _NoNetworkSocket)
    monkeypatch.setattr(network.socket, "gethostbyname_ex", lambda name: (name, [], ["127.0.1.1"]))

    assert network.get_local_ip_address() == "127.0.0.1"


def test_server_address_uses_port(monkeypatch):
    monkeypatch.setattr(network, "get_local_ip_address", lambda: "192.168.1.20")
    assert network.server_address(3000) == "http://192.168.1.20:3000/"


def test_get_local_ip_address_returns_ipv4():
    address = network.get_local_ip_address()
    socket.inet_aton(address)


def test_get_local_ip_address_uses_default_route_interface(monkeypatch):
    """Test that the address the OS picks for outbound traffic wins over hostname lookups."""
    class _RoutedSocket:
        def __init__(self, *args, **kwargs):
            pass

        def connect(self, address):
            pass

        def getsockname(self):
            return ("192.168.1.20", 54321)

        def close(self):
            pass

    monkeypatch.setattr(network.socket, "socket", _RoutedSocket)
    monkeypatch.setattr(network.socket, "gethostbyname_ex", lambda name: (name, [], ["10.0.0.5"]))

    assert network.get_local_ip_address() == "192.168.1.20"


def test_get_local_ip_address_uses_hostname_when_route_is_loopback(monkeypatch):
    class _LoopbackSocket:
        def __init__(self, *args, **kwargs):
            pass

        def connect(self, address):
            pass

        def getsockname(self):
            return ("127.0.0.1", 54321)

        def close(self):
            pass

    monkeypatch.setattr(network.socket, "socket", _LoopbackSocket)
    monkeypatch.setattr(network.socket, "gethostbyname_ex", lambda name: (name, [], ["127.0.1.1", "10.0.0.5"]))

    assert network.get_local_ip_address() == "10.0.0.5"
