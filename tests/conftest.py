"""Shared pytest fixtures for the pushover-cli test suite.

Provides configuration and request factories plus a fake TLS stack so
transport and dispatch tests never open a real network connection.
"""

from __future__ import annotations

from typing import List, Optional

import pytest

from pushover_cli.config import Configuration
from pushover_cli.form import DispatchRequest


OK_RESPONSE = (
    b"HTTP/1.1 200 OK\r\n"
    b"Content-Type: application/json; charset=utf-8\r\n"
    b"Connection: close\r\n"
    b"\r\n"
    b'{"status":1,"request":"647d2300-702c-4b38-8b2f-d56326ae460b"}'
)


@pytest.fixture
def make_config():
    """Factory fixture that builds ``Configuration`` objects with test credentials.

    Example::

        config = make_config(sound="cosmic")
    """

    def _make(**overrides) -> Configuration:
        defaults = dict(
            pushover_user="uQiRzpo4DXghDmr9QzzfQu27cmVRsG",
            pushover_token="azGDORePK8gMaC0QOYAMyEEuzJnyUi",
            default_title="Test Title",
            sound=None,
            device=None,
        )
        defaults.update(overrides)
        return Configuration(**defaults)

    return _make


@pytest.fixture
def make_request():
    """Factory fixture for ``DispatchRequest`` with a plain title and message."""

    def _make(**overrides) -> DispatchRequest:
        defaults = dict(title="Title", message="Hello")
        defaults.update(overrides)
        return DispatchRequest(**defaults)

    return _make


class FakeTLSSocket:
    """Stand-in for ``ssl.SSLSocket`` that records writes and replays reads."""

    def __init__(self, chunks: List[bytes], send_error: Optional[Exception] = None,
                 recv_error: Optional[Exception] = None) -> None:
        self.chunks = list(chunks)
        self.send_error = send_error
        self.recv_error = recv_error
        self.sent = b""
        self.closed = False

    def sendall(self, data: bytes) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent += data

    def recv(self, size: int) -> bytes:
        if self.recv_error is not None:
            raise self.recv_error
        if not self.chunks:
            return b""
        return self.chunks.pop(0)

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class FakeTLSContext:
    """Stand-in for ``ssl.SSLContext`` that hands out a ``FakeTLSSocket``."""

    def __init__(self, tls_socket: Optional[FakeTLSSocket] = None,
                 handshake_error: Optional[Exception] = None) -> None:
        self.tls_socket = tls_socket
        self.handshake_error = handshake_error
        self.server_hostname = None

    def wrap_socket(self, sock, server_hostname=None):
        self.server_hostname = server_hostname
        if self.handshake_error is not None:
            raise self.handshake_error
        return self.tls_socket


@pytest.fixture
def fake_tls():
    """Factory returning ``(context, tls_socket)`` for a scripted response."""

    def _make(chunks=(OK_RESPONSE,), **errors):
        handshake_error = errors.pop("handshake_error", None)
        tls_socket = FakeTLSSocket(list(chunks), **errors)
        return FakeTLSContext(tls_socket, handshake_error=handshake_error), tls_socket

    return _make
