"""One-shot TLS transport: connect, handshake, write, read until close.

Each phase raises its own :class:`~pushover_cli.errors.TransportError`
subclass so the caller can tell a DNS failure from a bad certificate.
"""

from __future__ import annotations

import logging
import socket
import ssl
from typing import List, Optional

import requests.certs

from ..errors import ConnectError, HandshakeError, ReadError, WriteError

logger = logging.getLogger(__name__)

RECV_SIZE = 4096


def create_tls_context() -> ssl.SSLContext:
    """Build a client context that trusts the Mozilla CA bundle.

    Certificates and hostnames are verified; TLS 1.2 is the minimum.
    """
    ctx = ssl.create_default_context(cafile=requests.certs.where())
    ctx.minimum_version = ssl.TLSVersion.TLSv1_2
    return ctx


def deliver(
    host: str,
    port: int,
    request: bytes,
    *,
    timeout: Optional[float] = None,
    context: Optional[ssl.SSLContext] = None,
) -> bytes:
    """Send *request* to *host*:*port* over TLS and return the raw response.

    The response is read until the server closes the connection. *timeout*
    bounds each socket operation; ``None`` blocks indefinitely.

    Raises:
        ConnectError: DNS lookup or TCP connect failed.
        HandshakeError: TLS negotiation or certificate verification failed.
        WriteError: The request could not be sent.
        ReadError: The response could not be read.
    """
    try:
        sock = socket.create_connection((host, port), timeout=timeout)
    except (OSError, ValueError) as e:
        # IDNA encoding failures surface as UnicodeError
        raise ConnectError(f"Could not connect to {host}:{port}: {e}") from e

    with sock:
        try:
            ctx = context if context is not None else create_tls_context()
            tls = ctx.wrap_socket(sock, server_hostname=host)
        except (ssl.SSLError, OSError, ValueError) as e:
            raise HandshakeError(f"TLS handshake with {host} failed: {e}") from e

        with tls:
            try:
                tls.sendall(request)
            except OSError as e:
                raise WriteError(f"Failed to send request to {host}: {e}") from e
            logger.debug("Sent %d bytes to %s:%d", len(request), host, port)

            chunks: List[bytes] = []
            while True:
                try:
                    chunk = tls.recv(RECV_SIZE)
                except OSError as e:
                    raise ReadError(f"Failed to read response from {host}: {e}") from e
                if not chunk:
                    break
                chunks.append(chunk)

    response = b"".join(chunks)
    logger.debug("Received %d bytes from %s:%d", len(response), host, port)
    return response
