"""Exception hierarchy shared by the configuration, dispatch, and CLI layers.

Every error is terminal for a run: the CLI prints one diagnostic line and
exits non-zero. Nothing here is retried.
"""

from __future__ import annotations

from typing import Optional


class PushoverError(Exception):
    """Base class for every error raised by pushover-cli."""


class ConfigurationError(PushoverError):
    """The configuration file is missing, unreadable, or malformed."""


class ArgumentError(PushoverError):
    """A notification parameter is out of range or otherwise invalid."""


class UrlError(PushoverError):
    """The API URL could not be decomposed into host, port, and path."""


class UnsupportedScheme(UrlError):
    """The URL does not start with ``https://``."""


class InvalidPort(UrlError):
    """The port in the URL authority is not an integer in 0..65535."""


class TransportError(PushoverError):
    """Base class for network failures while talking to the API."""


class ConnectError(TransportError):
    """DNS resolution or the TCP connect failed."""


class HandshakeError(TransportError):
    """TLS negotiation failed (untrusted certificate, hostname mismatch, ...)."""


class WriteError(TransportError):
    """The request could not be written to the TLS stream."""


class ReadError(TransportError):
    """The response could not be read from the TLS stream."""


class DeliveryRejected(PushoverError):
    """The API answered with a status line that does not contain ``200``."""

    def __init__(self, status_line: str) -> None:
        self.status_line = status_line
        super().__init__(f"HTTP request failed: {status_line or '<empty response>'}")


class DispatchError(PushoverError):
    """A failure during dispatch, tagged with the pipeline stage it came from.

    Attributes:
        stage: ``"url"``, ``"transport"`` or ``"validation"``.
        cause: The underlying error.
    """

    def __init__(self, stage: str, cause: Optional[BaseException]) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")
