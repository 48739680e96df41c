"""Split an HTTPS URL into the host, port, and path needed to open a socket."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidPort, UnsupportedScheme

SCHEME = "https://"
DEFAULT_PORT = 443


@dataclass(frozen=True)
class EndpointTarget:
    """Where a request goes: TLS peer ``host:port`` and the request path."""
    host: str
    port: int
    path: str


def resolve_url(url: str) -> EndpointTarget:
    """Decompose *url* into an :class:`EndpointTarget`.

    Only ``https://`` URLs are accepted. The path defaults to ``/`` and the
    port to 443. An empty authority (``"https://"``) yields an empty host
    rather than an error.

    Raises:
        UnsupportedScheme: If *url* does not start with ``https://``.
        InvalidPort: If the port is not an integer in 0..65535.
    """
    if not url.startswith(SCHEME):
        raise UnsupportedScheme(f"Only HTTPS URLs are supported: {url!r}")

    rest = url[len(SCHEME):]
    authority, sep, tail = rest.partition("/")
    path = sep + tail if sep else "/"

    host, colon, port_text = authority.partition(":")
    if not colon:
        return EndpointTarget(host=host, port=DEFAULT_PORT, path=path)

    # int() would also accept "+80", " 80" and "8_0"
    if not port_text.isascii() or not port_text.isdigit():
        raise InvalidPort(f"Invalid port {port_text!r} in {url!r}")
    port = int(port_text)
    if port > 0xFFFF:
        raise InvalidPort(f"Port {port} out of range in {url!r}")
    return EndpointTarget(host=host, port=port, path=path)
