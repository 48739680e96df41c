"""Hand-framed HTTP/1.1 requests and status-line checking."""

from __future__ import annotations

from .. import __version__
from ..errors import DeliveryRejected

USER_AGENT = f"pushover-cli/{__version__}"


def frame_request(host: str, path: str, body: str) -> bytes:
    """Render a form POST for *path* on *host* as raw bytes.

    ``Content-Length`` counts UTF-8 bytes, not characters.
    """
    payload = body.encode("utf-8")
    head = (
        f"POST {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Content-Type: application/x-www-form-urlencoded\r\n"
        f"Content-Length: {len(payload)}\r\n"
        "Connection: close\r\n"
        f"User-Agent: {USER_AGENT}\r\n"
        "\r\n"
    )
    return head.encode("utf-8") + payload


def status_line(raw: bytes) -> str:
    """Return the first line of *raw*, or ``""`` for an empty response."""
    text = raw.decode("utf-8", errors="replace")
    return text.split("\n", 1)[0].removesuffix("\r")


def check_response(raw: bytes) -> str:
    """Accept *raw* if its status line contains ``200`` and return that line.

    This is a substring test, so ``HTTP/1.1 200 OK`` passes and so would any
    status line that happens to contain ``200`` elsewhere.

    Raises:
        DeliveryRejected: For any other status line or an empty response.
    """
    line = status_line(raw)
    if "200" not in line:
        raise DeliveryRejected(line)
    return line
