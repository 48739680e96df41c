"""Form-style percent-encoding for ``application/x-www-form-urlencoded`` bodies."""

from __future__ import annotations

import string

# Characters that pass through unchanged
_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-_.~")


def percent_encode(text: str) -> str:
    """Encode *text* for use as a form field value.

    Unreserved characters are kept, a space becomes ``+``, and anything else
    becomes one uppercase ``%XX`` triplet per UTF-8 byte.
    """
    out = []
    for ch in text:
        if ch in _UNRESERVED:
            out.append(ch)
        elif ch == " ":
            out.append("+")
        else:
            out.extend(f"%{b:02X}" for b in ch.encode("utf-8"))
    return "".join(out)
