"""Notification parameters and their ``application/x-www-form-urlencoded`` body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import Configuration
from .encoding import percent_encode
from .errors import ArgumentError

MIN_PRIORITY = -2
MAX_PRIORITY = 2


@dataclass(frozen=True)
class DispatchRequest:
    """Everything needed to send one notification, resolved once per run.

    Attributes:
        title: Notification title.
        message: Notification body text.
        priority: -2 (lowest) to 2 (emergency); 0 is the API default.
        token_override: App token that replaces the configured one.
        sound: Optional sound name.
        device: Optional device name.
    """
    title: str
    message: str
    priority: int = 0
    token_override: Optional[str] = None
    sound: Optional[str] = None
    device: Optional[str] = None

    def __post_init__(self) -> None:
        if not MIN_PRIORITY <= self.priority <= MAX_PRIORITY:
            raise ArgumentError(f"Priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}.")

    @classmethod
    def from_config(
        cls,
        config: Configuration,
        message: str,
        title: Optional[str] = None,
        priority: int = 0,
        token_override: Optional[str] = None,
    ) -> "DispatchRequest":
        """Merge CLI parameters with *config* (title default, sound, device)."""
        return cls(
            title=title if title is not None else config.title_or_default(),
            message=message,
            priority=priority,
            token_override=token_override,
            sound=config.sound,
            device=config.device,
        )


def effective_token(config: Configuration, request: DispatchRequest) -> str:
    """Return the token to transmit: the override if given, else the configured one."""
    if request.token_override is not None:
        return request.token_override
    return config.pushover_token


def build_form(request: DispatchRequest, *, user: str, token: str) -> str:
    """Encode *request* into a form body.

    Field order is fixed: token, user, title, message, then priority (only
    when non-zero), sound and device (only when set).
    """
    fields: List[Tuple[str, str]] = [
        ("token", token),
        ("user", user),
        ("title", request.title),
        ("message", request.message),
    ]
    if request.priority != 0:
        fields.append(("priority", str(request.priority)))
    if request.sound is not None:
        fields.append(("sound", request.sound))
    if request.device is not None:
        fields.append(("device", request.device))

    return "&".join(f"{key}={percent_encode(value)}" for key, value in fields)
