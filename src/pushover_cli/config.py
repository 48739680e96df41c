"""Load and validate the TOML configuration file.

Expected layout::

    [pushover]
    user = "uQiRzpo4DXghDmr9QzzfQu27cmVRsG"
    token = "azGDORePK8gMaC0QOYAMyEEuzJnyUi"
    default_title = "backup-host"     # optional

    [notification]                    # optional
    sound = "cosmic"
    device = "iphone"

The dispatch core never reads files itself; it receives a
:class:`Configuration` from a :class:`ConfigProvider`.
"""

from __future__ import annotations

import logging
import os
import socket
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .errors import ConfigurationError
from .paths import config_candidates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configuration:
    """Credentials and delivery options for one run.

    Attributes:
        pushover_user: User (or group) key the notification is sent to.
        pushover_token: Application API token.
        default_title: Title used when ``-t`` is not given.
        sound: Optional notification sound name.
        device: Optional target device name.
    """
    pushover_user: str
    pushover_token: str
    default_title: Optional[str] = None
    sound: Optional[str] = None
    device: Optional[str] = None

    def title_or_default(self) -> str:
        """Return ``default_title``, or ``"<hostname> @"`` when it is unset."""
        if self.default_title is not None:
            return self.default_title
        host = os.environ.get("HOSTNAME") or socket.gethostname() or "localhost"
        return f"{host} @"


def _get_str(table: Dict[str, Any], key: str, section: str, required: bool) -> Optional[str]:
    if key not in table:
        if required:
            raise ConfigurationError(f"Missing required key '{key}' in [{section}]")
        return None
    value = table[key]
    if not isinstance(value, str):
        raise ConfigurationError(f"Key '{key}' in [{section}] must be a string")
    return value


def parse_config(text: str, source: str = "<string>") -> Configuration:
    """Parse TOML *text* into a :class:`Configuration`.

    Raises:
        ConfigurationError: On invalid TOML, a missing ``[pushover]`` section,
            a missing ``user``/``token``, or a value of the wrong type.
    """
    try:
        doc = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in config file {source}: {e}") from e

    pushover = doc.get("pushover")
    if not isinstance(pushover, dict):
        raise ConfigurationError(f"Missing [pushover] section in config file {source}")

    notification = doc.get("notification", {})
    if not isinstance(notification, dict):
        raise ConfigurationError(f"[notification] in config file {source} must be a table")

    return Configuration(
        pushover_user=_get_str(pushover, "user", "pushover", required=True),
        pushover_token=_get_str(pushover, "token", "pushover", required=True),
        default_title=_get_str(pushover, "default_title", "pushover", required=False),
        sound=_get_str(notification, "sound", "notification", required=False),
        device=_get_str(notification, "device", "notification", required=False),
    )


def load_config(paths: Sequence[Path]) -> Configuration:
    """Read and parse the first readable file in *paths*.

    Raises:
        ConfigurationError: If no file can be read, or the one found is invalid.
    """
    for path in paths:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping config %s: %s", path, e)
            continue
        logger.debug("Using config %s", path)
        return parse_config(text, source=str(path))

    tried = [str(p) for p in paths]
    if len(tried) > 1:
        listed = ", ".join(tried[:-1]) + f" and {tried[-1]}"
    else:
        listed = "".join(tried)
    raise ConfigurationError(f"Config file not found. Tried {listed}")


class ConfigProvider(Protocol):
    """Anything that can hand the dispatcher a :class:`Configuration`."""

    def load(self) -> Configuration:
        ...


class FileConfigProvider:
    """Load configuration from the first readable candidate file."""

    def __init__(self, paths: Optional[List[Path]] = None) -> None:
        self.paths = paths if paths is not None else config_candidates()

    def load(self) -> Configuration:
        return load_config(self.paths)


class StaticConfigProvider:
    """Return a configuration that already lives in memory."""

    def __init__(self, config: Configuration) -> None:
        self.config = config

    def load(self) -> Configuration:
        return self.config
