"""Configuration file locations.

The system-wide file is checked first, then the per-user file under the XDG
config directory, then a development copy relative to the working directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional


APP_NAME = "pushover"
CONFIG_FILE = "config.toml"

SYSTEM_CONFIG = Path("/etc") / APP_NAME / CONFIG_FILE
LOCAL_CONFIG = Path("etc") / APP_NAME / CONFIG_FILE


def user_config_dir() -> Path:
    """Return the per-user config directory.

    Uses ``$XDG_CONFIG_HOME`` if set, otherwise ``~/.config/pushover``.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / APP_NAME


def config_candidates(explicit: Optional[str] = None) -> List[Path]:
    """Return the config files to try, in order.

    An *explicit* path replaces the search list entirely.
    """
    if explicit:
        return [Path(explicit)]
    return [SYSTEM_CONFIG, user_config_dir() / CONFIG_FILE, LOCAL_CONFIG]
