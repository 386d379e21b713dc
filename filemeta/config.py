"""Read-only lookup of user defaults for filemeta.

Users may place a JSON object at ``CONFIG_PATH`` to set the in-flight bound
for batch lookups. The package never writes this file; a missing, unreadable
or malformed file means "no overrides".
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_PATH = Path(user_config_dir("filemeta", appauthor=False)) / "config.json"
MAX_CONCURRENT_LOOKUPS_KEY = "max_concurrent_lookups"

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Return the user defaults object, or ``{}`` when there is none usable."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config at %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_max_concurrent_lookups() -> int | None:
    """Return the configured in-flight lookup bound, or ``None`` for unbounded.

    Booleans, non-integers and values below 1 are ignored.
    """
    value = load_config().get(MAX_CONCURRENT_LOOKUPS_KEY)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "load_max_concurrent_lookups",
]
