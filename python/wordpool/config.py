"""Configuration for the wordpool CLI.

config.json holds a "defaults" table. Any key it leaves out takes the
built-in value from FALLBACK_DEFAULTS. Only CLI defaults are configurable;
the languages themselves are fixed by the shipped word lists.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .lang import Lang

log = logging.getLogger(__name__)

CONFIG_NAME = "config.json"

# Built-in values for keys missing from config.json
FALLBACK_DEFAULTS = {
    "language": "en",
    "count": 1,
    "wordlist_dir": "wordlists",
    "verbose": False,
}

_config: Optional[dict[str, Any]] = None


def _search_paths() -> list[Path]:
    """Project root first (python/wordpool -> root), then the working directory."""
    return [
        Path(__file__).resolve().parents[2] / CONFIG_NAME,
        Path.cwd() / CONFIG_NAME,
    ]


def _read(path: Path) -> Optional[dict[str, Any]]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Ignoring unreadable config %s: %s", path, e)
        return None

    if not isinstance(data, dict) or not isinstance(data.get("defaults", {}), dict):
        log.warning('Ignoring config %s: expected a "defaults" object', path)
        return None

    log.debug("Loaded config from %s", path)
    return data


def load(path: Optional[Path] = None) -> dict[str, Any]:
    """Load config.json, filling unset defaults from FALLBACK_DEFAULTS.

    Args:
        path: Explicit config file. When given, the cached config is replaced
            and no other location is searched.
    """
    global _config
    if _config is not None and path is None:
        return _config

    if path is not None:
        candidates = [Path(path)]
    else:
        candidates = [p for p in _search_paths() if p.is_file()]

    data: dict[str, Any] = {}
    for candidate in candidates:
        found = _read(candidate)
        if found is not None:
            data = found
            break

    _config = {**data, "defaults": {**FALLBACK_DEFAULTS, **data.get("defaults", {})}}
    return _config


def reset() -> None:
    """Forget the loaded config so the next load() reads it again."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    return load()["defaults"].get(key, fallback)


def default_language() -> Lang:
    """Configured default language; an unknown code falls back to the built-in one."""
    code = get_default("language")
    try:
        return Lang.from_code(str(code))
    except ValueError as e:
        log.warning("%s; using %r", e, FALLBACK_DEFAULTS["language"])
        return Lang.from_code(FALLBACK_DEFAULTS["language"])


def default_count() -> int:
    return int(get_default("count"))


def default_wordlist_dir() -> Path:
    return Path(get_default("wordlist_dir"))


def default_verbose() -> bool:
    return bool(get_default("verbose"))
