"""Load splay configuration from a TOML file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("~/.config/splay.toml")


@dataclass
class Config:
    """Splay configuration."""

    player: str = "afplay"
    tracks: bool = False
    prefer_album: bool = False


def load_config(path: Path | str) -> Config:
    """Load configuration from a TOML file.

    Returns a :class:`Config` with defaults for any missing keys.
    If the file does not exist, returns a default :class:`Config`.
    """
    path = Path(path).expanduser()
    if not path.is_file():
        return Config()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return Config(
        player=_get(data, "player", str, Config.player),
        tracks=_get(data, "tracks", bool, Config.tracks),
        prefer_album=_get(data, "prefer-album", bool, Config.prefer_album),
    )


def _get(data: dict, key: str, kind: type, default):
    """Return *data[key]*, raising ``ValueError`` if it is not a *kind*."""
    value = data.get(key, default)
    if not isinstance(value, kind):
        raise ValueError(
            f"Config key '{key}' must be a {kind.__name__}, got {value!r}"
        )
    return value
