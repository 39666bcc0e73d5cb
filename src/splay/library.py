"""Music library: finds artists and albums matching a pattern.

Each direct sub-directory of the music root is an artist, each
sub-directory of an artist is an album.  Finding nothing is a normal
outcome and returns ``None``; failing to read a directory raises
``OSError``.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from splay.dirs import Entry, default_music_root, subdirectories
from splay.match import select_index
from splay.music import Album, Artist, Music

logger = logging.getLogger(__name__)


class MusicLibrary:
    """Read-only view on an ``Artist/Album/Track`` music collection."""

    def __init__(
        self, root: str | Path | None = None, rng: random.Random | None = None
    ) -> None:
        self._root = Path(root) if root is not None else default_music_root()
        self._rng = rng

    @property
    def root(self) -> Path:
        return self._root

    def list_artists(self) -> list[Entry]:
        return subdirectories(self._root)

    def list_albums(self) -> list[Entry]:
        """Return every album of every artist, artist by artist."""
        albums: list[Entry] = []
        for artist in self.list_artists():
            albums.extend(subdirectories(artist.path))
        return albums

    def locate_artist(self, pattern: str) -> Artist | None:
        """Return the artist best matching *pattern*, or ``None``."""
        artists = self.list_artists()
        index = select_index((a.name for a in artists), pattern)
        if index is None:
            logger.debug("No artist matches %r", pattern)
            return None
        logger.debug("Artist %r matches %r", artists[index].name, pattern)
        return Artist(artists[index].path, rng=self._rng)

    def locate_album(self, pattern: str) -> Album | None:
        """Return the album best matching *pattern*, whatever its artist."""
        albums = self.list_albums()
        index = select_index((a.name for a in albums), pattern)
        if index is None:
            logger.debug("No album matches %r", pattern)
            return None
        logger.debug("Album %r matches %r", albums[index].name, pattern)
        return Album(albums[index].path, show_name=False)

    def locate(self, pattern: str, *, prefer_album: bool = False) -> Music | None:
        """Find an artist, falling back to an album.

        With *prefer_album* the artist search is skipped.
        """
        if not prefer_album:
            artist = self.locate_artist(pattern)
            if artist is not None:
                return artist
        return self.locate_album(pattern)
