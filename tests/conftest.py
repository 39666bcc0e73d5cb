"""Shared fixtures: a small fake music library on disk."""

from __future__ import annotations

import pytest

_LIBRARY = {
    "AC/DC": {},
    "Bob Dylan": {
        "Blonde on Blonde": ["01 Rainy Day Women.mp3", "02 Pledging My Time.mp3"],
        "Desire": ["01 Hurricane.mp3", "02 Isis.mp3", "03 Mozambique.mp3"],
    },
    "Bob Dylan & The Band": {
        "The Basement Tapes": ["01 Odds and Ends.mp3", "02 Orange Juice Blues.mp3"],
    },
    "Nirvana": {
        "Nevermind": ["01 Smells Like Teen Spirit.mp3", "02 In Bloom.mp3"],
        "In Utero": ["01 Serve the Servants.mp3"],
    },
    "Nirvana Tribute": {
        "Nevermind Again": ["01 Lithium.mp3"],
    },
}


@pytest.fixture()
def music_dir(tmp_path):
    """Create an ``Artist/Album/Track`` tree under *tmp_path*."""
    root = tmp_path / "Music"
    root.mkdir()
    for artist, albums in _LIBRARY.items():
        # "/" cannot appear in a directory name.
        artist_dir = root / artist.replace("/", "")
        artist_dir.mkdir()
        for album, tracks in albums.items():
            album_dir = artist_dir / album
            album_dir.mkdir()
            for track in tracks:
                (album_dir / track).touch()
    (root / ".DS_Store").touch()
    return root
