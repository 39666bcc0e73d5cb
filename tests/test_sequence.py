"""Tests for shuffling, rotation and resume points."""

from __future__ import annotations

import random
from collections import Counter
from pathlib import Path

import pytest

from splay.dirs import Entry
from splay.sequence import (
    ResumeNotFoundError,
    album_order,
    resume_order,
    rotate,
    shuffle,
    track_order,
)


def _entries(*names: str) -> list[Entry]:
    return [Entry(name=n, path=Path("/music") / n, is_dir=False) for n in names]


def _names(entries: list[Entry]) -> list[str]:
    return [e.name for e in entries]


class TestRotate:
    def test_element_at_index_comes_first(self):
        assert rotate(["a", "b", "c", "d"], 2) == ["c", "d", "a", "b"]

    def test_index_zero_is_identity(self):
        assert rotate(["a", "b", "c"], 0) == ["a", "b", "c"]

    def test_last_index(self):
        assert rotate(["a", "b", "c"], 2) == ["c", "a", "b"]

    def test_preserves_cyclic_order(self):
        items = list(range(7))
        for k in range(len(items)):
            rotated = rotate(items, k)
            assert rotated[0] == items[k]
            assert [rotated[(i - k) % 7] for i in range(7)] == items

    def test_empty(self):
        assert rotate([], 0) == []

    def test_does_not_modify_input(self):
        items = ["a", "b", "c"]
        rotate(items, 1)
        assert items == ["a", "b", "c"]


class TestShuffle:
    def test_is_a_permutation(self):
        items = ["a", "b", "b", "c", "d", "e"]
        out = shuffle(items, random.Random(7))
        assert len(out) == len(items)
        assert Counter(out) == Counter(items)

    def test_same_seed_same_order(self):
        items = list(range(20))
        assert shuffle(items, random.Random(3)) == shuffle(items, random.Random(3))

    def test_does_not_modify_input(self):
        items = list(range(10))
        shuffle(items, random.Random(1))
        assert items == list(range(10))

    def test_empty_and_single(self):
        assert shuffle([], random.Random(0)) == []
        assert shuffle(["x"], random.Random(0)) == ["x"]

    def test_swaps_within_remaining_range(self):
        rng = random.Random(0)
        rng.randrange = lambda start, stop: stop - 1
        # i=0 swaps with 2, i=1 swaps with 2, i=2 stays
        assert shuffle(["a", "b", "c"], rng) == ["c", "a", "b"]


class TestResumeOrder:
    def test_empty_start_keeps_order(self):
        entries = _entries("01 One.mp3", "02 Two.mp3", "03 Three.mp3")
        assert _names(resume_order(entries, "")) == [
            "01 One.mp3",
            "02 Two.mp3",
            "03 Three.mp3",
        ]

    def test_rotates_to_best_match(self):
        entries = _entries("01 One.mp3", "02 Two.mp3", "03 Three.mp3")
        assert _names(resume_order(entries, "two")) == [
            "02 Two.mp3",
            "03 Three.mp3",
            "01 One.mp3",
        ]

    def test_unmatched_start_raises(self):
        entries = _entries("01 One.mp3", "02 Two.mp3")
        with pytest.raises(ResumeNotFoundError) as excinfo:
            resume_order(entries, "seven")
        assert excinfo.value.pattern == "seven"
        assert "seven" in str(excinfo.value)

    def test_empty_listing_with_start_raises(self):
        with pytest.raises(ResumeNotFoundError):
            resume_order([], "anything")

    def test_empty_listing_without_start(self):
        assert resume_order([], "") == []


class TestTrackOrder:
    def test_natural_order_rotated(self, tmp_path):
        for name in ("02 - B.mp3", "01 - A.mp3", "03 - C.mp3"):
            (tmp_path / name).touch()
        assert _names(track_order(tmp_path, "03")) == [
            "03 - C.mp3",
            "01 - A.mp3",
            "02 - B.mp3",
        ]

    def test_skips_ds_store_and_directories(self, tmp_path):
        (tmp_path / ".DS_Store").touch()
        (tmp_path / "scans").mkdir()
        (tmp_path / "track.flac").touch()
        assert _names(track_order(tmp_path)) == ["track.flac"]

    def test_missing_album_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            track_order(tmp_path / "nope")


class TestAlbumOrder:
    @pytest.fixture()
    def artist(self, tmp_path):
        for name in ("Blonde on Blonde", "Desire", "Highway 61 Revisited", "Infidels"):
            (tmp_path / name).mkdir()
        (tmp_path / ".DS_Store").touch()
        return tmp_path

    def test_contains_every_album_once(self, artist):
        order = _names(album_order(artist, "", random.Random(5)))
        assert sorted(order) == [
            "Blonde on Blonde",
            "Desire",
            "Highway 61 Revisited",
            "Infidels",
        ]

    def test_starts_at_resume_point(self, artist):
        order = _names(album_order(artist, "desire", random.Random(5)))
        assert order[0] == "Desire"
        assert len(order) == 4

    def test_rotation_of_the_shuffled_order(self, artist):
        shuffled = _names(album_order(artist, "", random.Random(11)))
        k = shuffled.index("Infidels")
        rotated = _names(album_order(artist, "infidels", random.Random(11)))
        assert rotated == shuffled[k:] + shuffled[:k]

    def test_unmatched_start_raises(self, artist):
        with pytest.raises(ResumeNotFoundError):
            album_order(artist, "nashville skyline", random.Random(1))
