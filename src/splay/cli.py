"""Command-line entry point: find some music, then play or list it."""

from __future__ import annotations

import argparse
import logging
import sys

from splay.config import DEFAULT_CONFIG_PATH, Config, load_config
from splay.library import MusicLibrary
from splay.player import BUILTIN, PlaybackError, make_player
from splay.sequence import ResumeNotFoundError

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splay",
        description="splay – a simple jukebox for ~/Music/Artist/Album/Track",
    )
    parser.add_argument("pattern", nargs="*", help="Name of the thing to play")
    parser.add_argument(
        "--artist",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prefer artist name matches (default: on)",
    )
    parser.add_argument(
        "--album",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prefer album name matches",
    )
    parser.add_argument(
        "--from",
        dest="start",
        default="",
        help="The album or track to start playing from",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the playlist instead of playing it",
    )
    parser.add_argument(
        "--tracks",
        action="store_true",
        default=None,
        help="Print the name of each track before it is played",
    )
    parser.add_argument(
        "--player",
        default=None,
        help=f"Program used to play each track, or '{BUILTIN}'",
    )
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to TOML config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log what splay is doing to stderr",
    )
    return parser


def _merge(args: argparse.Namespace, cfg: Config) -> Config:
    """CLI flags override config values (only when explicitly provided)."""
    if args.artist is not None:
        prefer_album = not args.artist
    elif args.album is not None:
        prefer_album = args.album
    else:
        prefer_album = cfg.prefer_album
    return Config(
        player=args.player if args.player is not None else cfg.player,
        tracks=args.tracks if args.tracks is not None else cfg.tracks,
        prefer_album=prefer_album,
    )


def main(argv: list[str] | None = None, library: MusicLibrary | None = None) -> None:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if not args.pattern:
        print("Please provide the name of the thing to play.", file=sys.stderr)
        sys.exit(1)

    pattern = " ".join(args.pattern)
    try:
        cfg = _merge(args, load_config(args.config))
        if library is None:
            library = MusicLibrary()
        music = library.locate(pattern, prefer_album=cfg.prefer_album)
        if music is None:
            print(f'Error: Failed to find "{pattern}"', file=sys.stderr)
            sys.exit(1)

        logger.debug("Located %r", music)
        if args.list:
            music.list(args.start)
        else:
            music.play(make_player(cfg.player), args.start, announce=cfg.tracks)
    except (ResumeNotFoundError, PlaybackError, OSError, RuntimeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
