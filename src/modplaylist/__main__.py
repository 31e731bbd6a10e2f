"""
Run after installing (or with src/ on PYTHONPATH):
  python -m modplaylist encode "Favorites" 3103731294 42:0   # print a share code
  python -m modplaylist decode CODE                          # show a share code
  python -m modplaylist info CODE                            # show its format version
  python -m modplaylist list                                 # saved playlists
  python -m modplaylist import CODE --name "From a friend"   # save a share code
  python -m modplaylist export "Favorites"                   # share code of a saved playlist
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from modplaylist.codec import LATEST_FORMAT, SUPPORTED_FORMATS, deserialize, format_version, serialize
from modplaylist.config_paths import get_playlists_path
from modplaylist.models import Playlist, PlaylistMod
from modplaylist.store import PlaylistStore


def _parse_mod(arg: str) -> PlaylistMod:
    """'123' or '123:1' -> enabled, '123:0' -> disabled."""
    id_part, sep, flag = arg.partition(":")
    if sep and flag not in ("0", "1"):
        raise argparse.ArgumentTypeError(f"Bad enabled flag in {arg!r} (use :0 or :1)")
    try:
        return PlaylistMod(id=int(id_part), enabled=flag != "0")
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Bad mod id {id_part!r}: {e}") from e


def _print_playlist(playlist: Playlist) -> None:
    print(f"{playlist.name or '(default)'}: {len(playlist.mods)} mod(s)")
    for mod in playlist.mods:
        print(f"  {'+' if mod.enabled else '-'}{mod.id}")


def _open_store(args) -> PlaylistStore:
    path = args.file if args.file is not None else get_playlists_path()
    return PlaylistStore(path)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="modplaylist",
        description="Encode, decode, and manage mod playlist share codes.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    formats = [str(v) for v in SUPPORTED_FORMATS]

    p = sub.add_parser("encode", help="Print the share code for a playlist")
    p.add_argument("name", help="Playlist name (empty string for the default playlist)")
    p.add_argument("mods", nargs="*", type=_parse_mod, metavar="ID[:0|1]")
    p.add_argument("--format", type=int, default=LATEST_FORMAT, choices=SUPPORTED_FORMATS,
                   metavar="N", help=f"Format version ({', '.join(formats)})")

    p = sub.add_parser("decode", help="Show the playlist in a share code")
    p.add_argument("code")

    p = sub.add_parser("info", help="Show the format version of a share code")
    p.add_argument("code")

    p = sub.add_parser("list", help="List saved playlists")
    p.add_argument("--file", type=Path, help="Playlists file (default: config dir)")

    p = sub.add_parser("import", help="Save a share code as a playlist")
    p.add_argument("code")
    p.add_argument("--name", help="Save under this name instead of the encoded one")
    p.add_argument("--file", type=Path, help="Playlists file (default: config dir)")

    p = sub.add_parser("export", help="Print the share code of a saved playlist")
    p.add_argument("name")
    p.add_argument("--format", type=int, default=LATEST_FORMAT, choices=SUPPORTED_FORMATS,
                   metavar="N", help=f"Format version ({', '.join(formats)})")
    p.add_argument("--file", type=Path, help="Playlists file (default: config dir)")

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "encode":
            print(serialize(Playlist(name=args.name, mods=args.mods), args.format))
        elif args.command == "decode":
            _print_playlist(deserialize(args.code))
        elif args.command == "info":
            print(f"format {format_version(args.code)}")
        elif args.command == "list":
            store = _open_store(args)
            for playlist in sorted(store.get(), key=lambda p: p.name):
                if not playlist.is_default:
                    _print_playlist(playlist)
        elif args.command == "import":
            playlist = _open_store(args).import_share_code(args.code, name=args.name)
            print(f"Imported '{playlist.name}' ({len(playlist.mods)} mod(s))")
        elif args.command == "export":
            print(_open_store(args).export_share_code(args.name, args.format))
    except KeyError as e:
        print(f"Error: no playlist named {e.args[0]!r}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
