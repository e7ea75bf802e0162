"""Command line interface for wadkit."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

import yaml

from .api import dump_lump, extract_lumps, inspect_wad, validate_wad
from .format.errors import WadError
from .format.inspector import validate_wad as _validate_info
from .logging import configure_logging, section, step
from .reporting import (
    JsonLinesReporter,
    PlainReporter,
    RichReporter,
    SilentReporter,
    get_reporter,
    set_reporter,
    set_verbosity,
)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2

_REPORTERS = ["plain", "rich", "json", "silent"]


def _dir_cmd(args: argparse.Namespace) -> int:
    info = inspect_wad(args.wad)
    if not info["directory_complete"]:
        get_reporter().warning("Directory exceeds file size; no entries listed")
        return EXIT_ISSUES
    entries = info["directory_entries"]
    with section(f"{args.wad.name} ({info['header']['wad_type']})"):
        for e in entries:
            marker = "  (marker)" if e["virtual"] else ""
            print(
                f"{e['index']:5d}  {e['name']:<8}  "
                f"{e['offset']:>10d}  {e['size']:>10d}{marker}"
            )
    rep = get_reporter()
    virtual = sum(1 for e in entries if e["virtual"])
    rep.summary(
        "directory", lumps=len(entries), virtual=virtual, file_size=info["file_size"]
    )
    return EXIT_OK


def _inspect_cmd(args: argparse.Namespace) -> int:
    step(f"inspecting {args.wad.name}")
    info = inspect_wad(args.wad)
    issues = _validate_info(info)
    info["issues"] = issues
    print(json.dumps(info, indent=2, sort_keys=True))
    get_reporter().summary(
        "inspect", lumps=len(info["directory_entries"]), issues=len(issues)
    )
    return EXIT_OK


def _validate_cmd(args: argparse.Namespace) -> int:
    step(f"validating {args.wad.name}")
    issues = validate_wad(args.wad)
    rep = get_reporter()
    for issue in issues:
        rep.warning(issue)
    rep.summary("validate", issues=len(issues))
    return EXIT_ISSUES if issues else EXIT_OK


def _extract_cmd(args: argparse.Namespace) -> int:
    extract_lumps(args.wad, args.out_dir, names=args.lumps or None)
    return EXIT_OK


def _dump_cmd(args: argparse.Namespace) -> int:
    data = dump_lump(args.wad, args.lump)
    if args.format == "yaml":
        sys.stdout.write(yaml.safe_dump(data, sort_keys=False))
    else:
        print(json.dumps(data, indent=2))
    get_reporter().summary("dump", lump=args.lump.upper(), format=args.format)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wadkit", description="Read-only WAD inspection and lump decoding"
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=_REPORTERS,
        default=None,
        help="Reporter backend: plain (default), rich, json (JSONL events), "
        "silent. Defaults to $WADKIT_REPORTER when set.",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    d = sub.add_parser("dir", help="List directory entries")
    d.add_argument("wad", type=Path)
    d.set_defaults(func=_dir_cmd)

    i = sub.add_parser("inspect", help="Print header and directory as JSON")
    i.add_argument("wad", type=Path)
    i.set_defaults(func=_inspect_cmd)

    v = sub.add_parser("validate", help="Check directory against file size")
    v.add_argument("wad", type=Path)
    v.set_defaults(func=_validate_cmd)

    x = sub.add_parser("extract", help="Write raw lumps to a directory")
    x.add_argument("wad", type=Path)
    x.add_argument("out_dir", type=Path)
    x.add_argument(
        "--lump",
        dest="lumps",
        action="append",
        metavar="NAME",
        help="Only extract lumps with this name (repeatable)",
    )
    x.set_defaults(func=_extract_cmd)

    du = sub.add_parser("dump", help="Decode a known lump and print it")
    du.add_argument("wad", type=Path)
    du.add_argument("lump", help="PLAYPAL, COLORMAP, PNAMES, TEXTURE1 or TEXTURE2")
    du.add_argument("--format", choices=["json", "yaml"], default="json")
    du.set_defaults(func=_dump_cmd)

    return p


def _select_reporter(requested: str | None) -> None:
    if requested is None:
        env = os.getenv("WADKIT_REPORTER", "plain").lower()
        requested = env if env in _REPORTERS else "plain"
    if requested == "json":
        set_reporter(JsonLinesReporter(stream=sys.stderr))
    elif requested == "silent":
        set_reporter(SilentReporter())
    elif requested == "rich" and sys.stderr.isatty():
        set_reporter(RichReporter())
    else:
        # rich without a TTY falls back to plain
        set_reporter(PlainReporter())


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    _select_reporter(args.reporter)
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    rep = get_reporter()
    try:
        return args.func(args)
    except WadError as e:
        rep.error(str(e))
        return EXIT_ERROR
    except (KeyError, ValueError, OSError) as e:
        rep.error(f"{type(e).__name__}: {e}")
        return EXIT_ERROR
    finally:
        rep.flush()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
