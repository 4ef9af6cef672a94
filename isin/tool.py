"""isin-tool — bulk-check ISINs, or build one from its parts.

Usage:
    isin-tool check [FILE ...] [--strict | --loose] [--json] [--fail-fast]
    isin-tool build PREFIX BASIC_CODE [--strict]

`check` reads one candidate per line (stdin when no FILE or FILE is "-"),
skips blank lines, reports every rejection with its line number and exits 1
if any line was rejected. A file of known-good ISINs therefore doubles as a
regression test for the parser. Input is decoded as UTF-8: a leading BOM is
ignored and undecodable bytes turn their line into a rejection. A FILE that
cannot be opened is reported on stderr and the command exits 1.
"""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO, final

from isin.core.config import LENIENT, LOOSE, STRICT, ParseConfig
from isin.core.identifier import build, parse_with
from isin.core.result import Err, Ok

_log = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class CheckSummary:
    """Counts from one `check` run."""

    checked: int
    rejected: int

    @property
    def ok(self) -> bool:
        return self.rejected == 0


def _numbered_lines(streams: Iterable[TextIO]) -> Iterator[tuple[str, int, str]]:
    for stream in streams:
        name = getattr(stream, "name", "<stdin>")
        for lineno, line in enumerate(stream, 1):
            candidate = line.rstrip("\r\n")
            if candidate.strip():
                yield name, lineno, candidate


def check_lines(
    streams: Iterable[TextIO],
    config: ParseConfig,
    out: TextIO,
    *,
    as_json: bool = False,
    fail_fast: bool = False,
) -> CheckSummary:
    """Parse every non-blank line and report rejections to `out`."""
    checked = 0
    rejected = 0
    for name, lineno, candidate in _numbered_lines(streams):
        checked += 1
        match parse_with(candidate, config):
            case Ok(isin):
                if as_json:
                    out.write(json.dumps({
                        "source": name, "line": lineno, "valid": True, "isin": isin.value,
                    }) + "\n")
            case Err(error):
                rejected += 1
                if as_json:
                    out.write(json.dumps({
                        "source": name, "line": lineno, "valid": False,
                        "input": candidate, "error": error.to_dict(),
                    }) + "\n")
                else:
                    out.write(f"{name}:{lineno}: {candidate!r}: {error.message}\n")
                if fail_fast:
                    break
    _log.info("checked %d candidate(s), %d rejected", checked, rejected)
    return CheckSummary(checked=checked, rejected=rejected)


def _config_from_args(args: argparse.Namespace) -> ParseConfig:
    if getattr(args, "strict", False):
        return STRICT
    if getattr(args, "loose", False):
        return LOOSE
    return LENIENT


def _open_input(path: str) -> TextIO:
    """Open a FILE argument as UTF-8 text; a leading BOM is dropped, bad bytes become U+FFFD."""
    if path != "-":
        return open(path, encoding="utf-8-sig", errors="replace")  # noqa: SIM115
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin
    return io.TextIOWrapper(buffer, encoding="utf-8-sig", errors="replace")


def _release(stream: TextIO) -> None:
    if stream is sys.stdin:
        return
    if isinstance(stream, io.TextIOWrapper) and stream.buffer is getattr(sys.stdin, "buffer", None):
        stream.detach()  # leave the process's stdin open
    else:
        stream.close()


def _cmd_check(args: argparse.Namespace) -> int:
    streams: list[TextIO] = []
    try:
        failed = False
        for path in args.files or ["-"]:
            try:
                streams.append(_open_input(path))
            except OSError as e:
                print(f"error: {path}: {e.strerror or e}", file=sys.stderr)
                failed = True
        if failed:
            return 1
        try:
            summary = check_lines(
                streams, _config_from_args(args), sys.stdout,
                as_json=args.json, fail_fast=args.fail_fast,
            )
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    finally:
        for stream in streams:
            _release(stream)
    if not args.json:
        print(f"{summary.checked} checked, {summary.rejected} rejected", file=sys.stderr)
    return 0 if summary.ok else 1


def _cmd_build(args: argparse.Namespace) -> int:
    match build(args.prefix, args.basic_code, _config_from_args(args)):
        case Ok(isin):
            print(isin)
            return 0
        case Err(error):
            print(f"error: {error.message}", file=sys.stderr)
            return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="isin-tool",
        description="Validate or build International Securities Identification Numbers",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every rejection (DEBUG level)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check ISINs, one per line")
    check.add_argument("files", nargs="*", help='Input files (default or "-": stdin)')
    mode = check.add_mutually_exclusive_group()
    mode.add_argument(
        "--strict", action="store_true", help="Require an assigned country or special prefix",
    )
    mode.add_argument(
        "--loose", action="store_true", help="Trim whitespace and uppercase before checking",
    )
    check.add_argument("--json", action="store_true", help="Emit one JSON object per line")
    check.add_argument("--fail-fast", action="store_true", help="Stop at the first rejection")
    check.set_defaults(handler=_cmd_check)

    make = sub.add_parser("build", help="Build an ISIN from prefix and basic code")
    make.add_argument("prefix", help="Two-letter prefix, e.g. US")
    make.add_argument("basic_code", help="Nine-character basic code, e.g. 037833100")
    make.add_argument(
        "--strict", action="store_true", help="Require an assigned country or special prefix",
    )
    make.set_defaults(handler=_cmd_build)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
