"""
Command-line interface for biip.

Usage:
    cat file | biip
    biip [FILE ...]   # read and redact one or more files
    biip              # interactive paste; press Ctrl-D to finish
"""

import argparse
import codecs
import logging
import math
import sys
from typing import Iterable, Optional, TextIO

from dotenv import load_dotenv

from .config import MATCH_TIMEOUT_ENV, PATTERNS_ENV
from .engine import Biip
from .redactor import RedactionError

logger = logging.getLogger(__name__)

BINARY_SNIFF_BYTES = 8192
SEPARATOR = "──────────"


def timeout_seconds(value: str) -> float:
    """Parse --timeout, accepting only finite numbers of seconds."""
    try:
        seconds = float(value)
    except ValueError:
        seconds = math.nan
    if not math.isfinite(seconds):
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biip",
        description="Scrub personal and sensitive information from text.",
        epilog=(
            f"Environment: {PATTERNS_ENV} adds patterns (one per line), "
            f"{MATCH_TIMEOUT_ENV} sets the per-rule match timeout in seconds."
        ),
    )
    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="files to redact; reads stdin when omitted")
    parser.add_argument("-p", "--pattern", action="append", default=[],
                        dest="patterns", metavar="PATTERN",
                        help="extra regular expression to redact (repeatable)")
    parser.add_argument("--timeout", type=timeout_seconds, default=None, metavar="SECONDS",
                        help="override the per-rule match timeout (0 disables it)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log which redactors are active")
    return parser


def is_probably_binary(path: str) -> bool:
    """
    Return True if the start of the file looks binary.

    A NUL byte or invalid UTF-8 in the first few kilobytes counts as binary,
    the same heuristic less and grep use.
    """
    with open(path, "rb") as f:
        chunk = f.read(BINARY_SNIFF_BYTES)

    if b"\x00" in chunk:
        return True
    try:
        # final=False tolerates a multi-byte character cut at the chunk end
        codecs.getincrementaldecoder("utf-8")().decode(chunk, final=False)
    except UnicodeDecodeError:
        return True
    return False


def process_lines(lines: Iterable[str], biip: Biip, out: TextIO) -> None:
    for line in lines:
        out.write(biip.process(line.rstrip("\r\n")) + "\n")


def process_file(path: str, biip: Biip, out: TextIO, err: TextIO) -> None:
    if is_probably_binary(path):
        err.write(f"warning: binary file skipped: {path}\n")
        return

    out.write(f"─── {path} ───\n")
    with open(path, encoding="utf-8") as f:
        process_lines(f, biip, out)


def run_interactive(biip: Biip, stdin: TextIO, out: TextIO, err: TextIO) -> None:
    err.write("Paste content. Press Ctrl-D (Unix/macOS) or Ctrl-Z then Enter (Windows) to finish:\n")
    err.write(SEPARATOR + "\n")
    text = stdin.read()
    err.write(SEPARATOR + "\n")
    out.write(biip.process(text) + "\n")


def main(argv: Optional[list[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )
    load_dotenv()

    biip = Biip.from_environment(extra_patterns=args.patterns)
    if args.timeout is not None:
        biip = Biip(biip.redactors, match_timeout=args.timeout if args.timeout > 0 else None)

    try:
        if args.files:
            for path in args.files:
                process_file(path, biip, stdout, stderr)
        elif not stdin.isatty():
            process_lines(stdin, biip, stdout)
        else:
            run_interactive(biip, stdin, stdout, stderr)
    except (OSError, UnicodeDecodeError, RedactionError) as e:
        stderr.write(f"error: {e}\n")
        return 1

    return 0
