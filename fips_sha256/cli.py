"""Command-line entry point for fips-sha256."""

import argparse
import logging
import sys
from typing import Callable, Dict, Optional, Sequence

from fips_sha256 import digest

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())

STDIN_PATH = "-"


class SourceReadError(Exception):
    """Raised when the bytes of a source cannot be read."""


def _graph_digest(message: bytes) -> str:
    # tensorflow is only imported when the graph backend is asked for
    from fips_sha256 import graph

    return graph.digest(message)


BACKENDS: Dict[str, Callable[[bytes], str]] = {
    "python": digest.digest,
    "graph": _graph_digest,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fips-sha256", description="Print SHA-256 digests of files."
    )
    parser.add_argument(
        "paths", nargs="+", metavar="PATH", help="Files to hash, '-' for stdin"
    )
    parser.add_argument(
        "--backend",
        choices=sorted(BACKENDS),
        default="python",
        help="Implementation used to compute the digest",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress messages"
    )
    return parser


def read_source(path: str) -> bytes:
    """
    Read every byte of a source.

    Args:
        path: File path, or '-' for standard input.

    Returns:
        The raw bytes.

    Raises:
        SourceReadError: If the source cannot be opened or read.
    """
    if path == STDIN_PATH:
        return sys.stdin.buffer.read()
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise SourceReadError(f"Unable to open file: {path} ({exc.strerror})") from exc


def main(
    argv: Optional[Sequence[str]] = None,
    stream=None,
    err_stream=None,
) -> int:
    """
    Run the CLI.

    Args:
        argv: Optional argument list for testing.
        stream: Stream receiving the digests. Defaults to stdout.
        err_stream: Stream receiving read errors. Defaults to stderr.

    Returns:
        Exit code, 1 if any source could not be read.
    """
    stream = stream or sys.stdout
    err_stream = err_stream or sys.stderr
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    hash_fn = BACKENDS[args.backend]

    exit_code = 0
    for path in args.paths:
        logger.info("Reading file: %s", path)
        try:
            message = read_source(path)
        except SourceReadError as exc:
            err_stream.write(f"Error: {exc}\n")
            exit_code = 1
            continue
        logger.info("File read successfully. Size: %d bytes", len(message))
        stream.write(f"{hash_fn(message)}  {path}\n")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
