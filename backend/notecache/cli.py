"""Command-line entry point: parse the startup flags and serve notes."""

import argparse
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from notecache.config import ServerOptions
from notecache.main import create_app


def build_parser() -> argparse.ArgumentParser:
    # -h belongs to --host, so help is only reachable as --help
    parser = argparse.ArgumentParser(
        prog="notecache",
        description="Serve plain-text notes from a cache directory over HTTP.",
        add_help=False,
    )
    parser.add_argument("-h", "--host", required=True, help="server host")
    parser.add_argument("-p", "--port", required=True, type=int, help="server port")
    parser.add_argument("-c", "--cache", required=True, help="cache directory")
    parser.add_argument("--help", action="help", help="show this help message and exit")
    return parser


def parse_options(argv: Optional[List[str]] = None) -> Optional[ServerOptions]:
    """Returns None (after printing to stderr) when a flag is empty or invalid.

    Flags missing altogether are reported by argparse, which exits with status 2.
    """
    args = build_parser().parse_args(argv)
    for flag in ("host", "cache"):
        if not getattr(args, flag).strip():
            print(f"Error: input {flag}", file=sys.stderr)
            return None
    try:
        return ServerOptions(host=args.host, port=args.port, cache_dir=args.cache)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    options = parse_options(argv)
    if options is None:
        return 1
    uvicorn.run(create_app(options), host=options.host, port=options.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
