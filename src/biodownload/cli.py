"""Command line entry point for biodownload."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .catalog import get_resource, list_resources
from .config import get_download_dir
from .errors import BioDownloadError
from .engine import download, transfer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biodownload",
        description="Download bioinformatics ontology and annotation files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List catalog resources.")

    fetch = commands.add_parser("fetch", help="Download catalog resources by name.")
    fetch.add_argument("names", nargs="+", help="Resource names (see 'biodownload list').")
    fetch.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory (default: $BIODOWNLOAD_DIR or the user cache directory).",
    )

    url = commands.add_parser("url", help="Download an arbitrary URL to a file.")
    url.add_argument("url", help="http, https, ftp or file URL.")
    url.add_argument("dest", type=Path, help="Destination file path.")
    return parser


def _fetch(names: Sequence[str], out_dir: Path | None) -> int:
    target_dir = out_dir if out_dir is not None else get_download_dir()
    failed: list[str] = []
    for name in names:
        try:
            resource = get_resource(name)
            path = download(resource, target_dir)
        except (BioDownloadError, ValueError) as exc:
            logger.error("Failed to download %s: %s", name, exc)
            print(f"FAILED\t{name}\t{exc}", file=sys.stderr)
            failed.append(name)
            continue
        print(f"{name}\t{path}")
    if failed:
        logger.error("%d of %d downloads failed: %s", len(failed), len(names), ", ".join(failed))
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command == "list":
        for resource in list_resources():
            print(f"{resource.name}\t{resource.url}")
        return 0
    if args.command == "fetch":
        return _fetch(args.names, args.out)

    try:
        path = transfer(args.url, args.dest)
    except BioDownloadError as exc:
        logger.error("Failed to download %s: %s", args.url, exc)
        print(f"FAILED\t{args.url}\t{exc}", file=sys.stderr)
        return 1
    print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
