"""CLI entrypoint that refreshes the APK download page.

Scans the download folder for release APKs, renders the dev and stg lists
and writes them into ``index.html`` between the generated-list markers.
Nothing is written unless every marker region resolves.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from apk_index.builder import group_by_channel
from apk_index.data_loader import (
    DOWNLOAD_DIRNAME,
    INDEX_FILENAME,
    discover_apk_files,
    find_config,
    load_config,
    read_index,
    write_index,
)
from apk_index.injector import MarkerError, update_index_html
from apk_index.release import parse_apk_filenames
from apk_index.texts import TEXT

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MARKER_ERROR = 2


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apk-index",
        description="Update index.html from the APK download folder",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Site root containing download/ and index.html (default: cwd)",
    )
    parser.add_argument(
        "--download-dir", type=Path, help="Folder scanned for *.apk files"
    )
    parser.add_argument("--index", type=Path, help="Template page to update")
    parser.add_argument(
        "-o", "--output", type=Path, help="Write here instead of updating --index"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="JSON config with prefix, icon and displayNameKo",
    )
    parser.add_argument("--prefix", help="Override the APK filename prefix")
    parser.add_argument("--icon", help="Override the icon glyph")
    parser.add_argument(
        "--display-name", dest="display_name", help="Override the product name"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the updated page to stdout instead of writing it",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def run(args: argparse.Namespace) -> None:
    root: Path = args.root
    download_dir = args.download_dir or root / DOWNLOAD_DIRNAME
    index_path = args.index or root / INDEX_FILENAME
    output_path = args.output or index_path
    config_path = args.config or find_config(root)

    config = load_config(config_path).with_overrides(
        prefix=args.prefix,
        icon=args.icon,
        display_name_ko=args.display_name,
    )

    filenames = discover_apk_files(download_dir)
    releases = parse_apk_filenames(filenames, config.prefix)
    partitions = group_by_channel(releases)

    html = update_index_html(read_index(index_path), partitions, config)

    if args.dry_run:
        sys.stdout.write(html)
        return
    write_index(output_path, html)


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        run(args)
    except MarkerError as exc:
        logger.error("%s", exc)
        return EXIT_MARKER_ERROR
    except Exception:
        logger.exception("Failed to update the download page")
        return EXIT_FAILURE

    if not args.dry_run:
        logger.info(TEXT["updated"])
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
