#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for the Roll Library.
"""

import argparse
import logging
import sys
from pathlib import Path

from .catalog.manager import SQLiteRollCatalog
from .commands.images import cmd_compress, cmd_images, cmd_scan
from .commands.rolls import (
    cmd_add_roll, cmd_cleanup_thumbnails, cmd_list_rolls, cmd_remove_roll, cmd_thumbnail
)
from .config import LibraryConfig
from .jsonio import enable_json_logging
from .models.derivation import DeriveOptions
from .service.rolls import RollImageService
from .utils.timeouts import with_timeout


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logging.debug("Verbose logging enabled (DEBUG level).")


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Roll Library - browse scanned film rolls with cached display renditions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Import a roll and list its images (derives display renditions on first use)
  %(prog)s add-roll --name "Portra 400 / Lisbon" --path /photos/rolls/042
  %(prog)s images --roll-id 3f0c... --json

  # Inspect a directory without touching the catalog
  %(prog)s scan --dir /photos/rolls/042

  # Thumbnails
  %(prog)s thumbnail --source /photos/rolls/042/01.tif --size 300
  %(prog)s cleanup-thumbnails
        """
    )

    # Global options
    parser.add_argument("--cache-root",
                        help="Directory for the catalog, derived images and thumbnails "
                             "(default: $ROLL_LIBRARY_CACHE_ROOT or ~/.roll_library)")
    parser.add_argument("--db", help="SQLite catalog path (default: <cache-root>/library.db)")
    parser.add_argument("--width", type=int,
                        help="Maximum width of derived images (default: $ROLL_LIBRARY_TARGET_WIDTH or 1920)")
    parser.add_argument("--quality", type=int,
                        help="JPEG quality of derived images (default: $ROLL_LIBRARY_QUALITY or 85)")
    parser.add_argument("--timeout", type=float, default=0,
                        help="Abort the command after N seconds (default: 0, no limit)")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar while deriving images")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    _add_roll_parsers(subparsers)
    _add_image_parsers(subparsers)
    _add_thumbnail_parsers(subparsers)

    return parser


def _add_roll_parsers(subparsers):
    """Add roll catalog command parsers."""
    add_parser = subparsers.add_parser("add-roll", help="Import a directory as a roll")
    add_parser.add_argument("--name", required=True, help="Roll name")
    add_parser.add_argument("--path", required=True, help="Roll source directory")
    add_parser.add_argument("--json", action="store_true", help="Output as JSON")

    list_parser = subparsers.add_parser("list-rolls", help="List rolls in the catalog")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    remove_parser = subparsers.add_parser("remove-roll", help="Remove a roll and its cache index")
    remove_parser.add_argument("--roll-id", required=True, help="Roll ID")
    remove_parser.add_argument("--json", action="store_true", help="Output as JSON")


def _add_image_parsers(subparsers):
    """Add image command parsers."""
    images_parser = subparsers.add_parser("images", help="List the images of a roll")
    images_parser.add_argument("--roll-id", required=True, help="Roll ID")
    images_parser.add_argument("--originals", action="store_true",
                               help="Skip derived images and return original paths")
    images_parser.add_argument("--json", action="store_true", help="Output as JSON")

    scan_parser = subparsers.add_parser("scan", help="Scan a directory and show image metadata")
    scan_parser.add_argument("--dir", required=True, help="Directory to scan")
    scan_parser.add_argument("--json", action="store_true", help="Output as JSON")

    compress_parser = subparsers.add_parser("compress", help="Derive display images for a directory")
    compress_parser.add_argument("--dir", required=True, help="Directory to process")
    compress_parser.add_argument("--json", action="store_true", help="Output as JSON")


def _add_thumbnail_parsers(subparsers):
    """Add thumbnail command parsers."""
    thumb_parser = subparsers.add_parser("thumbnail", help="Generate a square roll thumbnail")
    thumb_parser.add_argument("--source", required=True, help="Source image")
    thumb_parser.add_argument("--size", type=int, help="Edge length in pixels (default: 300)")
    thumb_parser.add_argument("--json", action="store_true", help="Output as JSON")

    cleanup_parser = subparsers.add_parser("cleanup-thumbnails",
                                           help="Delete thumbnails no roll refers to")
    cleanup_parser.add_argument("--json", action="store_true", help="Output as JSON")


def build_config(args) -> LibraryConfig:
    """Environment defaults overridden by explicit CLI flags."""
    config = LibraryConfig.from_env()
    if args.cache_root:
        config.cache_root = Path(args.cache_root)
    if args.width is not None:
        config.target_width = args.width
    if args.quality is not None:
        config.quality = args.quality
    return config


def run_command(args, service: RollImageService) -> int:
    as_json = getattr(args, 'json', False)

    if args.command == "add-roll":
        logging.info("Importing roll '%s' from %s", args.name, args.path)
        return cmd_add_roll(service, args.name, args.path, as_json)

    elif args.command == "list-rolls":
        return cmd_list_rolls(service, as_json)

    elif args.command == "remove-roll":
        logging.info("Removing roll %s", args.roll_id)
        return cmd_remove_roll(service, args.roll_id, as_json)

    elif args.command == "images":
        logging.info("Fetching images for roll %s (use_compressed=%s)", args.roll_id, not args.originals)
        return cmd_images(service, args.roll_id, not args.originals, as_json)

    elif args.command == "scan":
        logging.info("Scanning %s", args.dir)
        return cmd_scan(service, args.dir, as_json)

    elif args.command == "compress":
        logging.info("Deriving images in %s", args.dir)
        return cmd_compress(service, args.dir, service.options, as_json)

    elif args.command == "thumbnail":
        logging.info("Generating thumbnail for %s", args.source)
        return cmd_thumbnail(service, args.source, args.size, as_json)

    elif args.command == "cleanup-thumbnails":
        logging.info("Cleaning up unused thumbnails")
        return cmd_cleanup_thumbnails(service, as_json)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging based on --verbose (but suppress if JSON output requested)
    if getattr(args, 'json', False):
        enable_json_logging()
    else:
        setup_logging(args.verbose)

    logging.debug("Parsed arguments: %s", args)

    catalog = None
    try:
        config = build_config(args)
        # Validates width/quality before any work starts
        DeriveOptions(config.target_width, config.quality)
        db_path = Path(args.db) if args.db else config.db_path
        logging.info("Using catalog: %s", db_path)
        catalog = SQLiteRollCatalog(db_path)
        service = RollImageService(catalog, config, show_progress=args.progress)
        return with_timeout(run_command, args.timeout, args, service)

    except TimeoutError as e:
        # The timed-out command may still be using the catalog; leave it open
        catalog = None
        if getattr(args, 'json', False):
            from .jsonio import error
            return error(args.command, str(e), code=124)
        logging.error("%s", e)
        return 124
    except KeyboardInterrupt:
        if getattr(args, 'json', False):
            from .jsonio import error
            return error(args.command, "Operation interrupted by user", code=130)
        logging.warning("Operation interrupted by user.")
        return 130
    except Exception as e:
        if getattr(args, 'json', False):
            from .jsonio import error
            debug_info = {"exception_type": type(e).__name__} if args.verbose else None
            return error(args.command, str(e), debug=debug_info, code=1)
        logging.error("Error occurred: %s", e, exc_info=args.verbose)
        return 1
    finally:
        if catalog is not None:
            catalog.close()


if __name__ == "__main__":
    sys.exit(main())
