"""Command-line interface for sorting YouTube playlists."""

import argparse
import sys
from typing import List, Optional

from . import auth, commands, config
from .errors import YouTubeError
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="playlistsorter",
        description="Sort a YouTube playlist by upload date into a new private playlist",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Sort command
    sort_parser = subparsers.add_parser("sort", help="Sort a playlist by upload date")
    sort_parser.add_argument("playlist", help="Source playlist ID or URL")
    sort_parser.add_argument("-v", "--verbose", action="store_true", help="List skipped videos")
    sort_parser.add_argument(
        "--dry-run", action="store_true", help="Show the sorted order without creating a playlist"
    )
    sort_parser.add_argument(
        "--drop-unresolved",
        action="store_true",
        default=config.DROP_UNRESOLVED,
        help="Leave out videos whose upload date cannot be found (deleted or private)",
    )
    sort_parser.add_argument(
        "--no-progress", action="store_true", help="Do not draw a progress bar"
    )

    # Setup command
    subparsers.add_parser("setup", help="Set up YouTube API credentials")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parser.parse_args(argv if argv else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging(debug=args.debug)

    try:
        if args.command == "setup":
            command = commands.SetupCommand()
        elif args.command == "sort":
            youtube = auth.get_youtube_service()
            if not youtube:
                logger.error("Command failed: %s", "Failed to get YouTube service")
                return 1
            command = commands.SortCommand(
                youtube=youtube,
                playlist=args.playlist,
                dry_run=args.dry_run,
                drop_unresolved=args.drop_unresolved,
                verbose=args.verbose,
                show_progress=not args.no_progress,
            )
        else:
            parser.print_help()
            return 1

        if not command.run():
            logger.error("Command failed to run successfully")
            return 1
        return 0

    except (YouTubeError, ValueError) as e:
        logger.error("Command failed: %s", str(e))
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
