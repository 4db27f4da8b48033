# main.py

"""Entry point for the storefront terminal app."""

import argparse
import logging

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description=f"{Settings.APP_TITLE}: a terminal storefront demo.",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Pre-fill the search box with this text.",
    )
    parser.add_argument(
        "--no-images",
        action="store_true",
        default=False,
        dest="no_images",
        help="Do not download product images (show placeholders).",
    )
    return parser


def _run_tui(args: argparse.Namespace) -> None:
    """Launch the interactive Textual TUI."""
    from src.services.image_loader import ImageLoader
    from src.ui.app import StorefrontApp

    loader = ImageLoader(enabled=False) if args.no_images else ImageLoader()
    try:
        app = StorefrontApp(image_loader=loader, initial_query=args.query)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def main() -> None:
    """Parse arguments, configure logging and start the TUI."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    args = _build_parser().parse_args()
    _run_tui(args)


if __name__ == "__main__":
    main()
