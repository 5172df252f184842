#!/usr/bin/env python3
"""Application entry-point wiring together the Potato Doc window."""

# =============================================================================
# IMPORTS
# =============================================================================

import argparse
import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from potato_doc import config
from potato_doc.controller import AnalysisController
from potato_doc.inference import InferenceClient
from potato_doc.main_window import MainWindow

SHUTDOWN_GRACE_MS = 2000


# =============================================================================
# ARGUMENTS
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Potato Doc potato leaf disease detection"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--endpoint",
        default=None,
        help=f"Classification endpoint URL (default: {config.ENDPOINT_URL})",
    )
    return parser


# =============================================================================
# MAIN APPLICATION ENTRY POINT
# =============================================================================


def main() -> None:
    """Spin up the Qt event loop and show the primary application window."""
    args, qt_args = build_parser().parse_known_args()

    # ------------------------------------------------------------------------
    # LOGGING CONFIGURATION
    # ------------------------------------------------------------------------
    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    # Keep connection chatter out of debug output
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    endpoint_url = args.endpoint or config.ENDPOINT_URL
    logger.info(
        "Starting Potato Doc (level=%s, endpoint=%s)",
        logging.getLevelName(log_level),
        endpoint_url,
    )

    # ------------------------------------------------------------------------
    # QT APPLICATION SETUP
    # ------------------------------------------------------------------------
    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("Potato Doc")
    app.setQuitOnLastWindowClosed(True)

    controller = AnalysisController(InferenceClient(endpoint_url))
    window = MainWindow(controller)
    window.show()

    exit_code = app.exec()

    # A thread blocked in a request cannot be interrupted; do not let it hold
    # the process open or be destroyed while running
    if not controller.wait_for_workers(SHUTDOWN_GRACE_MS):
        logger.warning("Exiting with classification requests still pending")
        logging.shutdown()
        os._exit(exit_code)
    sys.exit(exit_code)


# =============================================================================
# CLI ENTRY POINT
# =============================================================================

if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
