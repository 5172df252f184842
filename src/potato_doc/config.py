"""Application configuration constants for Potato Doc."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
import os
import sys
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_ENDPOINT_URL = "https://micti-potato-disease-classification.hf.space/predict/"
ENDPOINT_ENV_VAR = "POTATO_DOC_ENDPOINT_URL"


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _get_executable_dir() -> Path:
    """Get the directory containing the executable or package."""
    if getattr(sys, "frozen", False):
        # Running as PyInstaller executable
        return Path(sys.executable).parent
    return Path(__file__).parent


def load_config(config_dir: Path | None = None) -> dict:
    """Load configuration from a ``config.yaml`` file.

    Args:
        config_dir: Directory holding ``config.yaml``. Defaults to the
            executable or package directory.

    Returns:
        Parsed configuration mapping, empty if the file is missing or invalid.
    """
    config_dir = config_dir or _get_executable_dir()
    config_file = config_dir / "config.yaml"

    if not config_file.exists():
        logger.info("No config file found at %s, using defaults", config_file)
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config from %s: %s", config_file, e)
        return {}

    if not isinstance(config, dict):
        logger.warning("Ignoring config at %s: expected a mapping", config_file)
        return {}

    logger.info("Loaded configuration from %s", config_file)
    return config


def resolve_endpoint_url(config: dict) -> str:
    """Pick the classification endpoint: environment, then file, then default."""
    return (
        os.environ.get(ENDPOINT_ENV_VAR)
        or config.get("ENDPOINT_URL")
        or DEFAULT_ENDPOINT_URL
    )


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

_config = load_config()

ENDPOINT_URL = resolve_endpoint_url(_config)

# Default directory for file dialogs
DEFAULT_DIR = os.path.expanduser(_config.get("DEFAULT_DIR", "~"))
