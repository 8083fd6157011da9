"""Environment-based settings for the CLI and web app."""

import logging
import os
from pathlib import Path
from typing import Optional

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_DATA_FILE = PROJECT_ROOT / "records.yaml"
DEFAULT_SECRET_KEY = "dev-secret-key-change-in-prod"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def data_file() -> Path:
    """Records file used when none is given explicitly."""
    return Path(os.environ.get("WOF_DATA_FILE", DEFAULT_DATA_FILE))


def current_owner() -> Optional[str]:
    """Identity of the current caller, or None when nobody is signed in."""
    return os.environ.get("WOF_OWNER") or None


def secret_key() -> str:
    return os.environ.get("SECRET_KEY", DEFAULT_SECRET_KEY)


def log_level() -> str:
    return os.environ.get("WOF_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once. An explicit level overrides WOF_LOG_LEVEL."""
    logging.basicConfig(
        level=level or log_level(),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
