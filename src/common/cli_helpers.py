"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def setup_logging() -> None:
    """Configure standard logging format for CLI tools and the API server."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_jsonl_path(value: str) -> Path:
    """Parse an existing JSONL file path for argparse arguments.

    Args:
        value: Path to the file.

    Returns:
        Path object.

    Raises:
        argparse.ArgumentTypeError: If the file does not exist.
    """
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"input file not found: {value}")
    return path
