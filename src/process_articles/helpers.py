"""Helper functions for process_articles CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import parse_jsonl_path


def parse_process_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for process_articles."""

    parser = argparse.ArgumentParser()

    # Input options
    parser.add_argument(
        "--input",
        required=True,
        type=parse_jsonl_path,
        help="JSONL file with one raw article per line",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Process at most this many articles (default: all)",
    )

    # Config options
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under extraction_api/configs (default: $CONTENT_EXTRACTION_CONFIG or prod)",
    )

    # Output options
    parser.add_argument("--load-local", action="store_true", help="Save batch result to local file")

    return parser.parse_args(argv)
