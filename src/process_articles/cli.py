"""CLI for extracting and storing a batch of raw articles from a JSONL file."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.local_io import read_jsonl_records, save_json_record_local
from extraction_api.clients import build_extractor, build_store
from extraction_api.config import load_config
from process_articles.helpers import parse_process_articles_args
from process_articles.process_articles import process_articles

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = parse_process_articles_args(argv)
    config = load_config(args.config)

    extractor = build_extractor(config)
    store = build_store(config)
    if extractor is None or store is None:
        logger.error("OpenAI and Supabase must both be configured")
        return 1

    articles = read_jsonl_records(args.input, limit=args.limit)
    if not articles:
        logger.warning("No articles to process")
        return 0

    result = process_articles(articles, extractor, store)

    for error in result.errors:
        logger.info("  %s | %s", error.articleId, error.error)

    if args.load_local:
        save_json_record_local(result, "batch_result")

    return 0 if result.failed == 0 else 2


if __name__ == "__main__":
    sys.exit(main())
