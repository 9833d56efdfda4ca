"""Local file I/O utilities."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from common.serialization import serialize_dataclass

logger = logging.getLogger(__name__)


def read_jsonl_records(path: Path, limit: int | None = None) -> list[dict[str, Any]]:
    """
    Read records from a local JSONL file, skipping blank lines.

    Args:
        path: File to read
        limit: Maximum number of records to return (None for all)

    Returns:
        List of decoded records
    """
    records: list[dict[str, Any]] = []
    with path.open() as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            records.append(json.loads(line))
            if limit is not None and len(records) >= limit:
                break

    logger.info("Read %d records from %s", len(records), path)
    return records


def save_json_record_local(
    record: Any,
    prefix: str,
    output_dir: str = "output",
) -> Path:
    """
    Save a single dataclass record to a local JSON file.

    Args:
        record: Dataclass object to save
        prefix: Filename prefix (e.g., "batch_result")
        output_dir: Directory to save to (default: "output")

    Returns:
        Path to the created file
    """
    now = datetime.now(timezone.utc)
    output_path = Path(output_dir)
    output_path.mkdir(exist_ok=True)

    filename = f"{prefix}_{now.strftime('%Y_%m_%d_%H_%M')}.json"
    filepath = output_path / filename

    with filepath.open("w") as f:
        json.dump(serialize_dataclass(record), f, default=str, ensure_ascii=False, indent=2)

    logger.info("Saved %s to %s", prefix, filepath)
    return filepath
