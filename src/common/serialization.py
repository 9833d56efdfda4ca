"""Serialization utilities."""

from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any


def serialize_dataclass(obj: Any) -> dict:
    """Serialize a dataclass to dict, converting datetimes to ISO strings.

    Plain dicts are returned as a shallow copy.
    """
    data = asdict(obj) if is_dataclass(obj) else dict(obj)
    for key, value in data.items():
        if isinstance(value, datetime):
            data[key] = value.isoformat()
    return data
