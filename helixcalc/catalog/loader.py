"""
Bearing catalog loader.

Loads alternative bearing catalogs from JSON files. A catalog file is a
list of objects with the BearingCatalogEntry fields.
"""

import json
from pathlib import Path
from typing import Sequence

from helixcalc.catalog.models import BearingCatalogEntry


def load_bearing_catalog(path: str) -> tuple[BearingCatalogEntry, ...]:
    """
    Load a bearing catalog from a JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Tuple of BearingCatalogEntry objects in file order

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        ValueError: If an entry fails validation
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Bearing catalog not found at {file_path}")

    with open(file_path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Bearing catalog {file_path} must contain a JSON list")

    return tuple(BearingCatalogEntry(**item) for item in data)


def dump_bearing_catalog(entries: Sequence[BearingCatalogEntry], path: str) -> None:
    """
    Write a bearing catalog to a JSON file.

    Args:
        entries: Catalog rows
        path: Output path
    """
    with open(path, 'w') as f:
        json.dump([entry.model_dump(mode="json") for entry in entries], f, indent=2)
