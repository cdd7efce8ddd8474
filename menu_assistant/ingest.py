"""
Dataset ingestion.

This module provides functions to:
- Load the menu dataset JSON file
- Locate the list of raw item records inside it
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple, Union


def load_dataset(path: str) -> Union[dict, list]:
    """
    Load the dataset JSON from disk.

    Args:
        path: Path to the JSON file

    Returns:
        The decoded JSON document (an object with "items" or a bare list)

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON is invalid
        ValueError: If the file cannot be read
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(
            f"Dataset file not found: {path}. "
            f"Please ensure the file exists at the specified path."
        )

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in dataset file: {path}",
            e.doc,
            e.pos,
        ) from e
    except OSError as e:
        raise ValueError(f"Error reading dataset file {path}: {e}") from e

    return data


def get_item_records(dataset: Union[dict, list]) -> List[Any]:
    """
    Return the raw item records.

    Accepted shapes:
      {"items": [...]}
      [...]

    Raises:
        ValueError: If no item list is found
    """
    if isinstance(dataset, list):
        return dataset

    if isinstance(dataset, dict) and isinstance(dataset.get("items"), list):
        return dataset["items"]

    raise ValueError('No item list found. Expected structure: {"items": [...]} or a JSON array')


def iter_item_records(dataset: Union[dict, list]) -> Iterator[Tuple[int, Dict[str, Any]]]:
    """Yield (position, record) for every record in dataset order."""
    for pos, record in enumerate(get_item_records(dataset)):
        yield pos, record
