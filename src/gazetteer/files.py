"""
Persisting lookup tables (e.g. geoname id -> name) between import runs.
"""

import json
from pathlib import Path
from typing import Any, Union


def put_object(obj: Any, path: Union[str, Path]) -> None:
    """Write a JSON-serializable lookup table to a file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as file:
        json.dump(obj, file, ensure_ascii=False, indent=2)


def get_object(path: Union[str, Path]) -> Any:
    """Read a lookup table written by put_object."""
    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)
