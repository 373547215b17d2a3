"""
Reading entity name lists from plain text files.
"""

from pathlib import Path
from typing import List, Union


def entities_from_file(path: Union[str, Path], prefix: str = "", suffix: str = "") -> List[str]:
    """Read one entity per non-blank line, trimmed and wrapped in prefix/suffix."""
    entities = []
    with open(path, "r", encoding="utf-8") as file:
        for line in file:
            name = line.strip()
            if name:
                entities.append(prefix + name + suffix)
    return entities
