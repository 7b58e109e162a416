"""
Boilerplate removal for persisted scripture data files.

The scraped text lives inside quoted string literals, so every rule strips a
marker phrase and everything after it up to the next double quote.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


# Applied in this order, each one independently.
CLEANING_RULES: tuple[tuple[str, re.Pattern], ...] = (
    ("bibliographic data", re.compile(r'Bibliografiniai duomenys:[^"]*')),
    ("copyright", re.compile(r'© 2003 Katalikų interneto tarnyba[^"]*')),
    ("navigation", re.compile(r'teisės \| apie projektą[^"]*')),
    ("footnotes", re.compile(r'Išnašos:[^"]*')),
    ("note markers", re.compile(r"\[i\d+\]")),
)


@dataclass
class CleaningResult:
    text: str
    removed: dict[str, int] = field(default_factory=dict)  # category -> matches

    @property
    def modified(self) -> bool:
        return bool(self.removed)


def clean_content(text: str) -> CleaningResult:
    """
    Strip every known boilerplate category from a serialized blob.

    A removal can join the halves of another marker (``[i[i1]2]``), so the
    rules are reapplied until none of them matches.
    """
    removed: dict[str, int] = {}
    changed = True
    while changed:
        changed = False
        for category, pattern in CLEANING_RULES:
            text, count = pattern.subn("", text)
            if count:
                logger.info("Removing %s (%d occurrences)", category, count)
                removed[category] = removed.get(category, 0) + count
                changed = True
    return CleaningResult(text=text, removed=removed)


def clean_file(path: Union[str, Path]) -> CleaningResult:
    """
    Clean a data file in place.

    The file is rewritten only if at least one rule matched. A missing file
    raises FileNotFoundError.
    """
    path = Path(path)
    logger.info("Reading %s", path)
    result = clean_content(path.read_text(encoding="utf-8"))

    if result.modified:
        path.write_text(result.text, encoding="utf-8")
        logger.info("Saved %s", path)
    else:
        logger.info("Nothing to clean in %s", path)
    return result
