"""Line cleanup for raw scripture text extracted from PDFs and web pages."""

import re
from typing import Iterable, Union


# Uppercase letters of Lithuanian source text.
UPPER = "A-ZĄČĘĖĮŠŲŪŽ"

PAGE_MARKER = "--- Puslapis"
BANNER_LINES = {"BIBLIJA"}
BANNER_PREFIXES = ("KARALIAUS JOKŪBO",)
TESTAMENT_BANNERS = {"SENASIS TESTAMENTAS", "NAUJASIS TESTAMENTAS"}
TOC_PHRASES = ("KNYGŲ SĄRAŠAS", " Skyrių skaičius ")

_TOC_PAGE_RE = re.compile(r"puslapio nr", re.IGNORECASE)
_LEADER_DOTS_RE = re.compile(r"\.{4,}")
_FOOTNOTE_RE = re.compile(r"^(\d+\s+)?\[\d+\]")
# e.g. "12 5 EVANGELIJA PAGAL MATĄ 3, 4"
_RUNNING_HEADER_RE = re.compile(rf"^\d+\s+\d+\s+[{UPPER}\s]+\d+(,\s*\d+)*$")


def is_noise_line(line: str) -> bool:
    """Whether a trimmed line is a scanning or layout artifact."""
    if line.startswith(PAGE_MARKER):
        return True
    if line in BANNER_LINES or line.startswith(BANNER_PREFIXES):
        return True
    if any(phrase in line for phrase in TOC_PHRASES) or _TOC_PAGE_RE.search(line):
        return True
    if _LEADER_DOTS_RE.search(line):
        return True
    if _FOOTNOTE_RE.match(line):
        return True
    if _RUNNING_HEADER_RE.match(line):
        return True
    return line in TESTAMENT_BANNERS


def normalize_lines(raw: Union[str, Iterable[str]]) -> list[str]:
    """
    Split raw text into trimmed, non-empty lines without page artifacts.

    Lines are only ever dropped whole; kept lines keep their case and
    inner whitespace.

    Args:
        raw: Full text blob, or an iterable of already split lines

    Returns:
        Normalized lines in source order
    """
    lines = raw.splitlines() if isinstance(raw, str) else raw

    clean = []
    for line in lines:
        trimmed = line.strip()
        if trimmed and not is_noise_line(trimmed):
            clean.append(trimmed)
    return clean
