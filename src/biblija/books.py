"""
Canonical Bible book data: 73 books of the Catholic canon, Lithuanian titles.

Each entry:
  title         - canonical display name (the key of the parsed output)
  abbreviation  - biblija.lt document code, also used in chapter URLs
  testament     - "Senasis Testamentas" or "Naujasis Testamentas"
  category      - reader grouping
  chapter_count - informational only, never used to validate parser output
"""

from dataclasses import dataclass
from typing import Optional


OLD_TESTAMENT = "Senasis Testamentas"
NEW_TESTAMENT = "Naujasis Testamentas"

TITLE_SUFFIX = "KNYGA"
TITLE_PREFIX = "y "


@dataclass(frozen=True)
class BibleBook:
    """Reference record for one canonical book."""

    title: str
    abbreviation: str
    testament: str
    category: str
    chapter_count: int


def _ot(title: str, abbreviation: str, category: str, chapter_count: int) -> BibleBook:
    return BibleBook(title, abbreviation, OLD_TESTAMENT, category, chapter_count)


def _nt(title: str, abbreviation: str, category: str, chapter_count: int) -> BibleBook:
    return BibleBook(title, abbreviation, NEW_TESTAMENT, category, chapter_count)


BIBLE_BOOKS: tuple[BibleBook, ...] = (
    # ── Senasis Testamentas ──────────────────────────────────────────────────
    _ot("Pradžios knyga", "Pr", "Įstatymo knygos", 50),
    _ot("Išėjimo knyga", "Iš", "Įstatymo knygos", 40),
    _ot("Kunigų knyga", "Kun", "Įstatymo knygos", 27),
    _ot("Skaičių knyga", "Sk", "Įstatymo knygos", 36),
    _ot("Pakartoto Įstatymo knyga", "Ist", "Įstatymo knygos", 34),
    _ot("Jozuės knyga", "Joz", "Istorinės knygos", 24),
    _ot("Teisėjų knyga", "Ts", "Istorinės knygos", 21),
    _ot("Rūtos knyga", "Rut", "Istorinės knygos", 4),
    _ot("1 Samuelio knyga", "1_Sam", "Istorinės knygos", 31),
    _ot("2 Samuelio knyga", "2_Sam", "Istorinės knygos", 24),
    _ot("1 Karalių knyga", "1_Kar", "Istorinės knygos", 22),
    _ot("2 Karalių knyga", "2_Kar", "Istorinės knygos", 25),
    _ot("1 Kronikų knyga", "1_Kr", "Istorinės knygos", 29),
    _ot("2 Kronikų knyga", "2_Kr", "Istorinės knygos", 36),
    _ot("Ezros knyga", "Ezd", "Istorinės knygos", 10),
    _ot("Nehemijo knyga", "Neh", "Istorinės knygos", 13),
    _ot("Tobito knyga", "Tob", "Istorinės knygos", 14),
    _ot("Juditos knyga", "Jdt", "Istorinės knygos", 16),
    _ot("Esteros knyga", "Est", "Istorinės knygos", 10),
    _ot("Pirmoji Makabiejų knyga", "1_Mak", "Istorinės knygos", 16),
    _ot("Antroji Makabiejų knyga", "2_Mak", "Istorinės knygos", 15),
    _ot("Jobo knyga", "Job", "Išminties knygos", 42),
    _ot("Psalmės", "Ps", "Išminties knygos", 150),
    _ot("Patarlės", "Pat", "Išminties knygos", 31),
    _ot("Ekleziasto knyga", "Koh", "Išminties knygos", 12),
    _ot("Giesmių giesmė", "Gg", "Išminties knygos", 8),
    _ot("Išminties knyga", "Išm", "Išminties knygos", 19),
    _ot("Siracido knyga", "Sir", "Išminties knygos", 51),
    _ot("Izaijo pranašystė", "Iz", "Pranašų knygos", 66),
    _ot("Jeremijo pranašystė", "Jer", "Pranašų knygos", 52),
    _ot("Jeremijo raudos", "Rd", "Pranašų knygos", 5),
    _ot("Barucho knyga", "Bar", "Pranašų knygos", 6),
    _ot("Ezekielio pranašystė", "Ez", "Pranašų knygos", 48),
    _ot("Danieliaus pranašystė", "Dan", "Pranašų knygos", 12),
    _ot("Ozėjo pranašystė", "Oz", "Pranašų knygos", 14),
    _ot("Joelio pranašystė", "Jl", "Pranašų knygos", 3),
    _ot("Amoso pranašystė", "Am", "Pranašų knygos", 9),
    _ot("Abdijo pranašystė", "Abd", "Pranašų knygos", 1),
    _ot("Jonos pranašystė", "Jon", "Pranašų knygos", 4),
    _ot("Michėjo pranašystė", "Mch", "Pranašų knygos", 7),
    _ot("Nahumo pranašystė", "Nah", "Pranašų knygos", 3),
    _ot("Habakuko pranašystė", "Hab", "Pranašų knygos", 3),
    _ot("Sofonijo pranašystė", "Sof", "Pranašų knygos", 3),
    _ot("Agėjo pranašystė", "Ag", "Pranašų knygos", 2),
    _ot("Zacharijo pranašystė", "Zch", "Pranašų knygos", 14),
    _ot("Malachijo pranašystė", "Mal", "Pranašų knygos", 4),
    # ── Naujasis Testamentas ─────────────────────────────────────────────────
    _nt("Evangelija pagal Matą", "Mt", "Evangelijos", 28),
    _nt("Evangelija pagal Morkų", "Mk", "Evangelijos", 16),
    _nt("Evangelija pagal Luką", "Lk", "Evangelijos", 24),
    _nt("Evangelija pagal Joną", "Jn", "Evangelijos", 21),
    _nt("Apaštalų darbai", "Apd", "Apaštalų darbai", 28),
    _nt("Laiškas romiečiams", "Rom", "Laiškai", 16),
    _nt("Pirmasis laiškas korintiečiams", "1_Kor", "Laiškai", 16),
    _nt("Antrasis laiškas korintiečiams", "2_Kor", "Laiškai", 13),
    _nt("Laiškas galatams", "Gal", "Laiškai", 6),
    _nt("Laiškas efeziečiams", "Ef", "Laiškai", 6),
    _nt("Laiškas filipiečiams", "Fil", "Laiškai", 4),
    _nt("Laiškas kolosiečiams", "Kol", "Laiškai", 4),
    _nt("Pirmasis laiškas tesalonikiečiams", "1_Tes", "Laiškai", 5),
    _nt("Antrasis laiškas tesalonikiečiams", "2_Tes", "Laiškai", 3),
    _nt("Pirmasis laiškas Timotiejui", "1_Tim", "Laiškai", 6),
    _nt("Antrasis laiškas Timotiejui", "2_Tim", "Laiškai", 4),
    _nt("Laiškas Titui", "Tit", "Laiškai", 3),
    _nt("Laiškas Filemonui", "Fm", "Laiškai", 1),
    _nt("Laiškas hebrajams", "Žyd", "Laiškai", 13),
    _nt("Jokūbo laiškas", "Jok", "Laiškai", 5),
    _nt("Pirmasis Petro laiškas", "1_Pt", "Laiškai", 5),
    _nt("Antrasis Petro laiškas", "2_Pt", "Laiškai", 3),
    _nt("Pirmasis Jono laiškas", "1_Jn", "Laiškai", 5),
    _nt("Antrasis Jono laiškas", "2_Jn", "Laiškai", 1),
    _nt("Trečiasis Jono laiškas", "3_Jn", "Laiškai", 1),
    _nt("Judo laiškas", "Jud", "Laiškai", 1),
    _nt("Apreiškimas Jonui", "Apr", "Apreiškimas", 22),
)

BY_TITLE: dict[str, BibleBook] = {b.title: b for b in BIBLE_BOOKS}

# Uppercase title -> canonical title, in canonical order.
TITLE_LOOKUP: dict[str, str] = {b.title.upper(): b.title for b in BIBLE_BOOKS}

# Keyword matches for the five law books, checked before the generic lookup.
LAW_BOOK_OVERRIDES: tuple[tuple[str, str], ...] = (
    ("PRADŽIOS", "Pradžios knyga"),
    ("IŠĖJIMO", "Išėjimo knyga"),
    ("KUNIGŲ", "Kunigų knyga"),
    ("SKAIČIŲ", "Skaičių knyga"),
    ("PAKARTOTO", "Pakartoto Įstatymo knyga"),
)


def canonical_title(line: str) -> Optional[str]:
    """Return the canonical title if ``line`` is one, ignoring case."""
    return TITLE_LOOKUP.get(line.strip().upper())


def strip_title_markers(raw_title: str) -> str:
    """Drop the leading ``y`` marker and the trailing ``KNYGA`` word."""
    title = raw_title.strip()
    if title.startswith(TITLE_PREFIX):
        title = title[len(TITLE_PREFIX):]
    if title.endswith(" " + TITLE_SUFFIX):
        title = title[: -len(TITLE_SUFFIX) - 1]
    return title.strip()


def resolve_title(raw_title: str) -> str:
    """
    Map a title extracted from source text to its canonical display name.

    Resolution order:
        1. keyword overrides for the five law books
        2. first canonical title whose uppercase form contains the title
        3. the raw title with only its first character kept uppercase

    Args:
        raw_title: e.g. "y PRADŽIOS KNYGA", "JOBO KNYGA", "1 SAMUELIO"

    Returns:
        Canonical title, or a title-cased fallback for unknown books
    """
    title = strip_title_markers(raw_title)
    if not title:
        return title

    upper = title.upper()
    for keyword, canonical in LAW_BOOK_OVERRIDES:
        if keyword in upper:
            return canonical

    for key, canonical in TITLE_LOOKUP.items():
        if upper in key:
            return canonical

    return title[0] + title[1:].lower()


def get_book(title: str) -> Optional[BibleBook]:
    return BY_TITLE.get(title)


def books_by_testament(testament: str) -> list[BibleBook]:
    return [b for b in BIBLE_BOOKS if b.testament == testament]


def categories_by_testament(testament: str) -> list[str]:
    """Categories of a testament, in canonical order, without duplicates."""
    seen: list[str] = []
    for book in books_by_testament(testament):
        if book.category not in seen:
            seen.append(book.category)
    return seen
