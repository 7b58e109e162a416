"""
Free-text Bible parser.

Rebuilds book / chapter / verse structure from raw extracted scripture text.
Numbers embedded in the text are ambiguous: a token may open a chapter, open
a verse, or simply be part of the verse text (a year, a count). Each number is
classified against the currently open chapter and verse counters.

Usage:
    from biblija.parser import parse_bible_text

    books = parse_bible_text(raw_text)
    genesis = books["Pradžios knyga"]
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
from typing import Iterable, Optional, Union

from .books import TITLE_SUFFIX, canonical_title, resolve_title
from .models import Book, Chapter, Verse, chapter_title
from .normalizer import UPPER, normalize_lines

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# A number may skip at most this many verses and still open a verse.
VERSE_GAP_LIMIT = 5

# Uppercase "...KNYGA" lines longer than this are running text, not titles.
MAX_TITLE_LENGTH = 50

_NUMBER_RE = re.compile(r"([0-9]+)")
_DIGITS_RE = re.compile(r"[0-9]+")
# "y PRADŽIOS KNYGA"
_MARKED_TITLE_RE = re.compile(rf"^y\s+([{UPPER}\s]+)$")
# "y PRADŽIOS KNYGA 1 Pradžioje Dievas sukūrė..."
_INLINE_TITLE_RE = re.compile(rf"^y\s+([{UPPER}\s]+{TITLE_SUFFIX})\s*(.*)$")


# =============================================================================
# Parse State
# =============================================================================

class Boundary(Enum):
    """What a number token starts."""

    CHAPTER = "chapter"
    VERSE = "verse"
    LITERAL = "literal"


@dataclass(frozen=True)
class Classification:
    kind: Boundary
    number: int = 0  # chapter or verse number; unused for LITERAL


@dataclass(frozen=True)
class BookBoundary:
    """A line that opens a book, with any text following the title."""

    title: str
    remainder: str = ""


@dataclass
class ParseState:
    """Accumulator for one parse: output books plus the open book/chapter/verse."""

    books: dict[str, Book] = field(default_factory=dict)
    book: Optional[Book] = None
    chapter: Optional[Chapter] = None
    verse_number: int = 0

    def open_book(self, title: str) -> bool:
        """Open a new book unless ``title`` is already the open one."""
        if self.book is not None and self.book.title == title:
            return False

        if title in self.books:
            logger.debug("Replacing earlier book %r", title)

        self.book = Book(title=title)
        self.books[title] = self.book
        self.chapter = None
        self.verse_number = 0
        return True

    def open_chapter(self, number: int) -> Chapter:
        self.chapter = Chapter(number=number, title=chapter_title(self.book.title, number))
        self.book.chapters.append(self.chapter)
        self.verse_number = 0
        return self.chapter

    def add_verse(self, number: int, content: str) -> Verse:
        verse = Verse(number=number, content=content.strip())
        self.chapter.verses.append(verse)
        self.verse_number = number
        return verse

    @property
    def last_verse(self) -> Optional[Verse]:
        return self.chapter.last_verse if self.chapter is not None else None


# =============================================================================
# Book Boundaries
# =============================================================================

def detect_book(line: str) -> Optional[BookBoundary]:
    """
    Check whether a normalized line opens a new book.

    Detection order:
        1. the line is a canonical title (any case)
        2. "y <UPPERCASE TITLE>"
        3. an uppercase line ending in KNYGA, shorter than MAX_TITLE_LENGTH
        4. "y <UPPERCASE TITLE> KNYGA <verse text>" on one line; the verse
           text is returned as the remainder

    Returns:
        BookBoundary with the canonical title, or None
    """
    title = canonical_title(line)
    if title:
        return BookBoundary(title)

    match = _MARKED_TITLE_RE.match(line)
    if match:
        return BookBoundary(resolve_title(match.group(1)))

    if line.endswith(TITLE_SUFFIX) and line == line.upper() and len(line) < MAX_TITLE_LENGTH:
        return BookBoundary(resolve_title(line))

    match = _INLINE_TITLE_RE.match(line)
    if match:
        return BookBoundary(resolve_title(match.group(1)), match.group(2).strip())

    return None


# =============================================================================
# Chapter / Verse Classification
# =============================================================================

def tokenize(line: str) -> list[str]:
    """Split a line into alternating text and digit-run tokens."""
    return _NUMBER_RE.split(line)


def classify(number: int, state: ParseState) -> Classification:
    """
    Decide whether a number followed by text opens a chapter, opens a verse,
    or belongs to the verse text.

    Rules, first match wins:
        a. no chapter open            -> chapter 1
        b. next verse number          -> verse
        c. next chapter number        -> chapter
        d. 1 after verse 1 was passed -> next chapter
        e. a small forward verse gap  -> verse
        f. anything else              -> literal
    """
    chapter = state.chapter
    verse = state.verse_number

    if chapter is None:
        if number != 1:
            logger.debug("First chapter token is %d, numbering it 1", number)
        return Classification(Boundary.CHAPTER, 1)
    if number == verse + 1:
        return Classification(Boundary.VERSE, number)
    if number == chapter.number + 1:
        return Classification(Boundary.CHAPTER, number)
    if number == 1 and verse > 1:
        return Classification(Boundary.CHAPTER, chapter.number + 1)
    if verse < number < verse + VERSE_GAP_LIMIT:
        return Classification(Boundary.VERSE, number)
    return Classification(Boundary.LITERAL)


def feed_line(state: ParseState, line: str) -> None:
    """Tokenize one line of the open book into chapters and verses."""
    tokens = tokenize(line)
    i = 0

    while i < len(tokens):
        token = tokens[i]
        if not token.strip():
            i += 1
            continue

        if not _DIGITS_RE.fullmatch(token):
            verse = state.last_verse
            if verse is not None:
                verse.append(token)
            i += 1
            continue

        content = tokens[i + 1] if i + 1 < len(tokens) else ""
        if not content.strip():
            # TODO: confirm against source text whether bare numbers at the
            # end of a line should be kept as verse text instead.
            logger.debug("Dropping bare number %s in %r", token, line)
            i += 1
            continue

        decision = classify(int(token), state)

        if decision.kind is Boundary.CHAPTER:
            state.open_chapter(decision.number)
            state.add_verse(1, content)
            i += 2
        elif decision.kind is Boundary.VERSE:
            state.add_verse(decision.number, content)
            i += 2
        else:
            verse = state.last_verse
            if verse is not None:
                previous = tokens[i - 1] if i > 0 else ""
                glued = bool(previous) and not previous[-1].isspace()
                verse.append(token, separator="" if glued else " ")
            i += 1


def parse_line(state: ParseState, line: str) -> ParseState:
    """Fold step: apply one normalized line to the parse state."""
    boundary = detect_book(line)
    if boundary is not None:
        if state.open_book(boundary.title):
            logger.debug("Opened book %s", boundary.title)
        line = boundary.remainder
        if not line:
            return state

    if state.book is None:
        return state

    feed_line(state, line)
    return state


def parse_bible_text(raw: Union[str, Iterable[str]]) -> dict[str, Book]:
    """
    Parse raw scripture text into books keyed by canonical title.

    Never raises on content: unparseable lines are dropped and a book with no
    recognized chapters is returned with an empty chapter list.

    Args:
        raw: Full text blob, or an iterable of lines

    Returns:
        Canonical title -> Book, in order of first appearance
    """
    state = reduce(parse_line, normalize_lines(raw), ParseState())

    logger.info(
        "Parsed %d books, %d chapters",
        len(state.books),
        sum(len(b.chapters) for b in state.books.values()),
    )
    return state.books
