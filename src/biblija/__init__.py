"""
biblija - Parses and scrapes Lithuanian scripture text into book/chapter/verse data.
"""

from .books import BIBLE_BOOKS, BibleBook, resolve_title
from .cleaning import clean_content, clean_file
from .exceptions import BiblijaError, SourceError
from .models import Book, Chapter, Verse
from .normalizer import normalize_lines
from .parser import Boundary, Classification, classify, detect_book, parse_bible_text
from .store import BibleStore

__all__ = [
    "BIBLE_BOOKS",
    "BibleBook",
    "BibleStore",
    "BiblijaError",
    "Book",
    "Boundary",
    "Chapter",
    "Classification",
    "SourceError",
    "Verse",
    "classify",
    "clean_content",
    "clean_file",
    "detect_book",
    "normalize_lines",
    "parse_bible_text",
    "resolve_title",
]

__version__ = "0.1.0"
