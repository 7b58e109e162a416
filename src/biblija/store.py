"""Parsed scripture store with the lookups used by the reader."""

import json
from pathlib import Path
from typing import Iterable, Optional, Union

from .exceptions import SourceError
from .models import Book, Chapter, books_from_dict, books_to_dict
from .parser import parse_bible_text


PLACEHOLDER_TEXT = "Šios knygos tekstas šiuo metu ruošiamas skaitmenizavimui. Atsiprašome."


class BibleStore:
    """
    In-memory mapping of canonical book title to parsed Book.

    Missing books and chapters are a normal outcome and come back as None,
    since parts of the corpus may still be unparsed.
    """

    def __init__(self, books: Optional[dict[str, Book]] = None):
        self.books: dict[str, Book] = books if books is not None else {}

    @classmethod
    def from_text(cls, raw: Union[str, Iterable[str]]) -> "BibleStore":
        return cls(parse_bible_text(raw))

    @classmethod
    def from_dict(cls, data: dict[str, dict]) -> "BibleStore":
        return cls(books_from_dict(data))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "BibleStore":
        """
        Load a JSON artifact written by ``save``.

        Raises:
            SourceError: if the file is not a valid artifact
        """
        with open(path, "r", encoding="utf-8") as f:
            try:
                return cls.from_dict(json.load(f))
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                raise SourceError(f"Malformed data file {path}: {e}") from e

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
        return path

    def to_dict(self) -> dict[str, dict]:
        return books_to_dict(self.books)

    @property
    def is_ready(self) -> bool:
        """Whether any book has been loaded."""
        return bool(self.books)

    def titles(self) -> list[str]:
        return list(self.books)

    def get(self, title: str) -> Optional[Book]:
        return self.books.get(title)

    def get_chapter(self, title: str, number: int) -> Optional[Chapter]:
        """Chapter by its 1-based number, matched on ``Chapter.number``."""
        book = self.get(title)
        if book is None:
            return None
        return book.get_chapter(number)

    def get_chapter_content(self, title: str, index: int) -> Optional[Chapter]:
        """Chapter by the reader's 0-based chapter index."""
        return self.get_chapter(title, index + 1)

    def chapter_text(self, title: str, index: int) -> str:
        """Rendered chapter text, or the placeholder when nothing is parsed."""
        chapter = self.get_chapter_content(title, index)
        if chapter is None or not chapter.verses:
            return PLACEHOLDER_TEXT
        return chapter.text()

    def __contains__(self, title: object) -> bool:
        return title in self.books

    def __len__(self) -> int:
        return len(self.books)
