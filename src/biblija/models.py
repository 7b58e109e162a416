"""Data models for parsed scripture text."""

from dataclasses import dataclass, field, asdict
from typing import Optional


CHAPTER_TITLE_FORMAT = "{book} {number} skyrius"


def chapter_title(book_title: str, number: int) -> str:
    """Display title of a chapter, e.g. "Pradžios knyga 3 skyrius"."""
    return CHAPTER_TITLE_FORMAT.format(book=book_title, number=number)


@dataclass
class Verse:
    """A numbered verse with its accumulated text."""

    number: int  # 1-based, strictly increasing within a chapter
    content: str = ""

    def append(self, text: str, separator: str = " ") -> None:
        """Join ``text`` onto the verse content, space-separated by default."""
        text = text.strip()
        if not text:
            return
        self.content = f"{self.content}{separator}{text}" if self.content else text

    @classmethod
    def from_dict(cls, data: dict) -> "Verse":
        return cls(number=int(data["number"]), content=data.get("content", ""))


@dataclass
class Chapter:
    """A chapter of a book and its verses in reading order."""

    number: int  # 1-based, strictly increasing within a book
    title: str
    verses: list[Verse] = field(default_factory=list)

    @property
    def last_verse(self) -> Optional[Verse]:
        return self.verses[-1] if self.verses else None

    def text(self) -> str:
        """Render verses one per line as "<number>. <content>"."""
        return "\n".join(f"{v.number}. {v.content}" for v in self.verses)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Chapter":
        return cls(
            number=int(data["number"]),
            title=data.get("title", ""),
            verses=[Verse.from_dict(v) for v in data.get("verses", [])],
        )


@dataclass
class Book:
    """A book keyed by its canonical title."""

    title: str
    chapters: list[Chapter] = field(default_factory=list)

    def get_chapter(self, number: int) -> Optional[Chapter]:
        """Find a chapter by its number, not by list position."""
        for chapter in self.chapters:
            if chapter.number == number:
                return chapter
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Book":
        return cls(
            title=data["title"],
            chapters=[Chapter.from_dict(c) for c in data.get("chapters", [])],
        )


def books_to_dict(books: dict[str, Book]) -> dict[str, dict]:
    """Serialize a title -> Book mapping, keeping insertion order."""
    return {title: book.to_dict() for title, book in books.items()}


def books_from_dict(data: dict[str, dict]) -> dict[str, Book]:
    return {title: Book.from_dict(book) for title, book in data.items()}
