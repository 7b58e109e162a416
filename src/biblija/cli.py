#!/usr/bin/env python3
"""
CLI for biblija - builds the reader's scripture data files.

Usage:
    python -m biblija parse Biblija.pdf                 # Parse a PDF or text dump
    python -m biblija scrape                            # Scrape the whole Bible
    python -m biblija scrape --book "Jobo knyga"        # Scrape a single book
    python -m biblija catechism                         # Scrape the catechism
    python -m biblija clean data/Biblija_RKK1998.json   # Strip site boilerplate
    python -m biblija show data/biblija.json "Pradžios knyga" 1
"""

import argparse
import logging
import time
from pathlib import Path
from typing import Optional

from .books import BIBLE_BOOKS, BibleBook
from .catechism import SECTION_DELAY, save_sections, scrape_catechism
from .cleaning import clean_file
from .exceptions import BiblijaError
from .models import Book
from .parser import parse_bible_text
from .pdf import extract_pdf_text
from .scraper import BATCH_DELAY, BATCH_SIZE, scrape_bible
from .store import BibleStore


# =============================================================================
# Configuration
# =============================================================================

DATA_DIR = Path("data")
PARSED_OUTPUT = DATA_DIR / "biblija.json"
SCRAPED_OUTPUT = DATA_DIR / "Biblija_RKK1998.json"
CATECHISM_OUTPUT = DATA_DIR / "Katekizmas.json"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


# =============================================================================
# Helpers
# =============================================================================

def find_book(name: str) -> Optional[BibleBook]:
    """Look a book up by canonical title or abbreviation, ignoring case."""
    wanted = name.strip().lower()
    for book in BIBLE_BOOKS:
        if wanted in (book.title.lower(), book.abbreviation.lower()):
            return book
    return None


def read_source(path: Path) -> str:
    """Raw text of a PDF or plain text source."""
    if path.suffix.lower() == ".pdf":
        return extract_pdf_text(path)
    return path.read_text(encoding="utf-8")


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return number


def print_summary(books: dict[str, Book]):
    for title, book in books.items():
        verses = sum(len(c.verses) for c in book.chapters)
        print(f"   {title:<36} {len(book.chapters):>4} ch {verses:>6} v")


# =============================================================================
# Commands
# =============================================================================

def cmd_parse(args) -> int:
    source = Path(args.source)
    print(f"📖 Parsing {source}")
    print("=" * 60)

    books = parse_bible_text(read_source(source))
    output = BibleStore(books).save(args.output)

    print_summary(books)
    print("=" * 60)
    print(f"✅ {len(books)} books saved to {output}")
    return 0


def cmd_scrape(args) -> int:
    books = None
    if args.book:
        book = find_book(args.book)
        if book is None:
            print(f"❌ Unknown book: {args.book}")
            print(f"   Valid books: {', '.join(b.title for b in BIBLE_BOOKS[:5])}...")
            return 1
        books = [book]

    print("📖 Bible Scraper")
    print("=" * 60)
    print(f"Books: {len(books or BIBLE_BOOKS)}")
    print(f"Batch size: {args.batch_size}")
    print(f"Output: {args.output}")
    print("=" * 60)

    start_time = time.time()
    result = scrape_bible(
        books=books,
        batch_size=args.batch_size,
        delay=args.delay,
        callback=lambda b: print(f"  Done {b.title}."),
    )
    output = BibleStore(result).save(args.output)
    elapsed = time.time() - start_time

    print("=" * 60)
    print("✅ Scraping complete!")
    print(f"   Books scraped: {len(result)}")
    print(f"   Time: {time.strftime('%H:%M:%S', time.gmtime(elapsed))}")
    print(f"   Output: {output}")
    print("=" * 60)
    return 0


def cmd_catechism(args) -> int:
    print("📖 Catechism Scraper")
    print("=" * 60)

    sections = scrape_catechism(
        delay=args.delay,
        callback=lambda s: print(f"  {s.id}: {s.title}"),
    )
    output = save_sections(sections, args.output)

    print("=" * 60)
    print(f"✅ Saved {len(sections)} sections to {output}")
    return 0


def cmd_clean(args) -> int:
    result = clean_file(args.path)
    if result.modified:
        for category, count in result.removed.items():
            print(f"   Removed {category}: {count}")
        print("✅ File saved successfully.")
    else:
        print("Nothing to clean.")
    return 0


def cmd_show(args) -> int:
    store = BibleStore.load(args.artifact)
    chapter = store.get_chapter_content(args.book, args.chapter - 1)
    if chapter is not None:
        print(chapter.title)
        print()
    print(store.chapter_text(args.book, args.chapter - 1))
    return 0


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build and inspect the reader's scripture data files."
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="Parse a raw PDF or text dump into books")
    p.add_argument("source", help="PDF or UTF-8 text file")
    p.add_argument(
        "--output", "-o",
        default=str(PARSED_OUTPUT),
        help=f"Output JSON file (default: {PARSED_OUTPUT})"
    )
    p.set_defaults(func=cmd_parse)

    p = sub.add_parser("scrape", help="Scrape chapters from biblija.lt")
    p.add_argument(
        "--book", "-b",
        type=str,
        help="Scrape only this book (title or code, e.g. 'Jobo knyga', 'Job')"
    )
    p.add_argument(
        "--output", "-o",
        default=str(SCRAPED_OUTPUT),
        help=f"Output JSON file (default: {SCRAPED_OUTPUT})"
    )
    p.add_argument(
        "--batch-size",
        type=positive_int,
        default=BATCH_SIZE,
        help=f"Chapters fetched in parallel (default: {BATCH_SIZE})"
    )
    p.add_argument(
        "--delay",
        type=non_negative_float,
        default=BATCH_DELAY,
        help=f"Seconds between batches (default: {BATCH_DELAY})"
    )
    p.set_defaults(func=cmd_scrape)

    p = sub.add_parser("catechism", help="Scrape the catechism from katekizmas.lt")
    p.add_argument(
        "--output", "-o",
        default=str(CATECHISM_OUTPUT),
        help=f"Output JSON file (default: {CATECHISM_OUTPUT})"
    )
    p.add_argument(
        "--delay",
        type=non_negative_float,
        default=SECTION_DELAY,
        help=f"Seconds between pages (default: {SECTION_DELAY})"
    )
    p.set_defaults(func=cmd_catechism)

    p = sub.add_parser("clean", help="Strip site boilerplate from a data file")
    p.add_argument("path", help="Data file to clean in place")
    p.set_defaults(func=cmd_clean)

    p = sub.add_parser("show", help="Print one chapter of a parsed data file")
    p.add_argument("artifact", help="JSON file written by parse or scrape")
    p.add_argument("book", help="Canonical book title")
    p.add_argument("chapter", type=positive_int, help="1-based chapter number")
    p.set_defaults(func=cmd_show)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        return args.func(args)
    except (OSError, BiblijaError) as e:
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    exit(main())
