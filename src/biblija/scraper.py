"""Chapter-per-page scripture scraper for biblija.lt."""

import logging
import re
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .books import BIBLE_BOOKS, BibleBook
from .models import Book, Chapter, Verse, chapter_title

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

BASE_URL = "https://biblija.lt/index.aspx?cmp=reading&doc=BiblijaRKK1998"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

BATCH_SIZE = 5  # chapters fetched concurrently
BATCH_DELAY = 0.2  # seconds between batches
REQUEST_TIMEOUT = 30

# Psalm 119 has 176 verses; larger numbers are years and counts.
MAX_VERSE_NUMBER = 200

ERROR_TITLE_SUFFIX = " (Klaida)"
ERROR_CONTENT = "Nepavyko parsiųsti turinio."

_FOOTNOTE_LINK_RE = re.compile(r"^\[?\d+\]?$")
_DIGITS_RE = re.compile(r"[0-9]+")


def create_session(user_agent: str = USER_AGENT) -> requests.Session:
    """Session with a fixed User-Agent and retries on throttling/server errors."""
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    adapter = HTTPAdapter(
        pool_connections=BATCH_SIZE,
        pool_maxsize=BATCH_SIZE,
        max_retries=Retry(total=2, backoff_factor=0.5, status_forcelist=[429, 500, 502, 503, 504]),
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def chapter_url(book: BibleBook, chapter: int) -> str:
    return f"{BASE_URL}_{book.abbreviation}_{chapter}"


# =============================================================================
# Extraction Functions
# =============================================================================

def extract_chapter_text(html: str) -> str:
    """Flatten a chapter page to one line of text with inline verse numbers."""
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup(["script", "style"]):
        tag.decompose()
    for tag in soup.select(".header, .footer"):
        tag.decompose()

    # Footnote references look like "1" or "[1]" links.
    for link in soup.find_all("a"):
        if _FOOTNOTE_LINK_RE.match(link.get_text(strip=True)):
            link.decompose()

    for sup in soup.find_all("sup"):
        sup.replace_with(f" {sup.get_text()} ")
    for br in soup.find_all("br"):
        br.replace_with(" ")
    for p in soup.find_all("p"):
        p.append(" ")

    root = soup.body or soup
    return re.sub(r"\s+", " ", root.get_text()).strip()


def split_chapter_verses(text: str) -> list[Verse]:
    """
    Split the text of a single chapter page into verses.

    Verse numbers are expected to run 1, 2, 3... Anything before the first
    "1" is page preamble and is discarded; numbers that do not continue the
    sequence stay in the verse text.
    """
    verses: list[Verse] = []
    current: Optional[Verse] = None

    for word in text.split():
        if _DIGITS_RE.fullmatch(word):
            number = int(word)
            if current is None and number == 1:
                current = Verse(number=1)
                continue
            if current is not None and number == current.number + 1 and number <= MAX_VERSE_NUMBER:
                verses.append(current)
                current = Verse(number=number)
                continue

        if current is not None:
            current.append(word)

    if current is not None:
        verses.append(current)
    return verses


# =============================================================================
# Public API
# =============================================================================

def error_chapter(book_title: str, number: int) -> Chapter:
    """Placeholder recorded when a chapter page could not be fetched."""
    return Chapter(
        number=number,
        title=chapter_title(book_title, number) + ERROR_TITLE_SUFFIX,
        verses=[Verse(number=1, content=ERROR_CONTENT)],
    )


def scrape_chapter(
    book: BibleBook,
    chapter: int,
    session: Optional[requests.Session] = None,
) -> Chapter:
    """
    Scrape one chapter page.

    Args:
        book: Reference record of the book
        chapter: 1-based chapter number
        session: Shared session (a new one is created if omitted)

    Returns:
        The parsed Chapter, or an error placeholder if the request failed
    """
    session = session or create_session()
    url = chapter_url(book, chapter)
    try:
        response = session.get(url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error("Error scraping %s Ch %d: %s", book.title, chapter, e)
        return error_chapter(book.title, chapter)

    text = extract_chapter_text(response.text)
    verses = split_chapter_verses(text)
    if not verses:
        logger.warning(
            "No verses parsed for %s %d, content length: %d", book.title, chapter, len(text)
        )

    return Chapter(number=chapter, title=chapter_title(book.title, chapter), verses=verses)


def scrape_book(
    book: BibleBook,
    session: Optional[requests.Session] = None,
    batch_size: int = BATCH_SIZE,
    delay: float = BATCH_DELAY,
    callback: Optional[Callable[[Chapter], None]] = None,
) -> Book:
    """
    Scrape all chapters of a book, ``batch_size`` at a time.

    Args:
        book: Reference record of the book
        session: Shared session (a new one is created if omitted)
        batch_size: Number of chapters fetched in parallel
        delay: Pause between batches in seconds
        callback: Optional function called with each finished Chapter

    Returns:
        Book with chapters sorted by number
    """
    session = session or create_session()
    numbers = list(range(1, book.chapter_count + 1))
    result = Book(title=book.title)

    with ThreadPoolExecutor(max_workers=batch_size) as executor:
        for start in range(0, len(numbers), batch_size):
            batch = numbers[start:start + batch_size]
            for chapter in executor.map(lambda n: scrape_chapter(book, n, session), batch):
                result.chapters.append(chapter)
                if callback:
                    callback(chapter)
            if start + batch_size < len(numbers):
                time.sleep(delay)

    result.chapters.sort(key=lambda c: c.number)
    return result


def scrape_bible(
    books: Optional[list[BibleBook]] = None,
    batch_size: int = BATCH_SIZE,
    delay: float = BATCH_DELAY,
    callback: Optional[Callable[[Book], None]] = None,
) -> dict[str, Book]:
    """
    Scrape every book (or only ``books``) in canonical order.

    Returns:
        Canonical title -> Book
    """
    session = create_session()
    result: dict[str, Book] = {}

    for book in books or BIBLE_BOOKS:
        if not book.abbreviation:
            logger.warning("Skipping %s - no code mapping", book.title)
            continue

        logger.info("Scraping %s (%s) [%d ch]", book.title, book.abbreviation, book.chapter_count)
        result[book.title] = scrape_book(book, session, batch_size=batch_size, delay=delay)
        if callback:
            callback(result[book.title])

    return result
