"""Catechism scraper: one section per katekizmas.lt page."""

import json
import logging
import re
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Callable, Optional, Union

import requests
from bs4 import BeautifulSoup

from .scraper import REQUEST_TIMEOUT, create_session

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

TOC_URL = "https://katekizmas.lt/kbk-turinys"
CONTENT_BASE_URL = "https://katekizmas.lt/kbk/"
SECTION_DELAY = 0.2  # seconds between pages

TITLE_SITE_SUFFIX = "| KATEKIZMAS.LT"
NAVIGATION_PHRASES = ("Turinys", "Atgal į pradžią")
CONTENT_SELECTORS = ("article", "main", ".content", "body")


@dataclass
class CatechismSection:
    id: str  # page slug after CONTENT_BASE_URL
    title: str
    content: str

    def to_dict(self) -> dict:
        return asdict(self)


# =============================================================================
# Extraction Functions
# =============================================================================

def collect_section_links(html: str, prefix: str = CONTENT_BASE_URL) -> list[str]:
    """Unique content links of the table of contents, in page order."""
    soup = BeautifulSoup(html, "html.parser")
    links: list[str] = []
    for a in soup.find_all("a", href=True):
        href = a["href"]
        if href.startswith(prefix) and href not in links:
            links.append(href)
    return links


def extract_section(html: str, url: str) -> CatechismSection:
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup(["nav", "header", "footer", "script", "style"]):
        tag.decompose()
    for tag in soup.select(".navigation"):
        tag.decompose()

    h1 = soup.find("h1")
    title = h1.get_text(strip=True) if h1 else ""
    if not title and soup.title:
        title = soup.title.get_text().replace(TITLE_SITE_SUFFIX, "").strip()

    container = None
    for selector in CONTENT_SELECTORS:
        container = soup.select_one(selector)
        if container is not None:
            break
    root = container if container is not None else soup

    text = re.sub(r"\s+", " ", root.get_text()).strip()
    for phrase in NAVIGATION_PHRASES:
        text = text.replace(phrase, "")

    return CatechismSection(id=url.replace(CONTENT_BASE_URL, ""), title=title, content=text.strip())


# =============================================================================
# Public API
# =============================================================================

def scrape_catechism(
    session: Optional[requests.Session] = None,
    delay: float = SECTION_DELAY,
    callback: Optional[Callable[[CatechismSection], None]] = None,
) -> list[CatechismSection]:
    """
    Scrape every catechism section linked from the table of contents.

    Pages are fetched one by one with a polite delay. A failing page is
    logged and skipped; a failing table of contents raises.
    """
    session = session or create_session()

    response = session.get(TOC_URL, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    links = collect_section_links(response.text)
    logger.info("Found %d content links", len(links))

    sections = []
    for link in links:
        try:
            page = session.get(link, timeout=REQUEST_TIMEOUT)
            page.raise_for_status()
        except requests.RequestException as e:
            logger.error("Failed to scrape %s: %s", link, e)
            continue

        section = extract_section(page.text, link)
        sections.append(section)
        if callback:
            callback(section)
        time.sleep(delay)

    return sections


def save_sections(sections: list[CatechismSection], path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([s.to_dict() for s in sections], f, indent=2, ensure_ascii=False)
    return path
