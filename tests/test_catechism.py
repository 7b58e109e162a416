"""Tests for the catechism scraper."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from biblija.catechism import (
    TOC_URL,
    collect_section_links,
    extract_section,
    save_sections,
    scrape_catechism,
)

TOC_HTML = """
<html><body>
  <a href="https://katekizmas.lt/kbk/1">Pratarmė</a>
  <a href="https://katekizmas.lt/kbk/2">Pirma dalis</a>
  <a href="https://katekizmas.lt/kbk/1">Pratarmė dar kartą</a>
  <a href="https://katekizmas.lt/apie">Apie</a>
  <a>be nuorodos</a>
</body></html>
"""

SECTION_HTML = """
<html>
<head><title>Pratarmė | KATEKIZMAS.LT</title></head>
<body>
  <nav>Meniu</nav>
  <header>Katekizmas</header>
  <h1>Pratarmė</h1>
  <div class="navigation">Atgal</div>
  <article>
    <p>Turinys</p>
    <p>1 Dievas, savaime begalinis   tobulumas ir palaimingumas.</p>
    <p>Atgal į pradžią</p>
  </article>
  <footer>© katekizmas.lt</footer>
</body>
</html>
"""


def make_session(pages: dict) -> MagicMock:
    session = MagicMock()

    def get(url, timeout=None):
        if url not in pages:
            raise requests.HTTPError(f"404 for {url}")
        response = MagicMock()
        response.text = pages[url]
        return response

    session.get.side_effect = get
    return session


def test_collect_section_links_unique_in_order():
    assert collect_section_links(TOC_HTML) == [
        "https://katekizmas.lt/kbk/1",
        "https://katekizmas.lt/kbk/2",
    ]


def test_extract_section_from_article():
    section = extract_section(SECTION_HTML, "https://katekizmas.lt/kbk/1")

    assert section.id == "1"
    assert section.title == "Pratarmė"
    assert "Meniu" not in section.content
    assert "Turinys" not in section.content
    assert "Atgal į pradžią" not in section.content
    assert "1 Dievas, savaime begalinis tobulumas ir palaimingumas." in section.content


def test_extract_section_title_falls_back_to_page_title():
    html = "<html><head><title>Antra dalis | KATEKIZMAS.LT</title></head><body><p>Tekstas</p></body></html>"

    section = extract_section(html, "https://katekizmas.lt/kbk/2")

    assert section.title == "Antra dalis"
    assert section.content == "Tekstas"


def test_scrape_catechism_skips_failing_pages():
    session = make_session({
        TOC_URL: TOC_HTML,
        "https://katekizmas.lt/kbk/1": SECTION_HTML,
    })

    sections = scrape_catechism(session=session, delay=0)

    assert [s.id for s in sections] == ["1"]


def test_scrape_catechism_toc_failure_raises():
    with pytest.raises(requests.HTTPError):
        scrape_catechism(session=make_session({}), delay=0)


def test_save_sections(tmp_path):
    section = extract_section(SECTION_HTML, "https://katekizmas.lt/kbk/1")

    path = save_sections([section], tmp_path / "Katekizmas.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0]["id"] == "1"
    assert data[0]["title"] == "Pratarmė"
