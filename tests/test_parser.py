"""Tests for book detection, number classification and the full parse."""

import pytest

from biblija.models import Chapter
from biblija.parser import (
    Boundary,
    Classification,
    ParseState,
    classify,
    detect_book,
    feed_line,
    parse_bible_text,
    tokenize,
)


def open_state(title: str = "Pradžios knyga") -> ParseState:
    state = ParseState()
    state.open_book(title)
    return state


def state_at(chapter: int, verse: int) -> ParseState:
    state = open_state()
    state.chapter = Chapter(number=chapter, title=f"Pradžios knyga {chapter} skyrius")
    state.verse_number = verse
    return state


# =============================================================================
# Tokenizer
# =============================================================================

def test_tokenize_alternates_text_and_numbers():
    assert tokenize("1 Pradžioje 2 Žemė") == ["", "1", " Pradžioje ", "2", " Žemė"]


def test_tokenize_line_without_numbers():
    assert tokenize("tik tekstas") == ["tik tekstas"]


# =============================================================================
# Classification
# =============================================================================

def test_first_number_of_book_opens_chapter_one():
    assert classify(1, open_state()) == Classification(Boundary.CHAPTER, 1)


def test_first_number_of_book_is_always_chapter_one():
    assert classify(7, open_state()) == Classification(Boundary.CHAPTER, 1)


def test_next_verse_number_opens_verse():
    assert classify(4, state_at(chapter=1, verse=3)) == Classification(Boundary.VERSE, 4)


def test_next_verse_wins_over_next_chapter():
    assert classify(2, state_at(chapter=1, verse=1)) == Classification(Boundary.VERSE, 2)


def test_next_chapter_number_opens_chapter():
    assert classify(2, state_at(chapter=1, verse=5)) == Classification(Boundary.CHAPTER, 2)


def test_one_after_later_verses_opens_following_chapter():
    assert classify(1, state_at(chapter=4, verse=9)) == Classification(Boundary.CHAPTER, 5)


def test_small_gap_still_opens_verse():
    assert classify(6, state_at(chapter=1, verse=3)) == Classification(Boundary.VERSE, 6)


def test_large_gap_is_literal():
    assert classify(8, state_at(chapter=1, verse=3)).kind is Boundary.LITERAL


def test_backwards_number_is_literal():
    assert classify(2, state_at(chapter=5, verse=10)).kind is Boundary.LITERAL


# =============================================================================
# Book Detection
# =============================================================================

def test_detect_marked_title():
    boundary = detect_book("y PRADŽIOS KNYGA")
    assert boundary.title == "Pradžios knyga"
    assert boundary.remainder == ""


def test_detect_canonical_title_any_case():
    assert detect_book("Psalmės").title == "Psalmės"
    assert detect_book("EVANGELIJA PAGAL MATĄ").title == "Evangelija pagal Matą"


def test_detect_uppercase_knyga_line():
    assert detect_book("JOBO KNYGA").title == "Jobo knyga"


def test_detect_inline_title_keeps_remainder():
    boundary = detect_book("y IŠĖJIMO KNYGA 1 Šitie yra vardai")
    assert boundary.title == "Išėjimo knyga"
    assert boundary.remainder == "1 Šitie yra vardai"


def test_long_uppercase_line_is_not_a_title():
    line = "IR TAI BUVO LABAI ILGA EILUTĖ APIE TAI KAS ĮRAŠYTA Į KNYGA"
    assert len(line) >= 50
    assert detect_book(line) is None


@pytest.mark.parametrize("line", ["1 Pradžioje Dievas sukūrė", "Dievas tarė: KNYGA", ""])
def test_ordinary_lines_are_not_titles(line):
    assert detect_book(line) is None


# =============================================================================
# Line Feeding
# =============================================================================

def test_three_simple_verses():
    state = open_state()
    feed_line(state, "1 In the beginning 2 the earth was void 3 and light appeared")

    chapters = state.book.chapters
    assert len(chapters) == 1
    assert [(v.number, v.content) for v in chapters[0].verses] == [
        (1, "In the beginning"),
        (2, "the earth was void"),
        (3, "and light appeared"),
    ]


def test_verse_one_recurrence_starts_new_chapter():
    state = open_state()
    feed_line(state, "1 First 2 second 3 third 4 fourth 5 fifth 6 sixth 7 seventh 8 eighth")
    feed_line(state, "9 last verse of chapter one.")
    feed_line(state, "1 First verse of chapter two.")

    chapters = state.book.chapters
    assert [c.number for c in chapters] == [1, 2]
    assert chapters[0].verses[-1].content == "last verse of chapter one."
    assert chapters[1].title == "Pradžios knyga 2 skyrius"
    assert [(v.number, v.content) for v in chapters[1].verses] == [(1, "First verse of chapter two.")]


def test_literal_number_stays_in_verse_text():
    state = open_state()
    feed_line(state, "1 Pradžia 2 Tais metais")
    feed_line(state, "1990 žmonių atėjo")

    verse = state.book.chapters[0].verses[-1]
    assert verse.number == 2
    assert verse.content == "Tais metais 1990 žmonių atėjo"


def test_text_continues_previous_verse():
    state = open_state()
    feed_line(state, "1 Pradžioje Dievas sukūrė")
    feed_line(state, "dangų ir žemę.")

    assert state.book.chapters[0].verses[0].content == "Pradžioje Dievas sukūrė dangų ir žemę."


def test_bare_trailing_number_is_dropped():
    state = open_state()
    feed_line(state, "1 Pradžioje 2 Dievas tarė 3")

    verses = state.book.chapters[0].verses
    assert [v.number for v in verses] == [1, 2]
    assert verses[-1].content == "Dievas tarė"
    assert state.verse_number == 2


def test_text_before_first_verse_is_dropped():
    state = open_state()
    feed_line(state, "Įžanga 1 Pradžioje")

    verses = state.book.chapters[0].verses
    assert [(v.number, v.content) for v in verses] == [(1, "Pradžioje")]


# =============================================================================
# Full Parse
# =============================================================================

def test_two_books_end_to_end():
    raw = "\n".join([
        "y PRADŽIOS KNYGA",
        "1 Pradžioje Dievas sukūrė dangų ir žemę.",
        "2 Ir žemė buvo padrika ir tuščia.",
        "y IŠĖJIMO KNYGA",
        "1 Šitie yra vardai Izraelio vaikų.",
    ])

    books = parse_bible_text(raw)

    assert list(books) == ["Pradžios knyga", "Išėjimo knyga"]
    genesis, exodus = books["Pradžios knyga"], books["Išėjimo knyga"]
    assert len(genesis.chapters) == 1
    assert [v.number for v in genesis.chapters[0].verses] == [1, 2]
    assert genesis.chapters[0].verses[1].content == "Ir žemė buvo padrika ir tuščia."
    assert len(exodus.chapters) == 1
    assert [v.content for v in exodus.chapters[0].verses] == ["Šitie yra vardai Izraelio vaikų."]


def test_inline_title_content_is_parsed():
    books = parse_bible_text("y PRADŽIOS KNYGA 1 Pradžioje Dievas 2 Žemė buvo tuščia")

    verses = books["Pradžios knyga"].chapters[0].verses
    assert [(v.number, v.content) for v in verses] == [(1, "Pradžioje Dievas"), (2, "Žemė buvo tuščia")]


def test_repeated_title_banner_keeps_book_open():
    raw = "\n".join([
        "y PRADŽIOS KNYGA",
        "1 Pradžioje 2 Dievas",
        "y PRADŽIOS KNYGA",
        "3 tarė",
    ])

    books = parse_bible_text(raw)

    assert [v.number for v in books["Pradžios knyga"].chapters[0].verses] == [1, 2, 3]


def test_repeated_inline_title_still_parses_its_text():
    raw = "\n".join([
        "y PRADŽIOS KNYGA",
        "1 Pradžioje 2 Dievas",
        "y PRADŽIOS KNYGA 3 tarė",
    ])

    books = parse_bible_text(raw)

    chapters = books["Pradžios knyga"].chapters
    assert len(chapters) == 1
    assert [(v.number, v.content) for v in chapters[0].verses] == [
        (1, "Pradžioje"), (2, "Dievas"), (3, "tarė"),
    ]


def test_book_without_chapters_is_kept_empty():
    books = parse_bible_text("JOBO KNYGA\nTik įžanga be skaičių")

    assert books["Jobo knyga"].chapters == []


def test_lines_before_any_book_are_ignored():
    books = parse_bible_text("1 Pratarmė 2 be knygos\ny PRADŽIOS KNYGA\n1 Pradžioje")

    assert list(books) == ["Pradžios knyga"]
    assert books["Pradžios knyga"].chapters[0].verses[0].content == "Pradžioje"


def test_footnote_lines_contribute_nothing():
    raw = "\n".join([
        "y PRADŽIOS KNYGA",
        "1 Pradžioje Dievas",
        "[3] some footnote text",
        "12 [4] another note",
        "2 Žemė buvo tuščia",
    ])

    verses = parse_bible_text(raw)["Pradžios knyga"].chapters[0].verses

    assert [(v.number, v.content) for v in verses] == [(1, "Pradžioje Dievas"), (2, "Žemė buvo tuščia")]


def test_chapter_and_verse_numbers_increase():
    raw = "\n".join([
        "--- Puslapis 1 ---",
        "y PRADŽIOS KNYGA",
        "1 Pradžioje 2 Žemė 3 Dievas tarė 4 Dievas matė",
        "2 Taip buvo baigti 2 Septintą dieną 3 Dievas palaimino",
        "--- Puslapis 2 ---",
        "12 5 PRADŽIOS KNYGA 2, 3",
        "4 Tokia yra kilmė 1 Žaltys buvo gudrus 2 Moteris atsakė",
        "1 Adomas pažino 2 Vėl ji pagimdė 1998 metais 3 Po kiek laiko",
    ])

    genesis = parse_bible_text(raw)["Pradžios knyga"]

    numbers = [c.number for c in genesis.chapters]
    assert numbers == sorted(set(numbers))
    assert numbers == [1, 2, 3, 4]
    for chapter in genesis.chapters:
        verse_numbers = [v.number for v in chapter.verses]
        assert verse_numbers == sorted(set(verse_numbers))


def test_independent_parses_do_not_share_state():
    first = parse_bible_text("y PRADŽIOS KNYGA\n1 Pradžioje")
    second = parse_bible_text("y IŠĖJIMO KNYGA\n1 Šitie")

    assert list(first) == ["Pradžios knyga"]
    assert list(second) == ["Išėjimo knyga"]
