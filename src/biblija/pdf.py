"""Raw text extraction from scripture PDFs, one marked block per page."""

import logging
import re
from pathlib import Path
from typing import Optional, Union

import pdfplumber

from .exceptions import SourceError
from .normalizer import PAGE_MARKER

logger = logging.getLogger(__name__)


def page_block(page_number: int, text: str) -> str:
    """Page text preceded by the marker line the normalizer drops."""
    return f"{PAGE_MARKER} {page_number} ---\n{text}\n\n"


def extract_pdf_text(
    pdf_path: Union[str, Path],
    max_pages: Optional[int] = None,
    x_tolerance: float = 1.5,
) -> str:
    """
    Extract the text of a PDF as a single blob for ``parse_bible_text``.

    Args:
        pdf_path: Path to the PDF file
        max_pages: Stop after this many pages (None = all)
        x_tolerance: pdfplumber spacing tolerance between characters

    Returns:
        Concatenated page blocks

    Raises:
        SourceError: if the PDF cannot be opened or read
    """
    blocks = []
    try:
        with pdfplumber.open(pdf_path) as pdf:
            pages = pdf.pages if max_pages is None else pdf.pages[:max_pages]
            logger.info("Extracting %d pages from %s", len(pages), pdf_path)

            for number, page in enumerate(pages, start=1):
                text = page.extract_text(x_tolerance=x_tolerance) or ""
                # Keep line breaks, collapse runs of spaces within lines.
                text = re.sub(r"[ \t]+", " ", text)
                blocks.append(page_block(number, text))
    except Exception as e:
        raise SourceError(f"Cannot read PDF {pdf_path}: {e}") from e

    return "".join(blocks)
