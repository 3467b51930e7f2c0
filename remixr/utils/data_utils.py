"""
remixr/utils/data_utils.py

Utility functions for loading page captures and normalizing page text.
"""

import json
import re
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup

from remixr.utils.exceptions import UnsupportedFileFormat

# text inside these tags never reaches the rendered page
NON_VISIBLE_TAGS: tuple[str, ...] = ("script", "style", "noscript", "template")

_TYPOGRAPHIC_QUOTES = str.maketrans({"’": "'", "‘": "'", "“": '"', "”": '"'})


def load_data(file_path: Path | str) -> dict[str, Any] | list[Any] | str:
    """
    Load a page capture from a file.
    Args:
        file_path: Path to a JSON DOM capture (.json) or a static HTML page (.html/.htm).
    Returns:
        Parsed JSON data, or the raw HTML string.
    Raises:
        UnsupportedFileFormat: If the file is of an unsupported type.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, mode="r", encoding="utf-8") as data_file:
            return json.load(data_file)
    if suffix in (".html", ".htm"):
        return path.read_text(encoding="utf-8", errors="replace")

    raise UnsupportedFileFormat(f"No support for provided file type: {path}.")


def get_text_from_html(html: str) -> str:
    """
    Visible text of an HTML document, one text run per line.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(list(NON_VISIBLE_TAGS)):
        tag.decompose()

    lines = (line.strip() for line in soup.get_text(separator="\n").splitlines())
    return "\n".join(line for line in lines if line)


def get_title_from_html(html: str) -> str | None:
    """
    The document's <title> text, or None when absent or empty.
    """
    title = BeautifulSoup(html, "html.parser").title
    if title is None:
        return None
    return title.get_text(strip=True) or None


def normalize_text(text: str | None) -> str:
    """
    Lower-case text and fold typographic quotes to ASCII, for phrase matching.
    """
    if not text:
        return ""
    return text.translate(_TYPOGRAPHIC_QUOTES).lower()


def truncate(text: str, max_chars: int = 50) -> str:
    """Collapse whitespace and cut text to max_chars characters."""
    return re.sub(r"\s+", " ", text).strip()[:max_chars]
