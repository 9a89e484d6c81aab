"""
Shared fixtures for the HighlightHop test suite.
"""

from pathlib import Path

import pytest

from highlighthop.models import Highlight, Note, Notebook

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read an HTML fixture from tests/fixtures."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def make_export_html(*blocks: str, title: str = None, authors: str = None) -> str:
    """Build a minimal notebook export around the given bodyContainer children."""
    meta = ""
    if title is not None:
        meta += f'<div class="bookTitle">{title}</div>\n'
    if authors is not None:
        meta += f'<div class="authors">{authors}</div>\n'
    return (
        "<html>\n<body>\n"
        '<div class="bodyContainer">\n'
        '<div class="notebookFor">Notes and highlights for</div>\n'
        + meta
        + "\n".join(blocks)
        + "\n</div>\n</body>\n</html>\n"
    )


def section(text: str) -> str:
    return f'<div class="sectionHeading">{text}</div>'


def heading(text: str) -> str:
    return f'<div class="noteHeading">{text}</div>'


def note_text(text: str) -> str:
    return f'<div class="noteText">{text}</div>'


@pytest.fixture
def sample_notebook() -> Notebook:
    return Notebook(
        title="Test Book",
        authors="Test Author",
        markers=(
            Highlight(
                section="Section 1 - Basic",
                chapter="Chapter 1",
                page=5,
                location=10,
                color="yellow",
                quote="This is a highlighted text",
                note="This is a note",
            ),
            Note(
                section="Section 1 - Basic",
                chapter="Chapter 1",
                page=10,
                location=20,
                note="This is a note only",
            ),
            Highlight(
                section="Section 2 - Edge case",
                chapter="Chapter 2",
                page=15,
                location=30,
                color="yellow",
                quote='With line breaks\nand "quotes"',
            ),
            Highlight(
                section="Section 2 - Edge case",
                chapter="Chapter 2",
                page=15,
                location=30,
                color="yellow",
                quote="With UTF-8 characters \U0001F680 and HTML tags <br> and <b>bold</b>",
            ),
            Highlight(
                section=None,
                chapter=None,
                page=None,
                location=30,
                color="yellow",
                quote="Missing page",
            ),
            Highlight(
                section=None,
                chapter=None,
                page=15,
                location=30,
                color="yellow",
                quote="Missing section and chapter",
            ),
        ),
    )
