"""
Tests for notebook serialization (highlighthop/converters/)

Run: pytest tests/test_converters.py -v
"""

import json

import pytest

from highlighthop.converters import CsvConverter, JsonConverter, MarkdownConverter
from highlighthop.converters.format_utils import escape_html, stringify_csv, title_slug
from highlighthop.models import Note, Notebook


# ═══════════════════════════════════════════════════════════════════════════
# Shared utilities
# ═══════════════════════════════════════════════════════════════════════════

class TestTitleSlug:
    def test_punctuation_and_spaces(self):
        assert title_slug(Notebook(title="Moby Dick!")) == "moby_dick_"

    def test_missing_title(self):
        assert title_slug(Notebook()) == "highlights"

    def test_digits_kept(self):
        assert title_slug(Notebook(title="1984")) == "1984"

    def test_non_ascii_replaced(self):
        assert title_slug(Notebook(title="Café")) == "caf_"


class TestEscapeHtml:
    def test_all_special_characters(self):
        assert escape_html("""<a href="x">Tom & Jerry's</a>""") == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;"
        )

    def test_ampersand_escaped_first(self):
        assert escape_html("&lt;") == "&amp;lt;"

    def test_plain_text_unchanged(self):
        assert escape_html("Call me Ishmael.") == "Call me Ishmael."


class TestStringifyCsv:
    def test_none_is_blank(self):
        assert stringify_csv(None) == ""

    def test_number(self):
        assert stringify_csv(154) == "154"

    def test_plain_text_unquoted(self):
        assert stringify_csv("Chapter 1 - Loomings") == "Chapter 1 - Loomings"

    def test_comma_quoted(self):
        assert stringify_csv("one, two") == '"one, two"'

    def test_quote_doubled(self):
        assert stringify_csv('say "hi"') == '"say ""hi"""'

    def test_newline_written_as_literal(self):
        assert stringify_csv("line one\nline two") == '"line one\\nline two"'

    def test_other_characters_never_quoted(self):
        assert stringify_csv("semi;colon 'single' tab\there") == "semi;colon 'single' tab\there"


# ═══════════════════════════════════════════════════════════════════════════
# CSV
# ═══════════════════════════════════════════════════════════════════════════

EXPECTED_CSV = "\n".join([
    "Type,Location,Page,Section,Chapter,Quote,Color,Note",
    "Highlight,10,5,Section 1 - Basic,Chapter 1,This is a highlighted text,yellow,This is a note",
    "Note,20,10,Section 1 - Basic,Chapter 1,,,This is a note only",
    'Highlight,30,15,Section 2 - Edge case,Chapter 2,"With line breaks\\nand ""quotes""",yellow,',
    "Highlight,30,15,Section 2 - Edge case,Chapter 2,"
    "With UTF-8 characters \U0001F680 and HTML tags <br> and <b>bold</b>,yellow,",
    "Highlight,30,,,,Missing page,yellow,",
    "Highlight,30,15,,,Missing section and chapter,yellow,",
])


class TestCsvConverter:
    def test_sample_notebook(self, sample_notebook):
        assert CsvConverter().format(sample_notebook) == EXPECTED_CSV

    def test_empty_notebook_is_header_only(self):
        assert CsvConverter().format(Notebook()) == "Type,Location,Page,Section,Chapter,Quote,Color,Note"

    def test_no_trailing_newline(self, sample_notebook):
        assert not CsvConverter().format(sample_notebook).endswith("\n")

    def test_every_row_has_eight_columns(self):
        notebook = Notebook(markers=(
            Note(section=None, chapter=None, page=None, location=None, note="n"),
        ))
        rows = CsvConverter().format(notebook).split("\n")
        assert rows[1] == "Note,,,,,,,n"


# ═══════════════════════════════════════════════════════════════════════════
# Markdown
# ═══════════════════════════════════════════════════════════════════════════

EXPECTED_MARKDOWN = "\n".join([
    "# Test Book",
    "",
    "By: _Test Author_",
    "",
    "## Section 1 - Basic",
    "",
    "### Highlight (Page 5, Location 10) - Chapter 1",
    "",
    "> This is a highlighted text",
    "",
    "**Note:** This is a note",
    "",
    "----",
    "",
    "### Note (Page 10, Location 20) - Chapter 1",
    "",
    "**Note:** This is a note only",
    "",
    "----",
    "",
    "## Section 2 - Edge case",
    "",
    "### Highlight (Page 15, Location 30) - Chapter 2",
    "",
    "> With line breaks<br>",
    "> and &quot;quotes&quot;",
    "",
    "----",
    "",
    "### Highlight (Page 15, Location 30) - Chapter 2",
    "",
    "> With UTF-8 characters \U0001F680 and HTML tags &lt;br&gt; and &lt;b&gt;bold&lt;/b&gt;",
    "",
    "----",
    "",
    "### Highlight (Location 30)",
    "",
    "> Missing page",
    "",
    "----",
    "",
    "### Highlight (Page 15, Location 30)",
    "",
    "> Missing section and chapter",
    "",
    "----",
    "",
    "",
])


class TestMarkdownConverter:
    def test_sample_notebook(self, sample_notebook):
        assert MarkdownConverter().format(sample_notebook) == EXPECTED_MARKDOWN

    def test_untitled_without_authors(self):
        assert MarkdownConverter().format(Notebook()) == "# Notebook\n\n"

    def test_heading_without_location_details(self):
        notebook = Notebook(title="T", markers=(
            Note(section=None, chapter="Intro", page=None, location=None, note="n"),
        ))
        assert "### Note - Intro\n\n" in MarkdownConverter().format(notebook)

    def test_page_only(self):
        notebook = Notebook(title="T", markers=(
            Note(section=None, chapter=None, page=7, location=None, note="n"),
        ))
        assert "### Note (Page 7)\n\n" in MarkdownConverter().format(notebook)

    def test_repeated_section_emitted_once(self):
        notebook = Notebook(title="T", markers=(
            Note(section="A", chapter=None, page=None, location=1, note="1"),
            Note(section="A", chapter=None, page=None, location=2, note="2"),
        ))
        assert MarkdownConverter().format(notebook).count("## A\n") == 1

    def test_section_returning_is_emitted_again(self):
        notebook = Notebook(title="T", markers=(
            Note(section="A", chapter=None, page=None, location=1, note="1"),
            Note(section="B", chapter=None, page=None, location=2, note="2"),
            Note(section="A", chapter=None, page=None, location=3, note="3"),
        ))
        assert MarkdownConverter().format(notebook).count("## A\n") == 2

    def test_note_is_escaped(self):
        notebook = Notebook(title="T", markers=(
            Note(section=None, chapter=None, page=None, location=1, note="a < b & c"),
        ))
        assert "**Note:** a &lt; b &amp; c\n\n" in MarkdownConverter().format(notebook)


# ═══════════════════════════════════════════════════════════════════════════
# JSON
# ═══════════════════════════════════════════════════════════════════════════

class TestJsonConverter:
    def test_small_notebook_exact(self):
        notebook = Notebook(title="T", markers=(
            Note(section=None, chapter=None, page=None, location=5, note="n"),
        ))
        assert JsonConverter().format(notebook) == "\n".join([
            "{",
            '  "title": "T",',
            '  "markers": [',
            "    {",
            '      "type": "Note",',
            '      "location": 5,',
            '      "note": "n"',
            "    }",
            "  ]",
            "}",
        ])

    def test_empty_notebook(self):
        assert JsonConverter().format(Notebook()) == '{\n  "markers": []\n}'

    def test_unset_fields_omitted(self, sample_notebook):
        content = JsonConverter().format(sample_notebook)
        assert "null" not in content
        missing_page = json.loads(content)["markers"][4]
        assert missing_page == {
            "type": "Highlight",
            "location": 30,
            "color": "yellow",
            "quote": "Missing page",
        }

    def test_key_order(self, sample_notebook):
        data = json.loads(JsonConverter().format(sample_notebook))
        assert list(data) == ["title", "authors", "markers"]
        assert list(data["markers"][0]) == [
            "type", "section", "chapter", "page", "location", "color", "quote", "note",
        ]
        assert list(data["markers"][1]) == [
            "type", "section", "chapter", "page", "location", "note",
        ]

    def test_non_ascii_not_escaped(self, sample_notebook):
        assert "\U0001F680" in JsonConverter().format(sample_notebook)


@pytest.mark.parametrize("converter, name, content_type, extension", [
    (CsvConverter(), "csv", "text/csv", "csv"),
    (MarkdownConverter(), "markdown", "text/markdown", "md"),
    (JsonConverter(), "json", "application/json", "json"),
])
def test_converter_metadata(converter, name, content_type, extension):
    assert (converter.name, converter.content_type, converter.extension) == (name, content_type, extension)


def test_unknown_marker_rejected():
    notebook = Notebook(markers=("not a marker",))
    with pytest.raises(TypeError):
        CsvConverter().format(notebook)
