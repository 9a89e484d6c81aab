#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Kindle Notebook Parser - extract highlights and notes from an
"Export Notebook" HTML file.

The export is a flat list of divs inside a bodyContainer div. Book metadata
comes first, then sectionHeading divs interleaved with noteHeading/noteText
pairs:

    <div class="bodyContainer">
      <div class="notebookFor">Notes and highlights for</div>
      <div class="bookTitle">Moby Dick</div>
      <div class="authors">Herman Melville</div>
      <div class="citation">...</div>
      <div class="sectionHeading">CHAPTER 1. Loomings.</div>
      <div class="noteHeading">Highlight(yellow) - Location 361</div>
      <div class="noteText">Call me Ishmael.</div>
      ...
    </div>

Kindle closes noteText divs with a stray </h3>. html.parser ignores that
end tag, so every later block ends up nested inside the unclosed noteText.
Blocks are therefore also read from inside noteText elements, and a
noteText only keeps its own text.
"""

import logging
from typing import Iterator, List, Optional

from bs4.element import Tag

from ..errors import GrammarError, SequencingError, StructuralError
from ..models import HeadingKind, Highlight, Marker, Note, Notebook, SectionHeading
from .heading_grammar import parse_section_heading
from .markup_tree import (
    child_elements,
    class_of,
    is_element,
    locate,
    parse_markup,
    source_offset,
    text_of,
    top_level_element,
)

logger = logging.getLogger(__name__)

CONTAINER_TAG = 'div'
CONTAINER_CLASS = 'bodyContainer'


def _build_marker(heading: SectionHeading, section: Optional[str], text: str) -> Marker:
    """Combine a pending heading with the text block that follows it."""
    if heading.kind is HeadingKind.HIGHLIGHT:
        return Highlight(
            section=section,
            chapter=heading.chapter,
            page=heading.page,
            location=heading.location,
            color=heading.color,
            quote=text,
        )
    if heading.kind is HeadingKind.NOTE:
        return Note(
            section=section,
            chapter=heading.chapter,
            page=heading.page,
            location=heading.location,
            note=text,
        )
    raise TypeError(f"Cannot build a marker from a {heading.kind.value} heading")


def _blocks(container: Tag) -> Iterator[Tag]:
    """Container children in document order, including blocks nested in a noteText."""
    stack = [child_elements(container)]
    while stack:
        element = next(stack[-1], None)
        if element is None:
            stack.pop()
            continue
        yield element
        if class_of(element) == 'noteText':
            stack.append(child_elements(element))


def _is_block(node) -> bool:
    return is_element(node, CONTAINER_TAG)


def _find_container(source: str) -> Tag:
    document = parse_markup(source)

    root = top_level_element(document, 'html')
    if root is None:
        raise StructuralError('Could not find "html" element.', offset=len(source))

    container = locate(root, lambda node: is_element(node, CONTAINER_TAG, CONTAINER_CLASS))
    if container is None:
        raise StructuralError(
            "Could not locate root container element.",
            offset=len(source),
        )
    return container


def extract_notebook(source: str) -> Notebook:
    """
    Extract metadata and raw markers from a notebook export.

    Markers are returned in document order and are not merged; a note
    written on a highlight still shows up as a separate Note here.

    Args:
        source: Full HTML text of the export

    Returns:
        Notebook with title, authors and the raw marker list

    Raises:
        StructuralError: html element or content container is missing
        GrammarError: a noteHeading could not be decoded
        SequencingError: a noteText has no heading, or a heading has no noteText
    """
    container = _find_container(source)

    title = None
    authors = None
    markers: List[Marker] = []

    current_section: Optional[str] = None
    pending_heading: Optional[SectionHeading] = None
    pending_element: Optional[Tag] = None
    bookmark_count = 0

    for element in _blocks(container):
        class_name = class_of(element)

        if class_name == 'bookTitle':
            title = text_of(element)

        elif class_name == 'authors':
            authors = text_of(element)

        elif class_name == 'sectionHeading':
            current_section = text_of(element)

        elif class_name == 'noteHeading':
            if pending_heading is not None:
                raise SequencingError(
                    "Unclosed heading found.",
                    offset=source_offset(source, pending_element),
                )

            heading = parse_section_heading(text_of(element))
            if heading is None:
                raise GrammarError(
                    "Failed to parse section heading.",
                    offset=source_offset(source, element),
                )

            if heading.kind is HeadingKind.BOOKMARK:
                bookmark_count += 1
                continue

            if heading.kind is HeadingKind.HIGHLIGHT and heading.color is None:
                raise GrammarError(
                    "Failed to parse highlight color.",
                    offset=source_offset(source, element),
                )

            pending_heading = heading
            pending_element = element

        elif class_name == 'noteText':
            if pending_heading is None:
                raise SequencingError(
                    "No current heading found.",
                    offset=source_offset(source, element),
                )

            markers.append(
                _build_marker(pending_heading, current_section, text_of(element, skip=_is_block))
            )
            pending_heading = None
            pending_element = None

        # notebookFor, citation and unknown classes carry nothing we keep

    if pending_heading is not None:
        raise SequencingError(
            "Unclosed heading found.",
            offset=source_offset(source, pending_element),
        )

    logger.debug(f"Extracted {len(markers)} raw marker(s), skipped {bookmark_count} bookmark(s)")

    return Notebook(title=title, authors=authors, markers=tuple(markers))
