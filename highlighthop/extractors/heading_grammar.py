#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Decoder for Kindle note heading lines.

A heading line looks like one of:

    Highlight(yellow) - Location 361
    Highlight(blue) - Page 13 · Location 154
    Note - Heading Sub Section > Page 13 · Location 154
    Bookmark - Location 795

Every part after the kind keyword is optional and extracted on its own.
"""

import re
from typing import Optional

from ..models import HeadingKind, SectionHeading

_KIND_RE = re.compile(r'^(Highlight|Note|Bookmark)\b')
_COLOR_RE = re.compile(r'^Highlight\s*\(([^)]*)\)')
_CHAPTER_RE = re.compile(r'- (.*?) >')
_PAGE_RE = re.compile(r'\bPage\s+([0-9]+)')
_LOCATION_RE = re.compile(r'\bLocation\s+([0-9]+)')


def _match_int(pattern: re.Pattern, text: str) -> Optional[int]:
    match = pattern.search(text)
    if match:
        return int(match.group(1), 10)
    return None


def parse_section_heading(text: str) -> Optional[SectionHeading]:
    """
    Decode one heading line.

    Args:
        text: Heading text as found in a noteHeading element

    Returns:
        The decoded heading, or None if text doesn't start with a
        Highlight, Note or Bookmark keyword
    """
    text = text.strip()

    kind_match = _KIND_RE.match(text)
    if not kind_match:
        return None
    kind = HeadingKind(kind_match.group(1))

    color = None
    if kind is HeadingKind.HIGHLIGHT:
        color_match = _COLOR_RE.match(text)
        if color_match:
            color = color_match.group(1).strip() or None

    chapter = None
    chapter_match = _CHAPTER_RE.search(text)
    if chapter_match:
        chapter = chapter_match.group(1).strip() or None

    return SectionHeading(
        kind=kind,
        color=color,
        chapter=chapter,
        page=_match_int(_PAGE_RE, text),
        location=_match_int(_LOCATION_RE, text),
    )
