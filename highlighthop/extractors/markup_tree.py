#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Read-only helpers over a BeautifulSoup tree.

Keeps the notebook parser independent of the markup library: everything it
needs from the tree (root lookup, predicate search, class and text access,
source offsets) goes through this module.
"""

from typing import Callable, Iterator, List, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag


def parse_markup(source: str) -> BeautifulSoup:
    """
    Parse markup text into a tree.

    html.parser is used because it keeps the document as written (no implied
    html/body elements) and records the source position of every tag.
    """
    return BeautifulSoup(source, 'html.parser', multi_valued_attributes=None)


def is_element(node: PageElement, name: Optional[str] = None,
               class_name: Optional[str] = None) -> bool:
    """True if node is an element, optionally with the given tag name and class."""
    if not isinstance(node, Tag):
        return False
    if name is not None and node.name != name:
        return False
    if class_name is not None and class_of(node) != class_name:
        return False
    return True


def is_text(node: PageElement) -> bool:
    """True for character data; comments, doctypes and CDATA don't count."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def child_elements(node: Tag) -> Iterator[Tag]:
    """Iterate over the direct element children of node in document order."""
    for child in node.children:
        if isinstance(child, Tag):
            yield child


def top_level_element(document: BeautifulSoup, name: str) -> Optional[Tag]:
    """Find the first direct child of the document with the given tag name."""
    for child in child_elements(document):
        if child.name == name:
            return child
    return None


def locate(node: PageElement, predicate: Callable[[PageElement], bool]) -> Optional[PageElement]:
    """
    Depth-first, pre-order search for the first node matching predicate.

    The node itself is checked before its children.
    """
    if predicate(node):
        return node

    if isinstance(node, Tag):
        for child in node.children:
            result = locate(child, predicate)
            if result is not None:
                return result

    return None


def text_of(node: PageElement,
            skip: Optional[Callable[[PageElement], bool]] = None) -> str:
    """
    Flatten the text content of node.

    Each text node is stripped on its own, then the pieces are joined and
    stripped again, so whitespace between inline children is dropped.
    Descendants matching skip contribute nothing.
    """
    if is_text(node):
        return str(node).strip()
    if isinstance(node, Tag):
        return ''.join(
            text_of(child, skip)
            for child in node.children
            if skip is None or not skip(child)
        ).strip()
    return ''


def class_of(node: PageElement) -> Optional[str]:
    """Value of the class attribute, or None when the node has none."""
    if not isinstance(node, Tag):
        return None
    value = node.get('class')
    if value is None:
        return None
    # Only reached when the tree was built with multi-valued classes
    if isinstance(value, list):
        return ' '.join(value)
    return value


def _line_starts(source: str) -> List[int]:
    starts = [0]
    for index, char in enumerate(source):
        if char == '\n':
            starts.append(index + 1)
    return starts


def source_offset(source: str, node: PageElement) -> Optional[int]:
    """
    Character offset of an element's start tag in source.

    Derived from the line (1-based) and column (0-based) recorded by the
    parser; None when the position was not recorded.
    """
    line = getattr(node, 'sourceline', None)
    column = getattr(node, 'sourcepos', None)
    if line is None or column is None:
        return None

    starts = _line_starts(source)
    if line - 1 >= len(starts):
        return None
    return starts[line - 1] + column
