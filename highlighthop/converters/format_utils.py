#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Shared utilities for notebook serialization.
"""

import re
from typing import Optional, Union

from ..models import Notebook

_SLUG_RE = re.compile(r'[^a-zA-Z0-9]')

_HTML_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#039;'),
)


def title_slug(notebook: Notebook) -> str:
    """Filename stem for a notebook.

    Examples:
        >>> title_slug(Notebook(title="Moby Dick!"))
        'moby_dick_'

        >>> title_slug(Notebook())
        'highlights'
    """
    title = notebook.title if notebook.title is not None else 'highlights'
    return _SLUG_RE.sub('_', title).lower()


def escape_html(text: str) -> str:
    """Escape text for inline HTML.

    Single quotes become &#039; (html.escape would emit &#x27;).
    """
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def stringify_csv(value: Optional[Union[str, int]]) -> str:
    """Render one CSV field.

    Fields containing a comma, a double quote or a newline are quoted, with
    quotes doubled and newlines written as a literal backslash-n. Other
    fields are emitted as-is; None becomes an empty field.
    """
    if value is None:
        return ''

    text = str(value)
    if '"' in text or ',' in text or '\n' in text:
        escaped = text.replace('"', '""').replace('\n', '\\n')
        return f'"{escaped}"'
    return text
