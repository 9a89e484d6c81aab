#!/usr/bin/env python3
# Copyright (c) 2025 Denis Darkin
# SPDX-License-Identifier: MIT
"""
Convert a notebook to pretty-printed JSON
"""

import json

from ..models import Notebook, notebook_to_dict


class JsonConverter:
    """Serialize a notebook as JSON; unset optional fields are left out."""

    name = 'json'
    content_type = 'application/json'
    extension = 'json'

    def format(self, notebook: Notebook) -> str:
        return json.dumps(notebook_to_dict(notebook), indent=2, ensure_ascii=False)
