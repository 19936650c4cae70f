"""
Swift source rendering helpers.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import re
from typing import Sequence

_DELIMITER_CONFLICT = re.compile(r'["\\](#*)')


def string_literal(content: str) -> str:
    """
    Render text as a Swift string literal that evaluates back to it.

    Text without quotes or backslashes becomes a plain literal. Otherwise a
    raw literal is used with one more `#` than the longest `#` run following
    a quote or backslash in the text, so nothing in it can close or escape
    the literal. A leading quote is escaped so the opening delimiter never
    reads as the start of a multi-line literal.
    """
    runs = [len(match.group(1)) for match in _DELIMITER_CONFLICT.finditer(content)]
    pounds = "#" * (max(runs) + 1) if runs else ""

    escape = "\\" + pounds
    escaped = content.replace("\r", f"{escape}r").replace("\n", f"{escape}n")
    if escaped.startswith('"'):
        escaped = f'{escape}"{escaped[1:]}'
    return f'{pounds}"{escaped}"{pounds}'


def render_block(header: str, statements: Sequence[str], indent: str) -> str:
    """Render `header { ... }` with one indented statement per line."""
    if not statements:
        return f"{header} {{}}"
    body = "\n".join(f"{indent}{statement}" for statement in statements)
    return f"{header} {{\n{body}\n}}"
