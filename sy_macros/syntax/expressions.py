"""
Macro Argument Expressions

Structural view of the expressions a host passes to a macro: the argument
list of a freestanding macro or the attribute arguments of an attached one.
Literal text is kept verbatim so rules can reproduce it exactly.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import re
from typing import Dict, Any, Optional, Sequence
from dataclasses import dataclass
from enum import Enum


class ExpressionKind(Enum):
    """Shapes of expressions the rules distinguish."""
    STRING_LITERAL = "string_literal"
    BOOLEAN_LITERAL = "boolean_literal"
    INTEGER_LITERAL = "integer_literal"
    MEMBER_ACCESS = "member_access"
    OTHER = "other"


_LITERAL_DELIMITERS = re.compile(r'(#*)("""|")(.*)\2\1', re.DOTALL)
_ESCAPED_CHARACTERS = {'0': '\0', '\\': '\\', 't': '\t', 'n': '\n', 'r': '\r', '"': '"', "'": "'"}


def literal_content(text: str) -> Optional[str]:
    """
    Content of a Swift string literal written as `text`.

    Handles plain, raw (`#"..."#`) and triple-quoted multi-line literals, removing
    the closing-delimiter indentation of multi-line ones and decoding escape
    sequences. Returns None for literals with interpolation since they have
    no static content.

    Raises:
        ValueError: If `text` is not a well-formed string literal
    """
    match = _LITERAL_DELIMITERS.fullmatch(text.strip())
    if not match:
        raise ValueError(f"Malformed string literal: {text!r}")
    pounds, delimiter, body = match.groups()
    multiline = delimiter == '"""'

    if multiline:
        lines = body.replace('\r\n', '\n').split('\n')
        if len(lines) < 2 or lines[0] or lines[-1].strip():
            raise ValueError(f"Multi-line string literal must open and close on their own lines: {text!r}")
        indent = lines[-1]
        content_lines = []
        for line in lines[1:-1]:
            if line.startswith(indent):
                content_lines.append(line[len(indent):])
            elif not line.strip():
                content_lines.append('')
            else:
                raise ValueError(f"Insufficient indentation in multi-line string literal: {text!r}")
        body = '\n'.join(content_lines)
    elif '\n' in body or '\r' in body:
        raise ValueError(f"Unterminated string literal: {text!r}")

    escape = re.compile(re.escape('\\' + pounds) + r'(?:u\{([0-9a-fA-F]{1,8})\}|(.))', re.DOTALL)
    if any(m.group(2) == '(' for m in escape.finditer(body)):
        return None

    def decode(m) -> str:
        if m.group(1):
            return chr(int(m.group(1), 16))
        character = m.group(2)
        if character in _ESCAPED_CHARACTERS:
            return _ESCAPED_CHARACTERS[character]
        if multiline and character == '\n':
            return ''
        raise ValueError(f"Invalid escape sequence in string literal: {text!r}")

    return escape.sub(decode, body)


@dataclass(frozen=True)
class Expression:
    """
    An already-parsed expression.

    `text` is the source text exactly as written. For string literals `value`
    holds the literal content without quotes; for member accesses `base` is
    the text left of the last dot and `value` the member name.
    """
    kind: ExpressionKind
    text: str
    value: Optional[str] = None
    base: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Expression':
        """Create Expression from dictionary."""
        if 'text' not in data:
            raise ValueError(f"Expression is missing 'text': {data}")

        try:
            kind = ExpressionKind(data.get('kind', 'other'))
        except ValueError:
            raise ValueError(f"Unknown expression kind: {data.get('kind')}")

        text = data['text']
        value = data.get('value')
        base = data.get('base')

        if kind == ExpressionKind.STRING_LITERAL and value is None:
            value = literal_content(text)
        elif kind == ExpressionKind.MEMBER_ACCESS and base is None and '.' in text:
            base, _, member = text.rpartition('.')
            value = value if value is not None else member
        elif kind == ExpressionKind.BOOLEAN_LITERAL and value is None:
            value = text.strip()

        return cls(kind=kind, text=text, value=value, base=base)

    @property
    def string_value(self) -> Optional[str]:
        """Content of a string literal, None for any other expression."""
        if self.kind == ExpressionKind.STRING_LITERAL:
            return self.value
        return None

    @property
    def is_true_literal(self) -> bool:
        return self.kind == ExpressionKind.BOOLEAN_LITERAL and self.value == "true"

    @property
    def metatype_base(self) -> Optional[str]:
        """Type name of a `Type.self` expression."""
        if self.kind == ExpressionKind.MEMBER_ACCESS and self.value == "self" and self.base:
            return self.base.strip()
        return None

    def trimmed_text(self) -> str:
        return self.text.strip()

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class AnnotationArgument:
    """One (optionally labelled) macro argument."""
    value: Expression
    label: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnnotationArgument':
        """Create AnnotationArgument from dictionary."""
        if 'value' not in data:
            raise ValueError(f"Argument is missing 'value': {data}")
        return cls(
            value=Expression.from_dict(data['value']),
            label=data.get('label')
        )


def find_argument(arguments: Sequence[AnnotationArgument], label: str) -> Optional[AnnotationArgument]:
    """Find the first argument carrying the given label."""
    for argument in arguments:
        if argument.label == label:
            return argument
    return None


__all__ = [
    'ExpressionKind',
    'Expression',
    'AnnotationArgument',
    'find_argument',
    'literal_content',
]
