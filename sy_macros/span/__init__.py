"""
Span utilities for tracking macro usage sites in Swift source code.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import Generic, TypeVar, Optional
from dataclasses import dataclass

# Type parameter for indexing system
IndexType = TypeVar('IndexType')


class ZeroIndexed:
    """Marker class for zero-based indexing."""
    pass


class OneIndexed:
    """Marker class for one-based indexing."""
    pass


@dataclass(frozen=True)
class Position(Generic[IndexType]):
    """A position in a source file."""
    line: int
    column: int

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError(f"Invalid position: line={self.line}, column={self.column}")

    def to_one_indexed(self) -> 'Position[OneIndexed]':
        """Convert a zero-indexed position for display."""
        return Position[OneIndexed](
            line=self.line + 1,
            column=self.column + 1
        )

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Range(Generic[IndexType]):
    """A range in a source file."""
    start: Position[IndexType]
    end: Position[IndexType]

    def __post_init__(self):
        if (self.start.line > self.end.line or
            (self.start.line == self.end.line and self.start.column > self.end.column)):
            raise ValueError(f"Invalid range: start={self.start} > end={self.end}")

    def to_one_indexed(self) -> 'Range[OneIndexed]':
        """Convert to one-indexed range."""
        return Range[OneIndexed](
            start=self.start.to_one_indexed(),
            end=self.end.to_one_indexed()
        )

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class Span(Generic[IndexType]):
    """A span represents a location in source code with file information."""
    file_path: Optional[str]
    range: Range[IndexType]

    @classmethod
    def at(cls, file_path: Optional[str], line: int, column: int) -> 'Span[IndexType]':
        """Create an empty span pointing at a single position."""
        position = Position(line, column)
        return cls(file_path, Range(position, position))

    @property
    def start(self) -> Position[IndexType]:
        """Get the start position of this span."""
        return self.range.start

    @property
    def end(self) -> Position[IndexType]:
        """Get the end position of this span."""
        return self.range.end

    def to_one_indexed(self) -> 'Span[OneIndexed]':
        """Convert to one-indexed span."""
        return Span[OneIndexed](
            file_path=self.file_path,
            range=self.range.to_one_indexed()
        )

    def __str__(self) -> str:
        file_part = f"{self.file_path}:" if self.file_path else ""
        return f"{file_part}{self.range}"


# Convenience type aliases
ZeroSpan = Span[ZeroIndexed]
OneSpan = Span[OneIndexed]
ZeroPosition = Position[ZeroIndexed]
OnePosition = Position[OneIndexed]
ZeroRange = Range[ZeroIndexed]
OneRange = Range[OneIndexed]

# Span used when the host does not report a usage site
UNKNOWN_SPAN = Span.at(None, 0, 0)

# Export all public types
__all__ = [
    "Position",
    "Range",
    "Span",
    "ZeroIndexed",
    "OneIndexed",
    "ZeroSpan",
    "OneSpan",
    "ZeroPosition",
    "OnePosition",
    "ZeroRange",
    "OneRange",
    "UNKNOWN_SPAN",
]
