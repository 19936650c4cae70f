"""
Shared types for macro expansion requests and results.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import List, Optional, Dict, Any, Tuple
from dataclasses import dataclass, field
from enum import Enum

from ..span import ZeroSpan, UNKNOWN_SPAN, Span
from ..lsp_data import MacroDiagnostic
from ..syntax import AnnotationArgument, TypeDeclaration


class MacroContractError(Exception):
    """
    A request that violates the host's invocation contract.

    Raised when the host hands over something its own macro grammar rules
    out, such as a missing argument. It aborts the request and is never
    turned into a diagnostic.
    """


class DeclarationRole(Enum):
    """Where the host places a generated declaration."""
    FREESTANDING = "freestanding"  # replaces the macro usage
    MEMBER = "member"              # injected into the annotated type
    PEER = "peer"                  # sibling of the annotated type
    EXTENSION = "extension"        # extension of the annotated type


@dataclass(frozen=True)
class GeneratedDeclaration:
    """A unit of generated source."""
    role: DeclarationRole
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {'role': self.role.value, 'text': self.text}


@dataclass(frozen=True)
class GeneratedExpression:
    """An expression replacing a freestanding macro usage."""
    text: str
    result_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'text': self.text, 'type': self.result_type}


@dataclass(frozen=True)
class ExpansionRequest:
    """One macro usage site to expand."""
    macro: str
    arguments: Tuple[AnnotationArgument, ...] = ()
    declaration: Optional[TypeDeclaration] = None
    span: ZeroSpan = UNKNOWN_SPAN

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExpansionRequest':
        """Create ExpansionRequest from dictionary."""
        if 'macro' not in data:
            raise ValueError(f"Request is missing 'macro': {data}")

        declaration = None
        if data.get('declaration') is not None:
            declaration = TypeDeclaration.from_dict(data['declaration'])

        span = UNKNOWN_SPAN
        location = data.get('location')
        if location:
            span = Span.at(location.get('file'), location.get('line', 0), location.get('column', 0))

        return cls(
            macro=data['macro'],
            arguments=tuple(AnnotationArgument.from_dict(a) for a in data.get('arguments', [])),
            declaration=declaration,
            span=span
        )


class DiagnosticSink:
    """Collects the diagnostics of a single request."""

    def __init__(self, span: ZeroSpan):
        self.span = span
        self._diagnostics: List[MacroDiagnostic] = []

    def error(self, message: str) -> None:
        self._diagnostics.append(MacroDiagnostic.error(self.span, message))

    def warning(self, message: str) -> None:
        self._diagnostics.append(MacroDiagnostic.warning(self.span, message))

    def drain(self) -> List[MacroDiagnostic]:
        """Return collected diagnostics and empty the sink."""
        diagnostics, self._diagnostics = self._diagnostics, []
        return diagnostics


@dataclass
class ExpansionResult:
    """Everything a single request produced."""
    macro: str
    expression: Optional[GeneratedExpression] = None
    declarations: List[GeneratedDeclaration] = field(default_factory=list)
    diagnostics: List[MacroDiagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)

    def declarations_with_role(self, role: DeclarationRole) -> List[GeneratedDeclaration]:
        return [d for d in self.declarations if d.role == role]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'macro': self.macro,
            'expression': self.expression.to_dict() if self.expression else None,
            'declarations': [d.to_dict() for d in self.declarations],
            'diagnostics': [d.to_dict() for d in self.diagnostics],
        }


__all__ = [
    'MacroContractError',
    'DeclarationRole',
    'GeneratedDeclaration',
    'GeneratedExpression',
    'ExpansionRequest',
    'DiagnosticSink',
    'ExpansionResult',
]
