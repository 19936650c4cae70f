"""
Diagnostic data structures and LSP conversion for SyMacros.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import Dict, Any
from dataclasses import dataclass
from enum import Enum

from lsprotocol.types import (
    Position as LspPosition,
    Range as LspRange,
    Diagnostic as LspDiagnostic,
    DiagnosticSeverity,
)

from .span import ZeroSpan

DIAGNOSTIC_DOMAIN = "SyMacrosDiagnostic"


class MacroDiagnosticSeverity(Enum):
    """Severity levels for macro diagnostics."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class MessageID:
    """Stable identity of a diagnostic message."""
    domain: str
    id: str

    def __str__(self) -> str:
        return f"{self.domain}.{self.id}"


@dataclass(frozen=True)
class MacroDiagnostic:
    """A diagnostic message bound to a macro usage site."""
    span: ZeroSpan
    message: str
    severity: MacroDiagnosticSeverity
    source: str = "sy-macros"

    @classmethod
    def error(cls, span: ZeroSpan, message: str) -> 'MacroDiagnostic':
        return cls(span=span, message=message, severity=MacroDiagnosticSeverity.ERROR)

    @classmethod
    def warning(cls, span: ZeroSpan, message: str) -> 'MacroDiagnostic':
        return cls(span=span, message=message, severity=MacroDiagnosticSeverity.WARNING)

    @property
    def diagnostic_id(self) -> MessageID:
        """
        Identity derived from severity and message text.

        Two diagnostics with the same severity and message share an id, which
        lets the host deduplicate repeated reports.
        """
        return MessageID(domain=DIAGNOSTIC_DOMAIN, id=f"{self.severity.value}{self.message}")

    @property
    def is_error(self) -> bool:
        return self.severity == MacroDiagnosticSeverity.ERROR

    def format(self) -> str:
        """Format as a compiler-style `file:line:col: severity: message` line."""
        start = self.span.start.to_one_indexed()
        file_part = self.span.file_path or "<unknown>"
        return f"{file_part}:{start.line}:{start.column}: {self.severity.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            'severity': self.severity.value,
            'message': self.message,
            'id': {
                'domain': self.diagnostic_id.domain,
                'id': self.diagnostic_id.id,
            },
            'location': {
                'file': self.span.file_path,
                'line': self.span.start.line,
                'column': self.span.start.column,
            },
        }

    def to_lsp_diagnostic(self) -> LspDiagnostic:
        """Convert to LSP diagnostic."""
        severity_map = {
            MacroDiagnosticSeverity.ERROR: DiagnosticSeverity.Error,
            MacroDiagnosticSeverity.WARNING: DiagnosticSeverity.Warning,
        }

        # LSP positions are zero-indexed like our spans
        lsp_range = LspRange(
            start=LspPosition(line=self.span.start.line, character=self.span.start.column),
            end=LspPosition(line=self.span.end.line, character=self.span.end.column)
        )

        return LspDiagnostic(
            range=lsp_range,
            message=self.message,
            severity=severity_map[self.severity],
            code=self.diagnostic_id.id,
            source=self.source
        )


__all__ = [
    "DIAGNOSTIC_DOMAIN",
    "MacroDiagnosticSeverity",
    "MessageID",
    "MacroDiagnostic",
]
