"""
Base class for expansion rules.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from enum import Enum
from typing import List, Optional

from ...config import MacroConfig
from ...syntax import TypeDeclaration
from ..types import (
    DiagnosticSink,
    ExpansionRequest,
    ExpansionResult,
    GeneratedDeclaration,
    GeneratedExpression,
    MacroContractError,
)


class MacroKind(Enum):
    """How a macro is attached at its usage site."""
    EXPRESSION = "expression"
    DECLARATION = "declaration"
    PEER = "peer"
    MEMBER = "member"


class Macro:
    """Base class for macros."""

    def __init__(self, name: str, description: str, kind: MacroKind):
        self.name = name
        self.description = description
        self.kind = kind
        self.enabled = True

    def expand(self, request: ExpansionRequest, sink: DiagnosticSink,
               config: MacroConfig) -> ExpansionResult:
        """
        Expand one usage of this macro.

        Args:
            request: The usage site with its arguments and declaration
            sink: Diagnostic sink scoped to this request
            config: Rendering settings

        Returns:
            The generated expression or declarations; diagnostics are
            attached by the engine afterwards
        """
        raise NotImplementedError("Subclasses must implement expand()")

    def _expression(self, text: str, result_type: Optional[str] = None) -> ExpansionResult:
        return ExpansionResult(macro=self.name, expression=GeneratedExpression(text, result_type))

    def _declarations(self, declarations: List[GeneratedDeclaration]) -> ExpansionResult:
        return ExpansionResult(macro=self.name, declarations=declarations)

    def _empty(self) -> ExpansionResult:
        return ExpansionResult(macro=self.name)

    def _require_declaration(self, request: ExpansionRequest) -> TypeDeclaration:
        if request.declaration is None:
            raise MacroContractError(
                f"compiler bug: attached macro '{self.name}' expanded without a declaration"
            )
        return request.declaration
