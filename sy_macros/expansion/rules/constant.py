"""
Freestanding declaration macro: `#Constant("snake_case_name")`.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from ...config import MacroConfig
from ..render import string_literal
from ..types import (
    DeclarationRole,
    DiagnosticSink,
    ExpansionRequest,
    ExpansionResult,
    GeneratedDeclaration,
    MacroContractError,
)
from .base import Macro, MacroKind


def camel_case(name: str) -> str:
    """`app_icon` -> `appIcon`; later words are capitalized, the first lowercased."""
    return "".join(
        word.capitalize() if index > 0 else word.lower()
        for index, word in enumerate(name.split("_"))
    )


class ConstantMacro(Macro):
    """Declare a static string constant named after its own value."""

    def __init__(self):
        super().__init__(
            name="Constant",
            description="Declare a camelCase static constant holding a snake_case string",
            kind=MacroKind.DECLARATION
        )

    def expand(self, request: ExpansionRequest, sink: DiagnosticSink,
               config: MacroConfig) -> ExpansionResult:
        name = request.arguments[0].value.string_value if request.arguments else None
        if name is None or not name.strip():
            raise MacroContractError("compiler bug: invalid arguments")

        text = f"static let {camel_case(name)} = {string_literal(name)}"
        return self._declarations([GeneratedDeclaration(DeclarationRole.FREESTANDING, text)])
