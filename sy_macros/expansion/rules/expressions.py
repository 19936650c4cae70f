"""
Freestanding expression macros: `#stringify` and `#mainBundle`.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging

from ...config import MacroConfig
from ..render import string_literal
from ..types import DiagnosticSink, ExpansionRequest, ExpansionResult, MacroContractError
from .base import Macro, MacroKind

logger = logging.getLogger(__name__)


class StringifyMacro(Macro):
    """
    Pair an expression with its own source text.

        #stringify(x + y)

    expands to

        (x + y, "x + y")
    """

    def __init__(self):
        super().__init__(
            name="stringify",
            description="Produce a tuple of a value and the source code that produced it",
            kind=MacroKind.EXPRESSION
        )

    def expand(self, request: ExpansionRequest, sink: DiagnosticSink,
               config: MacroConfig) -> ExpansionResult:
        if not request.arguments:
            raise MacroContractError("compiler bug: the macro does not have any arguments")

        source = request.arguments[0].value.text
        return self._expression(f"({source}, {string_literal(source)})")


class MainBundleMacro(Macro):
    """Look up an Info.plist key and cast it to the requested type."""

    def __init__(self):
        super().__init__(
            name="mainBundle",
            description="Read a value from the main bundle's Info.plist",
            kind=MacroKind.EXPRESSION
        )

    def expand(self, request: ExpansionRequest, sink: DiagnosticSink,
               config: MacroConfig) -> ExpansionResult:
        if not request.arguments:
            sink.error("missing required key argument")
            return self._expression("")

        key = request.arguments[0].value.trimmed_text()
        type_name = config.default_resource_type

        if len(request.arguments) > 1:
            type_argument = request.arguments[1].value
            if type_argument.metatype_base:
                type_name = type_argument.metatype_base
            else:
                sink.warning(
                    f"type argument '{type_argument.trimmed_text()}' is not a metatype "
                    f"reference such as Int.self; using {type_name}"
                )

        lookup = config.resource_lookup.replace("{key}", key)
        logger.debug(f"Resource lookup for {key} typed as {type_name}?")
        return self._expression(f"{lookup} as? {type_name}", f"{type_name}?")
