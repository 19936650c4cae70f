"""
Macro expansion engine for SyMacros.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Dict, Any, Sequence

from .. import internal_error
from ..config import Config
from .types import (
    MacroContractError,
    DeclarationRole,
    GeneratedDeclaration,
    GeneratedExpression,
    ExpansionRequest,
    DiagnosticSink,
    ExpansionResult,
)
from .rules import Macro, MacroKind, get_default_macros

logger = logging.getLogger(__name__)


class MacroEngine:
    """
    Dispatches expansion requests to the macro registered under their name.

    The engine keeps no per-request state: every request gets its own
    diagnostic sink and freshly built output, so requests may be expanded
    concurrently.
    """

    def __init__(self, config: Config):
        self.config = config
        self.macros: Dict[str, Macro] = {}

        # Register default macros
        self._register_default_macros()

        # Apply configuration
        self._apply_config()

    def _register_default_macros(self) -> None:
        """Register default macros."""
        for macro in get_default_macros():
            self.macros[macro.name] = macro

    def _apply_config(self) -> None:
        """Enable/disable macros based on configuration."""
        for macro in self.macros.values():
            macro.enabled = self.config.is_macro_enabled(macro.name)

    def expand(self, request: ExpansionRequest) -> ExpansionResult:
        """
        Expand a single macro usage.

        Args:
            request: The usage site to expand

        Returns:
            Generated code plus the diagnostics reported for the usage site

        Raises:
            MacroContractError: if the request breaks the host's invocation
                contract (unknown macro, missing guaranteed argument)
        """
        macro = self.macros.get(request.macro)
        if macro is None:
            raise MacroContractError(f"no macro named '{request.macro}' is registered")

        sink = DiagnosticSink(request.span)

        if not macro.enabled:
            sink.warning(f"macro '{macro.name}' is disabled")
            return ExpansionResult(macro=macro.name, diagnostics=sink.drain())

        try:
            result = macro.expand(request, sink, self.config.macro_config)
        except MacroContractError:
            raise
        except Exception as e:
            internal_error("expanding {} at {} failed: {}", macro.name, request.span, e)
            sink.error(f"internal error while expanding {macro.name}: {e}")
            result = ExpansionResult(macro=macro.name)

        result.diagnostics = sink.drain()
        logger.debug(
            f"Expanded {macro.name}: {len(result.declarations)} declarations, "
            f"{len(result.diagnostics)} diagnostics"
        )
        return result

    def expand_all(self, requests: Sequence[ExpansionRequest]) -> List[ExpansionResult]:
        """Expand independent requests in parallel; results keep request order."""
        if not requests:
            return []

        with ThreadPoolExecutor(max_workers=self.config.options.max_workers) as executor:
            return list(executor.map(self.expand, requests))

    def get_macro_info(self) -> Dict[str, Dict[str, Any]]:
        """Get information about all macros."""
        macro_info = {}

        for macro in self.macros.values():
            macro_info[macro.name] = {
                'description': macro.description,
                'kind': macro.kind.value,
                'enabled': macro.enabled
            }

        return macro_info


# Export main classes
__all__ = [
    "MacroEngine",
    "Macro",
    "MacroKind",
    "MacroContractError",
    "DeclarationRole",
    "GeneratedDeclaration",
    "GeneratedExpression",
    "ExpansionRequest",
    "DiagnosticSink",
    "ExpansionResult",
]
