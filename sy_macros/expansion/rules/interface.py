"""
Peer macro `@InterfaceGen`: derive a protocol from a class's non-private surface.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
from typing import List

from ...config import MacroConfig
from ...syntax import (
    DeclarationKind,
    Function,
    Parameter,
    TypeDeclaration,
    non_private_fields,
    non_private_functions,
)
from ..types import (
    DeclarationRole,
    DiagnosticSink,
    ExpansionRequest,
    ExpansionResult,
    GeneratedDeclaration,
    MacroContractError,
)
from .base import Macro, MacroKind

logger = logging.getLogger(__name__)

# Modifiers that keep their meaning on a protocol requirement
REQUIREMENT_MODIFIERS = ("static", "mutating", "nonmutating")


def render_parameter(parameter: Parameter) -> str:
    """Render a parameter without its default value."""
    if parameter.label is not None and parameter.label != parameter.name:
        names = f"{parameter.label} {parameter.name}"
    else:
        names = parameter.name
    inout = "inout " if parameter.is_mutable_reference else ""
    return f"{names}: {inout}{parameter.type_annotation.strip()}"


def render_requirement(function: Function) -> str:
    """Render a function as a bodiless protocol requirement."""
    modifiers: List[str] = []
    for modifier in function.modifiers:
        if modifier == "class":
            modifier = "static"
        if modifier in REQUIREMENT_MODIFIERS and modifier not in modifiers:
            modifiers.append(modifier)

    parameters = ", ".join(render_parameter(p) for p in function.parameters)
    signature = f"func {function.name}{function.generic_clause or ''}({parameters})"

    if modifiers:
        signature = " ".join(modifiers) + " " + signature
    if function.effects:
        signature += " " + " ".join(function.effects)
    if function.return_type:
        signature += f" -> {function.return_type.strip()}"
    return signature


class InterfaceGenMacro(Macro):
    """Generate `<Name>Interface` exposing a class's non-private members."""

    def __init__(self):
        super().__init__(
            name="InterfaceGen",
            description="Generate a protocol from the non-private members of a class",
            kind=MacroKind.PEER
        )

    def expand(self, request: ExpansionRequest, sink: DiagnosticSink,
               config: MacroConfig) -> ExpansionResult:
        declaration = self._require_declaration(request)

        if declaration.kind is DeclarationKind.REFERENCE_TYPE:
            return self._declarations([self._extract(declaration, sink, config)])
        if declaration.kind in (DeclarationKind.VALUE_TYPE,
                                DeclarationKind.INTERFACE,
                                DeclarationKind.ENUMERATION):
            sink.error("unsupported declaration kind for interface extraction")
            return self._empty()
        raise MacroContractError(f"unhandled declaration kind: {declaration.kind}")

    def _extract(self, declaration: TypeDeclaration, sink: DiagnosticSink,
                 config: MacroConfig) -> GeneratedDeclaration:
        interface_name = f"{declaration.name}{config.interface_suffix}"

        properties = []
        for field in non_private_fields(declaration.members):
            if not field.type_annotation:
                sink.warning(
                    f"property '{field.name}' has no type annotation and was left out of {interface_name}"
                )
                continue
            static = "static " if field.is_static else ""
            properties.append(f"{static}var {field.name}: {field.type_annotation.strip()} {{ get }}")

        requirements = [
            render_requirement(f) for f in non_private_functions(declaration.members)
            if not f.is_initializer
        ]

        sections = [
            "\n".join(f"{config.indent}{line}" for line in section)
            for section in (properties, requirements) if section
        ]
        header = f"public protocol {interface_name}: {config.interface_base}"
        text = f"{header} {{\n" + "\n\n".join(sections) + "\n}" if sections else f"{header} {{}}"

        logger.debug(
            f"Generated {interface_name} with {len(properties)} properties "
            f"and {len(requirements)} methods"
        )
        return GeneratedDeclaration(DeclarationRole.PEER, text)
