"""
Member and extension macro `@Mappable(isSubclass:)`: ObjectMapper glue.

For every mappable field a bind statement `field <- map["field"]` is
emitted into a `mapping(map:)` function, next to a failable `init?(map:)`
and an `extension Type: Mappable {}` conformance. Subclasses delegate to
their superclass and leave the conformance to the root of the hierarchy.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
from typing import List, Sequence

from ...config import MacroConfig
from ...syntax import (
    AnnotationArgument,
    DeclarationKind,
    Function,
    TypeDeclaration,
    find_argument,
    mappable_fields,
)
from ..render import render_block, string_literal
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


def _normalize_type(text: str) -> str:
    return "".join(text.split())


def accepts_decoder(function: Function, config: MacroConfig) -> bool:
    """
    Check a function's shape against `(map: Map)`.

    Matches a single non-inout parameter labelled with the decoder parameter
    name whose type is one of the accepted decoder spellings. Whitespace and
    modifiers play no part in the match.
    """
    if len(function.parameters) != 1:
        return False

    parameter = function.parameters[0]
    accepted = {_normalize_type(t) for t in config.accepted_decoder_types}
    accepted.add(_normalize_type(config.decoder_type))
    return (
        parameter.argument_label == config.decoder_parameter
        and not parameter.is_mutable_reference
        and _normalize_type(parameter.type_annotation) in accepted
    )


def has_decoding_initializer(declaration: TypeDeclaration, config: MacroConfig) -> bool:
    return any(
        f.is_initializer and f.is_failable and accepts_decoder(f, config)
        for f in declaration.functions
    )


def has_mapping_function(declaration: TypeDeclaration, config: MacroConfig) -> bool:
    return any(
        f.name == config.mapping_function and accepts_decoder(f, config)
        for f in declaration.functions
    )


def is_subclass_requested(arguments: Sequence[AnnotationArgument]) -> bool:
    argument = find_argument(arguments, "isSubclass")
    return argument is not None and argument.value.is_true_literal


class MappableMacro(Macro):
    """Synthesize ObjectMapper `Mappable` conformance for a struct or class."""

    def __init__(self):
        super().__init__(
            name="Mappable",
            description="Generate init?(map:), mapping(map:) and Mappable conformance",
            kind=MacroKind.MEMBER
        )

    def expand(self, request: ExpansionRequest, sink: DiagnosticSink,
               config: MacroConfig) -> ExpansionResult:
        declaration = self._require_declaration(request)
        is_subclass = is_subclass_requested(request.arguments)

        if declaration.kind is DeclarationKind.VALUE_TYPE:
            if is_subclass:
                sink.warning("value types do not support subclass composition")
            return self._declarations(self._synthesize(
                declaration, config,
                initializer_prefix="",
                mapping_prefix="mutating ",
                derived=False
            ))

        if declaration.kind is DeclarationKind.REFERENCE_TYPE:
            if is_subclass and not declaration.inherits:
                sink.error("the inherited class was not found")
                return self._empty()
            return self._declarations(self._synthesize(
                declaration, config,
                initializer_prefix="required ",
                mapping_prefix="override " if is_subclass else "",
                derived=is_subclass
            ))

        if declaration.kind in (DeclarationKind.INTERFACE, DeclarationKind.ENUMERATION):
            sink.error("unsupported declaration kind")
            return self._empty()

        raise MacroContractError(f"unhandled declaration kind: {declaration.kind}")

    def _synthesize(self, declaration: TypeDeclaration, config: MacroConfig,
                    initializer_prefix: str, mapping_prefix: str,
                    derived: bool) -> List[GeneratedDeclaration]:
        decoder = config.decoder_parameter
        parameter = f"{decoder}: {config.decoder_type}"
        declarations = []

        if has_decoding_initializer(declaration, config):
            logger.debug(f"{declaration.name} already declares init?({decoder}:)")
        else:
            statements = [f"super.init({decoder}: {decoder})"] if derived else []
            declarations.append(GeneratedDeclaration(
                DeclarationRole.MEMBER,
                render_block(f"{initializer_prefix}init?({parameter})", statements, config.indent)
            ))

        if has_mapping_function(declaration, config):
            logger.debug(f"{declaration.name} already declares {config.mapping_function}({decoder}:)")
        else:
            statements = [f"super.{config.mapping_function}({decoder}: {decoder})"] if derived else []
            statements.extend(
                f"{field.name} {config.bind_operator} {decoder}[{string_literal(field.name)}]"
                for field in mappable_fields(declaration.members)
            )
            declarations.append(GeneratedDeclaration(
                DeclarationRole.MEMBER,
                render_block(
                    f"{mapping_prefix}func {config.mapping_function}({parameter})",
                    statements,
                    config.indent
                )
            ))

        if derived:
            logger.debug(f"{declaration.name} inherits {config.conformance_name} conformance")
        elif declaration.inherits_from(config.conformance_name):
            logger.debug(f"{declaration.name} already conforms to {config.conformance_name}")
        else:
            declarations.append(GeneratedDeclaration(
                DeclarationRole.EXTENSION,
                f"extension {declaration.name}: {config.conformance_name} {{}}"
            ))

        return declarations
