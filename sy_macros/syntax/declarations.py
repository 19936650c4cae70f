"""
Type Declaration Structure

Read-only representation of a type declaration as supplied by the host's
parser: its kind, inheritance list and ordered members. Nothing in the
expansion engine mutates these objects; every container is a tuple.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import List, Optional, Dict, Any, Tuple, Union
from dataclasses import dataclass
from enum import Enum


class DeclarationKind(Enum):
    """Kinds of type declarations."""
    VALUE_TYPE = "struct"
    REFERENCE_TYPE = "class"
    INTERFACE = "protocol"
    ENUMERATION = "enum"


class Visibility(Enum):
    """Access levels, from most to least restrictive."""
    PRIVATE = "private"
    FILEPRIVATE = "fileprivate"
    INTERNAL = "internal"
    PUBLIC = "public"
    OPEN = "open"

    @property
    def is_most_restrictive(self) -> bool:
        return self == Visibility.PRIVATE


def _visibility_from(data: Dict[str, Any]) -> Visibility:
    try:
        return Visibility(data.get('visibility', 'internal'))
    except ValueError:
        raise ValueError(f"Unknown visibility: {data.get('visibility')}")


def _require(data: Dict[str, Any], key: str, what: str) -> Any:
    if key not in data:
        raise ValueError(f"{what} is missing '{key}': {data}")
    return data[key]


@dataclass(frozen=True)
class Parameter:
    """A function parameter."""
    name: str
    type_annotation: str
    label: Optional[str] = None
    default_value: Optional[str] = None
    is_mutable_reference: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Parameter':
        """Create Parameter from dictionary."""
        return cls(
            name=_require(data, 'name', "Parameter"),
            type_annotation=_require(data, 'type', "Parameter"),
            label=data.get('label'),
            default_value=data.get('default'),
            is_mutable_reference=bool(data.get('inout', False))
        )

    @property
    def has_default_value(self) -> bool:
        return self.default_value is not None

    @property
    def argument_label(self) -> str:
        """Label used at call sites; a lone name doubles as the label."""
        return self.label if self.label is not None else self.name


@dataclass(frozen=True)
class Field:
    """A property declared in a type body."""
    name: str
    type_annotation: Optional[str] = None
    visibility: Visibility = Visibility.INTERNAL
    is_static: bool = False
    is_computed: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Field':
        """Create Field from dictionary."""
        return cls(
            name=_require(data, 'name', "Field"),
            type_annotation=data.get('type'),
            visibility=_visibility_from(data),
            is_static=bool(data.get('static', False)),
            is_computed=bool(data.get('computed', False))
        )

    @property
    def is_stored(self) -> bool:
        return not self.is_computed


@dataclass(frozen=True)
class Function:
    """A function or initializer declared in a type body."""
    name: str
    parameters: Tuple[Parameter, ...] = ()
    visibility: Visibility = Visibility.INTERNAL
    has_body: bool = True
    return_type: Optional[str] = None
    modifiers: Tuple[str, ...] = ()
    effects: Tuple[str, ...] = ()
    generic_clause: Optional[str] = None
    is_failable: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Function':
        """Create Function from dictionary."""
        return cls(
            name=_require(data, 'name', "Function"),
            parameters=tuple(Parameter.from_dict(p) for p in data.get('parameters', [])),
            visibility=_visibility_from(data),
            has_body=bool(data.get('has_body', True)),
            return_type=data.get('return_type'),
            modifiers=tuple(data.get('modifiers', [])),
            effects=tuple(data.get('effects', [])),
            generic_clause=data.get('generic_clause'),
            is_failable=bool(data.get('failable', False))
        )

    @property
    def is_initializer(self) -> bool:
        return self.name == "init"


Member = Union[Field, Function]


def member_from_dict(data: Dict[str, Any]) -> Member:
    """Create a Field or Function from its tagged dictionary form."""
    member_type = data.get('member')
    if member_type == 'field':
        return Field.from_dict(data)
    if member_type == 'function':
        return Function.from_dict(data)
    raise ValueError(f"Unknown member type: {member_type}")


@dataclass(frozen=True)
class TypeDeclaration:
    """A type declaration with its ordered member list."""
    kind: DeclarationKind
    name: str
    inherits: Tuple[str, ...] = ()
    members: Tuple[Member, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TypeDeclaration':
        """Create TypeDeclaration from dictionary."""
        try:
            kind = DeclarationKind(_require(data, 'kind', "Declaration"))
        except ValueError:
            raise ValueError(f"Unknown declaration kind: {data.get('kind')}")

        return cls(
            kind=kind,
            name=_require(data, 'name', "Declaration"),
            inherits=tuple(data.get('inherits', [])),
            members=tuple(member_from_dict(m) for m in data.get('members', []))
        )

    @property
    def fields(self) -> List[Field]:
        return [m for m in self.members if isinstance(m, Field)]

    @property
    def functions(self) -> List[Function]:
        return [m for m in self.members if isinstance(m, Function)]

    def inherits_from(self, name: str) -> bool:
        """Check the inheritance clause for a type name, qualified or not."""
        return any(entry == name or entry.endswith(f".{name}") for entry in self.inherits)


__all__ = [
    'DeclarationKind',
    'Visibility',
    'Parameter',
    'Field',
    'Function',
    'Member',
    'member_from_dict',
    'TypeDeclaration',
]
