"""
Member classification shared by the expansion rules.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import Iterable, List

from .declarations import Field, Function, Member


def non_private_fields(members: Iterable[Member]) -> List[Field]:
    """Fields not declared private, in declaration order."""
    return [
        member for member in members
        if isinstance(member, Field) and not member.visibility.is_most_restrictive
    ]


def non_private_functions(members: Iterable[Member]) -> List[Function]:
    """Functions not declared private, in declaration order."""
    return [
        member for member in members
        if isinstance(member, Function) and not member.visibility.is_most_restrictive
    ]


def mappable_fields(members: Iterable[Member]) -> List[Field]:
    """Non-private stored instance fields; the only ones a decoder can assign."""
    return [
        field for field in non_private_fields(members)
        if field.is_stored and not field.is_static
    ]


__all__ = [
    'non_private_fields',
    'non_private_functions',
    'mappable_fields',
]
