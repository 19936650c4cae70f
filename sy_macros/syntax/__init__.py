"""
Swift Syntax Structure Module

Read-only structural views of the expressions and type declarations a host
compiler hands to the expansion engine, with loaders for the JSON wire
form and the member classification shared by the rules.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from .expressions import *
from .declarations import *
from .members import *

__all__ = [
    # From expressions
    'ExpressionKind', 'Expression', 'AnnotationArgument', 'find_argument', 'literal_content',

    # From declarations
    'DeclarationKind', 'Visibility', 'Parameter', 'Field', 'Function', 'Member',
    'member_from_dict', 'TypeDeclaration',

    # From members
    'non_private_fields', 'non_private_functions', 'mappable_fields',
]
