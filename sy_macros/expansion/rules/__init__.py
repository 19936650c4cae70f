"""
Expansion rules for SyMacros.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import List

from .base import Macro, MacroKind
from .expressions import StringifyMacro, MainBundleMacro
from .constant import ConstantMacro, camel_case
from .interface import InterfaceGenMacro, render_parameter, render_requirement
from .mappable import MappableMacro, accepts_decoder


# Registry of all available macros
ALL_MACROS = [
    StringifyMacro,
    MainBundleMacro,
    ConstantMacro,
    InterfaceGenMacro,
    MappableMacro,
]


def get_default_macros() -> List[Macro]:
    """Get a fresh instance of every registered macro."""
    return [macro_class() for macro_class in ALL_MACROS]


__all__ = [
    'Macro',
    'MacroKind',
    'StringifyMacro',
    'MainBundleMacro',
    'ConstantMacro',
    'InterfaceGenMacro',
    'MappableMacro',
    'camel_case',
    'render_parameter',
    'render_requirement',
    'accepts_decoder',
    'ALL_MACROS',
    'get_default_macros',
]
