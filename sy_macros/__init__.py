"""
SyMacros - Python macro expansion engine

SyMacros takes the structural view of a Swift type declaration or macro
expression handed over by a host compiler and synthesizes new code for it:
echoed expressions, Info.plist lookups, string constants, protocol
interfaces and ObjectMapper mapping glue. Problems with a macro usage are
reported as diagnostics bound to the usage site.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

__version__ = "0.3.0"
__author__ = "Intel Corporation"
__license__ = "Apache-2.0 OR MIT"

import logging

# Set up default logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def version() -> str:
    """Return the version string."""
    return __version__

def internal_error(message: str, *args) -> None:
    """Log an internal error message."""
    logger = logging.getLogger(__name__)
    if args:
        logger.error(f"Internal Error: {message.format(*args)}")
    else:
        logger.error(f"Internal Error: {message}")

# Export commonly used types and functions
__all__ = [
    "version",
    "internal_error",
    "__version__",
    "__author__",
    "__license__",
]
