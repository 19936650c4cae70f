"""
Shared fixtures for SyMacros tests.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import pytest

from sy_macros.config import Config
from sy_macros.expansion import MacroEngine


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def engine(config):
    return MacroEngine(config)
