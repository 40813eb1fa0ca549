# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

# Ascending precedence, covering every pre-release rule
PRECEDENCE_CHAIN = [
    "1.0.0-0.3.7",
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0-x.7.z.92",
    "1.0.0",
    "2.0.0",
    "11.11.11",
    "62.99.57962",
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def precedence_chain() -> list[str]:
    """Version strings in strictly ascending precedence."""
    return list(PRECEDENCE_CHAIN)
