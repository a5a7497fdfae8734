"""pytest plugin: a fresh fake Smith context per test.

Registered through the ``pytest11`` entry point, so installing the package
is enough to get the fixtures.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fake_smith import support
from fake_smith.agent import Agent
from fake_smith.config.context import SmithContext


@pytest.fixture
def smith_context() -> Iterator[SmithContext]:
    """Install a clean context for the test and reset it afterwards."""
    context = support.reset()
    yield context
    support.reset()


@pytest.fixture
def smith_agent(smith_context: SmithContext) -> Agent:
    return Agent(context=smith_context)
