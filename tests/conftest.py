"""Shared fixtures for the legal case tool tests."""

from datetime import datetime, timezone

import pytest

from casey_legal_mcp.core.clock import CounterIdGenerator, FixedClock
from casey_legal_mcp.registry import OperationContext, ToolDispatcher
from casey_legal_mcp.registry.operations import create_registry


FIXED_NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def context():
    """Context with a frozen clock and counter ids."""
    return OperationContext(
        case_id="1FDV-23-0001009",
        child_name="Kekoa",
        server_name="casey-legal-mcp-server",
        clock=FixedClock(FIXED_NOW),
        ids=CounterIdGenerator(),
    )


@pytest.fixture
def registry(context):
    return create_registry(context)


@pytest.fixture
def dispatcher(registry, context):
    return ToolDispatcher(registry, context)
