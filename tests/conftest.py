"""
Shared test fixtures for the MCP proof-of-concept tests.

Provides a fixed clock, registries built on it, and an ASGI client.
"""

from __future__ import annotations

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from mcp_poc.demo import DemoTools
from mcp_poc.registry import ToolRegistry, create_demo_registry
from mcp_poc.server import app, lifespan


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


FIXED_MOMENT = datetime(2024, 1, 15, 14, 30, 0)
FIXED_MOMENT_TEXT = "Monday, January 15, 2024 at 2:30:00 PM"


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def fixed_moment_text() -> str:
    """Rendering of FIXED_MOMENT."""
    return FIXED_MOMENT_TEXT


@pytest.fixture
def demo_tools() -> DemoTools:
    """Operation set whose clock is frozen at FIXED_MOMENT."""
    return DemoTools(clock=lambda: FIXED_MOMENT)


@pytest.fixture
def registry(demo_tools: DemoTools) -> ToolRegistry:
    """Demo registry using the frozen clock."""
    return create_demo_registry(demo_tools)


@pytest.fixture
async def client():
    """Test client for the FastAPI app with proper lifespan."""
    async with lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
