"""API test fixtures: FastAPI app behind an httpx client.

Invariants:
    - Settings cache cleared around each test so monkeypatched env vars apply
"""

import pytest
from httpx import ASGITransport, AsyncClient

from mapcatalog.config import get_settings
from mapcatalog.main import app


@pytest.fixture
async def client():
    get_settings.cache_clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    get_settings.cache_clear()


@pytest.fixture
async def unraising_client():
    """Client that returns the 500 response instead of re-raising server errors."""
    get_settings.cache_clear()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    get_settings.cache_clear()
