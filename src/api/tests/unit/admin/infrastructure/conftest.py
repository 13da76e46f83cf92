"""Fixtures for admin repository tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from admin.infrastructure.observability import AdminRepositoryProbe


@pytest.fixture
def mock_session():
    """Async session whose ``add`` stays synchronous like the real one."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def probe():
    return MagicMock(spec=AdminRepositoryProbe)
