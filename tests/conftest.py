"""
Общие фикстуры тестов
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from common_api.loading import Loading


@pytest.fixture
def fake_client():
    """Клиент без сети: request и download подменены AsyncMock"""
    client = MagicMock()
    client.request = AsyncMock(return_value=None)
    client.download = AsyncMock(return_value=None)
    client.loading = MagicMock(spec=Loading)
    client.set_auth_token = MagicMock()
    client.remove_auth = MagicMock()
    return client
