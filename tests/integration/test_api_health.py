"""
API tests for the health endpoint.
"""
from unittest.mock import AsyncMock, patch

import pytest

pytestmark = pytest.mark.integration


@pytest.mark.parametrize("reachable, expected", [(True, "connected"), (False, "unavailable")])
def test_health_reports_database_state(client, reachable, expected):
    with patch(
        "app.api.v1.health_controller.ping_database", AsyncMock(return_value=reachable)
    ):
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": expected}
