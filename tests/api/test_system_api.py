"""HTTP tests for the system health endpoint."""

import pytest


class _Session:
    def __init__(self, fail: bool) -> None:
        self.fail = fail

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def execute(self, statement):
        if self.fail:
            raise ConnectionError("database unreachable")


@pytest.mark.asyncio
async def test_health_connected(app, client):
    app.state.session_factory = lambda: _Session(fail=False)

    response = await client.get("/api/v1/system/health")

    assert response.status_code == 200
    assert response.json() == {
        "data": {"status": "healthy", "database": "connected"},
        "metadata": {},
    }


@pytest.mark.asyncio
async def test_health_degraded(app, client):
    app.state.session_factory = lambda: _Session(fail=True)

    response = await client.get("/api/v1/system/health")

    assert response.status_code == 200
    assert response.json()["data"] == {"status": "degraded", "database": "disconnected"}
