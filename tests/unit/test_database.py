"""Unit tests for engine construction and the request session dependency."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from restcraft.api.deps import get_db
from restcraft.config import Settings
from restcraft.database import engine_options, init_db


class TestEngineOptions:
    def test_server_database_gets_pool_sizing(self):
        options = engine_options(Settings(db_pool_size=5, db_max_overflow=2))

        assert options["pool_size"] == 5
        assert options["max_overflow"] == 2
        assert options["pool_pre_ping"] is True

    def test_sqlite_skips_pool_sizing(self):
        options = engine_options(Settings(database_url="sqlite+aiosqlite:///:memory:"))

        assert "pool_size" not in options
        assert "max_overflow" not in options

    @pytest.mark.asyncio
    async def test_init_db_passes_settings(self):
        settings = Settings(sql_echo=True)
        with patch("restcraft.database.create_async_engine") as create_engine:
            engine = await init_db(settings)

        create_engine.assert_called_once()
        assert create_engine.call_args.args[0] == settings.database_url
        assert create_engine.call_args.kwargs["echo"] is True
        assert engine is create_engine.return_value


class _SessionFactory:
    def __init__(self, session):
        self.session = session

    def __call__(self):
        return self

    async def __aenter__(self):
        return self.session

    async def __aexit__(self, *exc_info):
        return False


def _request(session):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(session_factory=_SessionFactory(session))))


class TestGetDb:
    @pytest.mark.asyncio
    async def test_yields_session(self):
        session = MagicMock(rollback=AsyncMock())
        dependency = get_db(_request(session))

        assert await dependency.__anext__() is session
        await dependency.aclose()
        session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rolls_back_when_handler_fails(self):
        session = MagicMock(rollback=AsyncMock())
        dependency = get_db(_request(session))
        await dependency.__anext__()

        with pytest.raises(RuntimeError):
            await dependency.athrow(RuntimeError("handler failed"))

        session.rollback.assert_awaited_once()
