from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from sa_holiday_viewer.api.app import create_app
from sa_holiday_viewer.auth.jwt import issue_token, jwt_config_from_settings
from sa_holiday_viewer.settings import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
    )


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings)

    # httpx ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


@pytest.fixture
def internal_headers(settings: Settings) -> dict[str, str]:
    token = issue_token(
        cfg=jwt_config_from_settings(settings),
        subject="test-suite",
        roles=["internal_system"],
    )
    return {"Authorization": f"Bearer {token}"}
