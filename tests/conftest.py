"""Fixtures compartilhadas dos testes"""
import os

# Ambiente de teste: sem Redis, sem rate limit, sem log em arquivo
os.environ["CACHE_ENABLED"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "true"
os.environ["DB_CREATE_TABLES"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from league_api.core.database import Database
from league_api.core.security import create_access_token
from league_api.main import create_app

API = "/api/v1"


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'league.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def client(database):
    app = create_app(database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def admin_headers():
    token = create_access_token("user_admin", "admin@liga.test", "admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token("user_comum", "torcedor@liga.test", "user")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_team(client, admin_headers):
    """Cria um time via API e retorna o JSON de resposta"""
    async def _make_team(name: str, city: str = "Jakarta", location: str = "Stadion Utama"):
        response = await client.post(
            f"{API}/teams/admin/",
            json={"name": name, "city": city, "location": location, "logo": f"{name}.png"},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make_team


@pytest.fixture
def make_player(client, admin_headers):
    async def _make_player(team_id: int, name: str, back_number: int, position: str = "Penyerang"):
        response = await client.post(
            f"{API}/players/admin/",
            json={
                "name": name,
                "weight": 70,
                "height": 175,
                "position": position,
                "back_number": back_number,
                "team_id": team_id,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make_player


@pytest.fixture
def make_match(client, admin_headers):
    async def _make_match(home_team_id: int, away_team_id: int, date: str = "2024-01-01",
                          time: str = "19:00"):
        response = await client.post(
            f"{API}/matches/admin/",
            json={
                "date": date,
                "time": time,
                "home_team_id": home_team_id,
                "away_team_id": away_team_id,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make_match
