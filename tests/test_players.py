"""Testes dos endpoints de jogadores"""
import pytest

API = "/api/v1"


class TestPlayers:
    """Testes de CRUD de jogadores"""

    @pytest.mark.asyncio
    async def test_create_normalizes_position(self, client, make_team, admin_headers):
        team = await make_team("Persija Jakarta")
        response = await client.post(
            f"{API}/players/admin/",
            json={"name": "Andritany", "position": "PENJAGA gawang", "back_number": 1, "team_id": team["id"]},
            headers=admin_headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["position"] == "Penjaga Gawang"
        assert body["team_name"] == "Persija Jakarta"

    @pytest.mark.asyncio
    async def test_invalid_position(self, client, make_team, admin_headers):
        team = await make_team("Persija Jakarta")
        response = await client.post(
            f"{API}/players/admin/",
            json={"name": "Bambang", "position": "striker", "back_number": 9, "team_id": team["id"]},
            headers=admin_headers,
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_team(self, client, admin_headers):
        response = await client.post(
            f"{API}/players/admin/",
            json={"name": "Bambang", "position": "Penyerang", "back_number": 9, "team_id": 999},
            headers=admin_headers,
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate_back_number_same_team(self, client, make_team, make_player, admin_headers):
        persija = await make_team("Persija Jakarta")
        persib = await make_team("Persib Bandung")
        await make_player(persija["id"], "Bambang", 10)

        response = await client.post(
            f"{API}/players/admin/",
            json={"name": "Rizky", "position": "Gelandang", "back_number": 10, "team_id": persija["id"]},
            headers=admin_headers,
        )
        assert response.status_code == 409

        # mesmo número em outro time
        await make_player(persib["id"], "Rizky", 10)

    @pytest.mark.asyncio
    async def test_back_number_reusable_after_delete(self, client, make_team, make_player, admin_headers):
        team = await make_team("Persija Jakarta")
        player = await make_player(team["id"], "Bambang", 10)
        response = await client.delete(f"{API}/players/admin/{player['id']}", headers=admin_headers)
        assert response.status_code == 200

        await make_player(team["id"], "Rizky", 10)

    @pytest.mark.asyncio
    async def test_update_back_number_conflict(self, client, make_team, make_player, admin_headers):
        team = await make_team("Persija Jakarta")
        await make_player(team["id"], "Bambang", 10)
        rizky = await make_player(team["id"], "Rizky", 8)

        response = await client.put(
            f"{API}/players/admin/{rizky['id']}",
            json={"back_number": 10},
            headers=admin_headers,
        )
        assert response.status_code == 409

        response = await client.put(
            f"{API}/players/admin/{rizky['id']}",
            json={"back_number": 8, "position": "bertahan"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["position"] == "Bertahan"
        assert body["name"] == "Rizky"

    @pytest.mark.asyncio
    async def test_transfer_checks_target_team(self, client, make_team, make_player, admin_headers):
        persija = await make_team("Persija Jakarta")
        persib = await make_team("Persib Bandung")
        await make_player(persib["id"], "Febri", 7)
        bambang = await make_player(persija["id"], "Bambang", 7)

        response = await client.put(
            f"{API}/players/admin/{bambang['id']}",
            json={"team_id": persib["id"]},
            headers=admin_headers,
        )
        assert response.status_code == 409

        response = await client.put(
            f"{API}/players/admin/{bambang['id']}",
            json={"team_id": persib["id"], "back_number": 0},
            headers=admin_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["back_number"] == 0
        assert body["team_name"] == "Persib Bandung"

    @pytest.mark.asyncio
    async def test_list_filters(self, client, make_team, make_player, admin_headers, user_headers):
        persija = await make_team("Persija Jakarta")
        persib = await make_team("Persib Bandung")
        await make_player(persija["id"], "Bambang", 10, position="Penyerang")
        await make_player(persija["id"], "Andritany", 1, position="Penjaga Gawang")
        gone = await make_player(persib["id"], "Febri", 7, position="Gelandang")
        await client.delete(f"{API}/players/admin/{gone['id']}", headers=admin_headers)

        body = (await client.get(f"{API}/players/", headers=user_headers)).json()
        assert body["total_records"] == 2

        body = (await client.get(
            f"{API}/players/", params={"position": "penyerang"}, headers=user_headers
        )).json()
        assert [p["name"] for p in body["data"]] == ["Bambang"]

        body = (await client.get(
            f"{API}/players/", params={"status": "inactive"}, headers=user_headers
        )).json()
        assert [p["name"] for p in body["data"]] == ["Febri"]

        body = (await client.get(
            f"{API}/players/", params={"team_name": "jakarta", "limit": 1}, headers=user_headers
        )).json()
        assert body["total_records"] == 2
        assert body["total_pages"] == 2
        assert len(body["data"]) == 1

    @pytest.mark.asyncio
    async def test_list_invalid_status(self, client, user_headers):
        response = await client.get(f"{API}/players/", params={"status": "retired"}, headers=user_headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_missing_player(self, client, user_headers):
        response = await client.get(f"{API}/players/404", headers=user_headers)
        assert response.status_code == 404
