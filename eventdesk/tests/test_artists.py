from fastapi import status
from fastapi.testclient import TestClient


class TestArtistsAPI:
    """Тесты для API артистов"""

    def test_create_artist(self, client: TestClient, auth_headers, test_event):
        payload = {
            "name": "Иван",
            "surname": "Петров",
            "genre": "Рок",
            "contact_info": "+7 900 000-00-00",
            "available_date": "2024-06-01",
            "event_id": test_event.id
        }
        response = client.post("/artists", json=payload, headers=auth_headers)
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert isinstance(data["id"], int)
        for key, value in payload.items():
            assert data[key] == value

    def test_create_artist_only_required(self, client: TestClient, auth_headers, test_event):
        response = client.post(
            "/artists",
            json={"name": "Соло", "event_id": test_event.id},
            headers=auth_headers
        )
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["surname"] is None
        assert data["genre"] is None

    def test_create_artist_without_event(self, client: TestClient, auth_headers):
        response = client.post("/artists", json={"name": "Без мероприятия"}, headers=auth_headers)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_create_artist_for_missing_event(self, client: TestClient, auth_headers):
        """Внешний ключ на несуществующее мероприятие отклоняется хранилищем"""
        response = client.post("/artists", json={"name": "Потерянный", "event_id": 9999}, headers=auth_headers)
        assert response.status_code == status.HTTP_409_CONFLICT

        response = client.get("/artists", headers=auth_headers)
        assert response.json() == []

    def test_list_artists_with_event(self, client: TestClient, auth_headers, test_event, test_artist):
        response = client.get("/artists", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        artists = response.json()
        assert len(artists) == 1
        assert artists[0]["id"] == test_artist.id
        assert artists[0]["event"]["id"] == test_event.id
        assert artists[0]["event"]["name"] == "Тестовое мероприятие"

    def test_get_artist(self, client: TestClient, auth_headers, test_artist):
        response = client.get(f"/artists/{test_artist.id}", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Тестовый"
        assert data["event"]["id"] == test_artist.event_id

    def test_get_artist_not_found(self, client: TestClient, auth_headers):
        response = client.get("/artists/9999", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None

    def test_update_artist_partial(self, client: TestClient, auth_headers, test_artist):
        response = client.put(f"/artists/{test_artist.id}", json={"genre": "Блюз"}, headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["genre"] == "Блюз"
        assert data["name"] == "Тестовый"
        assert data["surname"] == "Артист"
        assert data["contact_info"] == "artist@example.com"

    def test_update_artist_null_required_field(self, client: TestClient, auth_headers, test_artist):
        for field in ("name", "event_id"):
            response = client.put(f"/artists/{test_artist.id}", json={field: None}, headers=auth_headers)
            assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

        response = client.get(f"/artists/{test_artist.id}", headers=auth_headers)
        assert response.json()["name"] == "Тестовый"

    def test_update_artist_not_found(self, client: TestClient, auth_headers):
        response = client.put("/artists/9999", json={"genre": "Блюз"}, headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_artist(self, client: TestClient, auth_headers, test_event, test_artist):
        artist_id = test_artist.id
        event_id = test_event.id
        response = client.delete(f"/artists/{artist_id}", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == artist_id

        assert client.get(f"/artists/{artist_id}", headers=auth_headers).json() is None
        assert client.get(f"/events/{event_id}", headers=auth_headers).json()["artists"] == []

    def test_delete_artist_not_found(self, client: TestClient, auth_headers):
        response = client.delete("/artists/9999", headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND
