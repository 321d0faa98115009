from fastapi import status
from fastapi.testclient import TestClient


class TestHomeAPI:
    """Тесты для главной страницы"""

    def test_index_unauthenticated(self, client: TestClient):
        """Главная страница доступна без токена"""
        response = client.get("/")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Hello World!"}

    def test_docs_available(self, client: TestClient):
        response = client.get("/api/docs")
        assert response.status_code == status.HTTP_200_OK


class TestApplicationLifecycle:
    """Подключение к базе открывается при старте и закрывается при остановке"""

    def test_startup_and_shutdown_hooks(self, app, monkeypatch):
        import eventdesk.api as api_module

        calls = []
        monkeypatch.setattr(api_module, "init_db", lambda: calls.append("init_db"))
        monkeypatch.setattr(api_module, "close_db", lambda: calls.append("close_db"))

        with TestClient(app) as client:
            assert calls == ["init_db"]
            response = client.get("/")
            assert response.status_code == status.HTTP_200_OK

        assert calls == ["init_db", "close_db"]
