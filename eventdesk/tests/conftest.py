import pytest
import os
from datetime import datetime, timezone

# Устанавливаем переменные окружения для тестов ДО импорта модулей приложения
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test_secret_key_for_testing_only"
os.environ["EVENT_DELETE_POLICY"] = "restrict"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "60"

from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session

from eventdesk.database.database import engine
import eventdesk.models  # noqa: F401


@pytest.fixture(autouse=True)
def reset_database():
    """Чистая схема в памяти для каждого теста"""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture(scope="session")
def app():
    """Создание тестового приложения"""
    from eventdesk.api import create_application
    return create_application()


@pytest.fixture
def client(app):
    """Создание тестового клиента"""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db_session():
    """Создание сессии базы данных для каждого теста"""
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_user():
    from eventdesk.services.crud.user import DEFAULT_USERS
    return DEFAULT_USERS[0]


@pytest.fixture
def auth_headers(test_user):
    """Заголовки авторизации для тестового пользователя"""
    from eventdesk.auth.jwt_handler import create_access_token
    token = create_access_token(test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_event(db_session):
    """Создание тестового мероприятия"""
    from eventdesk.models import Event

    event = Event(
        name="Тестовое мероприятие",
        location="Главная сцена",
        forecast="Солнечно",
        start_date=datetime(2024, 6, 1, 18, 0, tzinfo=timezone.utc),
        end_date=datetime(2024, 6, 1, 23, 0, tzinfo=timezone.utc),
        budget=15000.5
    )
    db_session.add(event)
    db_session.commit()
    db_session.refresh(event)
    return event


@pytest.fixture
def test_artist(db_session, test_event):
    """Создание тестового артиста"""
    from eventdesk.models import Artist

    artist = Artist(
        name="Тестовый",
        surname="Артист",
        genre="Джаз",
        contact_info="artist@example.com",
        available_date="2024-06-01",
        event_id=test_event.id
    )
    db_session.add(artist)
    db_session.commit()
    db_session.refresh(artist)
    return artist


@pytest.fixture
def test_resource(db_session, test_event):
    """Создание тестового ресурса"""
    from eventdesk.models import Resource

    resource = Resource(
        name="Колонки",
        rented=True,
        quantity=4,
        event_id=test_event.id
    )
    db_session.add(resource)
    db_session.commit()
    db_session.refresh(resource)
    return resource
