from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from eventdesk.database.config import get_settings
from eventdesk.services.logging.logging import get_logger

logger = get_logger(logger_name=__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite не проверяет внешние ключи без этой прагмы
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Создает движок SQLAlchemy для указанного URL.

    Для SQLite отключается проверка потока и включаются внешние ключи,
    для базы в памяти используется единственное соединение (StaticPool).
    Для остальных СУБД используется пул соединений.

    Args:
        url: URL подключения к базе данных
        echo: Логировать ли SQL запросы

    Returns:
        Engine: Настроенный движок
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        db_engine = create_engine(url, echo=echo, **kwargs)
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
        return db_engine

    return create_engine(url, echo=echo, pool_size=5, max_overflow=10)


settings = get_settings()
engine = create_db_engine(settings.DATABASE_URL_psycopg, echo=settings.DB_ECHO)


def get_session():
    with Session(engine) as session:
        yield session


def init_db() -> None:
    # Импорт регистрирует таблицы в метаданных
    import eventdesk.models  # noqa: F401

    logger.info("Создание таблиц базы данных...")
    SQLModel.metadata.create_all(engine)


def close_db() -> None:
    logger.info("Закрытие соединений с базой данных")
    engine.dispose()
