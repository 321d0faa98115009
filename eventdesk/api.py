from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, NoResultFound
import uvicorn

from eventdesk.database.config import get_settings
from eventdesk.database.database import close_db, init_db
from eventdesk.services.logging.logging import get_logger

from eventdesk.routes.home import home_route
from eventdesk.routes.auth import auth_route
from eventdesk.routes.events import events_route
from eventdesk.routes.artists import artists_route
from eventdesk.routes.resources import resources_route

logger = get_logger(logger_name=__name__)
settings = get_settings()


async def not_found_handler(request: Request, exc: NoResultFound) -> JSONResponse:
    logger.warning(f"Запись не найдена: {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Record not found"})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"Нарушение ограничения базы данных: {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": "Constraint violation"})


def create_application() -> FastAPI:
    """
    Создание и конфигурация FastAPI приложения.

    Возвращает:
        FastAPI: Настроенный экземпляр приложения
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.API_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc"
    )

    # Настройка CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Ошибки хранилища отдаются как есть, без доменных сообщений
    app.add_exception_handler(NoResultFound, not_found_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)

    # Регистрация маршрутов
    app.include_router(home_route, tags=['Home'])
    app.include_router(auth_route, tags=['Auth'])
    app.include_router(events_route, tags=['Events'])
    app.include_router(artists_route, tags=['Artists'])
    app.include_router(resources_route, tags=['Resources'])

    @app.on_event("startup")
    def on_startup():
        try:
            logger.info("Инициализация базы данных...")
            init_db()
            logger.info("Запуск приложения успешно завершен")
        except Exception as e:
            logger.error(f"Ошибка при запуске: {str(e)}")
            raise

    @app.on_event("shutdown")
    def on_shutdown():
        close_db()

    return app


app = create_application()


if __name__ == '__main__':
    uvicorn.run('eventdesk.api:app', host='0.0.0.0', port=8080, reload=True, log_level="info")
