from fastapi import APIRouter

home_route = APIRouter()


@home_route.get("/")
async def index() -> dict:
    """Проверка, что сервис запущен"""
    return {"message": "Hello World!"}
