from fastapi import APIRouter, Depends

from eventdesk.auth.authenticate import sign_in
from eventdesk.models import LoginRequest, TokenResponse
from eventdesk.services.crud.user import CredentialStore, get_credential_store

# Создаем экземпляр роутера
auth_route = APIRouter(prefix="/auth")


@auth_route.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, store: CredentialStore = Depends(get_credential_store)) -> TokenResponse:
    """
    Выдает JWT токен по имени пользователя и паролю.

    Args:
        body (LoginRequest): Имя пользователя и пароль
        store (CredentialStore): Хранилище учетных записей

    Returns:
        TokenResponse: Словарь с jwt_token

    Raises:
        HTTPException: 401 если учетные данные неверны
    """
    return sign_in(store, body.username, body.password)
