from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eventdesk.auth.jwt_handler import create_access_token, unauthorized, verify_access_token
from eventdesk.models import TokenData, TokenResponse
from eventdesk.services.crud.user import CredentialStore
from eventdesk.services.logging.logging import get_logger

logger = get_logger(logger_name=__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def sign_in(store: CredentialStore, username: str, password: str) -> TokenResponse:
    """
    Проверяет имя и пароль и выпускает токен.

    Args:
        store: Хранилище учетных записей
        username: Имя пользователя
        password: Пароль в открытом виде

    Returns:
        TokenResponse: Ответ с jwt_token

    Raises:
        HTTPException: 401 если пользователь не найден или пароль не совпал
    """
    user = store.find_by_username(username)
    if user is None or user.password != password:
        logger.warning(f"Неудачная попытка входа для пользователя {username!r}")
        raise unauthorized()

    logger.info(f"Пользователь {username!r} вошел в систему")
    return TokenResponse(jwt_token=create_access_token(user))


async def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenData:
    """
    Защита маршрутов: пропускает запрос только с действительным Bearer токеном.

    Данные токена сохраняются в request.state.user.
    """
    if credentials is None:
        raise unauthorized()
    token_data = verify_access_token(credentials.credentials)
    request.state.user = token_data
    return token_data
