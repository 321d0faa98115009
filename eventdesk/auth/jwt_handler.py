from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException, status
from pydantic import ValidationError

from eventdesk.database.config import get_settings
from eventdesk.models import TokenData, User


def unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(user: User) -> str:
    """
    Создает подписанный JWT токен для пользователя.

    В токен попадают id пользователя (sub, строкой) и его имя.

    Args:
        user: Пользователь, для которого выпускается токен

    Returns:
        str: Подписанный токен
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.user_id),
        "username": user.username,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)).timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: str) -> TokenData:
    """
    Проверяет подпись и срок действия токена.

    Raises:
        HTTPException: 401 если токен просрочен, поврежден или подписан чужим ключом
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.InvalidTokenError:
        raise unauthorized()
    try:
        return TokenData(**payload)
    except ValidationError:
        # Подпись верна, но набор полей не наш
        raise unauthorized()
