# services/crud/user.py
from typing import Dict, Iterable, Optional, Protocol

from eventdesk.models import User


class CredentialStore(Protocol):
    """Источник учетных записей для входа"""

    def find_by_username(self, username: str) -> Optional[User]:
        ...


class InMemoryCredentialStore:
    """Фиксированный список пользователей в памяти, только для чтения"""

    def __init__(self, users: Iterable[User]):
        self._users: Dict[str, User] = {user.username: user for user in users}

    def find_by_username(self, username: str) -> Optional[User]:
        return self._users.get(username)


DEFAULT_USERS = (
    User(user_id=1, username="john", password="cena"),
    User(user_id=2, username="batman", password="pass"),
)

default_store = InMemoryCredentialStore(DEFAULT_USERS)


def get_credential_store() -> CredentialStore:
    return default_store
