from typing import Optional, Sequence

from passlib.context import CryptContext

from app.core.config import settings

# bcrypt учитывает только первые 72 байта пароля
BCRYPT_MAX_BYTES = 72


def _truncate(password: str) -> str:
    encoded = password.encode("utf-8")
    if len(encoded) <= BCRYPT_MAX_BYTES:
        return password
    return encoded[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")


class PasswordEncoder:
    """Одностороннее хеширование и проверка паролей"""

    def __init__(self, schemes: Optional[Sequence[str]] = None):
        self._pwd_context = CryptContext(
            schemes=list(schemes or settings.password_schemes),
            deprecated="auto"
        )

    def encode(self, password: str) -> str:
        """Хеширование пароля"""
        return self._pwd_context.hash(_truncate(password))

    def matches(self, password: str, password_hash: str) -> bool:
        """Проверка пароля"""
        return self._pwd_context.verify(_truncate(password), password_hash)


def get_password_encoder() -> PasswordEncoder:
    """Зависимость FastAPI с кодировщиком паролей по настройкам"""
    return PasswordEncoder()
