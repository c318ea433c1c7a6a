from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from jwt import InvalidTokenError, decode, encode
from pwdlib import PasswordHash

from manga_catalog.domain.models.user import User as DomainUser
from manga_catalog.domain.ports.repositories.user_repository import UserRepository
from manga_catalog.domain.ports.services.auth_service import AuthService
from manga_catalog.infrastructure.config.settings import Settings


class JWTAuthService(AuthService):
    def __init__(self, user_repository: UserRepository, settings: Settings):
        self.user_repository = user_repository
        self.settings = settings
        self.pwd_context = PasswordHash.recommended()

    def hash_password(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return self.pwd_context.verify(plain_password, hashed_password)

    def create_access_token(self, user: DomainUser) -> str:
        now = datetime.now(tz=ZoneInfo("UTC"))
        expire = now + timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode = {"sub": str(user.id), "email": user.email, "iat": now, "nbf": now, "exp": expire}
        return encode(to_encode, self.settings.SECRET_KEY, algorithm=self.settings.ALGORITHM)

    def decode_access_token(self, token: str) -> Optional[int]:
        try:
            payload = decode(token, self.settings.SECRET_KEY, algorithms=[self.settings.ALGORITHM])
        except InvalidTokenError:
            return None

        subject = payload.get("sub")
        if not subject or not str(subject).isdigit():
            return None
        return int(subject)

    async def get_current_user(self, token: str) -> Optional[DomainUser]:
        user_id = self.decode_access_token(token)
        if user_id is None:
            return None

        return await self.user_repository.get_by_id(user_id)
