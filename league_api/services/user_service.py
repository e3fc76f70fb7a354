"""Service de User (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from typing import Optional
import logging
import uuid
from league_api.core.config import settings
from league_api.core.exceptions import AuthenticationError, ConflictError
from league_api.core.security import create_access_token, hash_password, verify_password
from league_api.models.user import User
from league_api.repositories.user_repository import UserRepository
from league_api.schemas.user import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Já existe um usuário com este email"


class UserService:
    """Cadastro e login de usuários"""

    def __init__(self, db: AsyncSession, repository: Optional[UserRepository] = None):
        self.db = db
        self.repository = repository or UserRepository(db)

    async def register(self, data: RegisterRequest) -> User:
        email = data.email.strip().lower()
        if await self.repository.get_by_email(email):
            raise ConflictError(EMAIL_TAKEN)
        try:
            user = await self.repository.create({
                "user_id": f"user_{uuid.uuid4().hex}",
                "name": data.name,
                "email": email,
                "password": hash_password(data.password),
                "role": settings.DEFAULT_USER_ROLE,
                "status": "active",
            })
        except IntegrityError:
            raise ConflictError(EMAIL_TAKEN)
        logger.info(f"Usuário registrado: {user.user_id}")
        return user

    async def login(self, data: LoginRequest) -> str:
        """Valida as credenciais e emite o token de acesso"""
        user = await self.repository.get_by_email(data.email.strip().lower())
        if not user or user.status != "active" or not verify_password(data.password, user.password):
            raise AuthenticationError("Credenciais inválidas")
        return create_access_token(user.user_id, user.email, user.role)
