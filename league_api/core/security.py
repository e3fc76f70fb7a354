"""Autenticação JWT, hash de senha e controle de papéis"""
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
import bcrypt
import jwt
import logging
from league_api.core.config import settings
from league_api.core.exceptions import AuthenticationError, PermissionDeniedError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class TokenPayload(BaseModel):
    """Claims do token de acesso"""
    user_id: str
    email: str
    role: str
    exp: int


def _password_bytes(password: str) -> bytes:
    # bcrypt considera apenas os primeiros 72 bytes
    return password.encode("utf-8")[:72]


def hash_password(password: str) -> str:
    """Gera hash bcrypt da senha"""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Compara senha em texto com o hash armazenado"""
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user_id: str, email: str, role: str,
                        expires_delta: Optional[timedelta] = None) -> str:
    """Emite um JWT assinado com user_id, email, role e exp"""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)
    )
    claims = {
        "user_id": user_id,
        "email": email,
        "role": role,
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenPayload:
    """Valida assinatura e expiração do token"""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expirado")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Token inválido")

    try:
        return TokenPayload(**claims)
    except (TypeError, ValueError):
        raise AuthenticationError("Token inválido")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenPayload:
    """
    Dependency que exige um Bearer token válido.
    Uso: user: TokenPayload = Depends(get_current_user)
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Token de autenticação ausente")
    return decode_access_token(credentials.credentials)


def require_roles(*allowed_roles: str) -> Callable:
    """Dependency que exige um dos papéis informados"""

    async def role_checker(user: TokenPayload = Depends(get_current_user)) -> TokenPayload:
        if user.role not in allowed_roles:
            logger.warning(f"Acesso negado para {user.email} (role={user.role})")
            raise PermissionDeniedError("Permissão insuficiente")
        return user

    return role_checker
