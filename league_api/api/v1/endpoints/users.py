"""Endpoints de Usuários"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from league_api.core.config import settings
from league_api.core.database import get_db
from league_api.core.rate_limit import limiter
from league_api.schemas.user import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from league_api.services.user_service import UserService

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """Autentica o usuário e retorna o token de acesso"""
    token = await UserService(db).login(credentials)
    return LoginResponse(token=token)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """Cadastra um novo usuário com o papel padrão"""
    await UserService(db).register(payload)
    return RegisterResponse(message="Usuário registrado com sucesso")
