"""Exceções de domínio e seus handlers HTTP"""
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Erro base da aplicação"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Entrada malformada ou regra de negócio violada"""
    status_code = 400


class AuthenticationError(AppError):
    """Token ausente, inválido ou expirado"""
    status_code = 401


class PermissionDeniedError(AppError):
    """Papel do usuário sem permissão para a operação"""
    status_code = 403


class NotFoundError(AppError):
    """Registro não encontrado"""
    status_code = 404


class ConflictError(AppError):
    """Conflito com o estado atual (agenda, camisa, resultado duplicado)"""
    status_code = 409


class InfrastructureError(AppError):
    """Falha do banco ou de serviço externo"""
    status_code = 500


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Converte AppError em resposta JSON"""
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """ID malformado na rota vira 400; erros de corpo seguem como 422"""
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in exc.errors()):
        return JSONResponse(status_code=400, content={"detail": "ID inválido"})
    return await request_validation_exception_handler(request, exc)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Erro de banco não tratado: loga e responde sem detalhes internos"""
    logger.exception(f"Erro de banco em {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI):
    """Registra os handlers de exceção na aplicação"""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
