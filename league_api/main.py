"""Aplicação principal FastAPI"""
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from league_api.core.cache import cache
from league_api.core.config import settings
from league_api.core.database import Database
from league_api.core.exceptions import register_exception_handlers
from league_api.core.logging_config import setup_logging
from league_api.core.middleware import RequestContextMiddleware
from league_api.core.rate_limit import limiter
from league_api.api.v1.api import api_router
import logging

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Cria a aplicação.

    Se nenhum Database for informado, um é construído no startup a partir de
    settings.database_url e descartado no shutdown.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API REST de liga: times, jogadores, agenda e resultados de partidas",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.database = database
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(app)

    # Middlewares
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root():
        """Endpoint raiz"""
        prefix = settings.API_V1_PREFIX
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "endpoints": {
                "users": f"{prefix}/users",
                "teams": f"{prefix}/teams",
                "players": f"{prefix}/players",
                "matches": f"{prefix}/matches",
                "match_results": f"{prefix}/match-results",
                "match_results_detail": f"{prefix}/match-results-detail",
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION
        }

    @app.on_event("startup")
    async def startup_event():
        """Evento de startup"""
        logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} iniciando...")
        if app.state.database is None:
            app.state.database = Database(settings.database_url, echo=settings.DEBUG)
        if settings.DB_CREATE_TABLES:
            await app.state.database.create_all()

    @app.on_event("shutdown")
    async def shutdown_event():
        """Evento de shutdown"""
        logger.info("Aplicação encerrando...")
        await cache.close()
        if app.state.database is not None:
            await app.state.database.dispose()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "league_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
