"""Configuração do banco de dados async"""
from typing import AsyncIterator
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
import logging

logger = logging.getLogger(__name__)

# Base para modelos SQLAlchemy
Base = declarative_base()


def get_async_database_url(url: str) -> str:
    """Garante URL async (asyncpg para PostgreSQL)"""
    if url.startswith("postgresql+psycopg2://"):
        return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://")
    return url


class Database:
    """Handle do banco: engine async + fábrica de sessões"""

    def __init__(self, url: str, echo: bool = False):
        self.url = get_async_database_url(url)
        engine_kwargs = {"echo": echo, "future": True}
        if not self.url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=20,
                max_overflow=10,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(self.url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    async def create_all(self):
        """Cria todas as tabelas"""
        # Registra os modelos no metadata antes do create_all
        import league_api.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Banco de dados inicializado")

    async def dispose(self):
        """Fecha todas as conexões do banco"""
        await self.engine.dispose()
        logger.info("Conexões do banco de dados fechadas")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency async para obter sessão do banco de dados.
    Uso: db: AsyncSession = Depends(get_db)
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
