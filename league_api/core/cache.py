"""Cache Redis async para os read-models"""
import json
from typing import Optional, Any
import logging
from redis.asyncio import Redis, ConnectionPool
from redis.exceptions import RedisError
from league_api.core.config import settings

logger = logging.getLogger(__name__)

MATCH_DETAIL_PREFIX = "match-results-detail"


def match_detail_key(match_id: int) -> str:
    """Chave de cache do detalhe de uma partida"""
    return f"{MATCH_DETAIL_PREFIX}:{match_id}"


class CacheManager:
    """
    Gerenciador de cache Redis async.

    Falhas do Redis nunca quebram a requisição: leituras viram cache miss e
    escritas são ignoradas, com warning no log.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._pool: Optional[ConnectionPool] = None
        self._client: Optional[Redis] = None

    async def _get_client(self) -> Optional[Redis]:
        """Obtém cliente Redis (lazy initialization)"""
        if not self.enabled:
            return None
        if self._client:
            return self._client

        try:
            self._pool = ConnectionPool(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                db=settings.REDIS_DB,
                password=settings.REDIS_PASSWORD,
                decode_responses=True,
                socket_connect_timeout=5,
                health_check_interval=30,
                max_connections=50,
            )
            client = Redis(connection_pool=self._pool)
            await client.ping()
            self._client = client
            logger.info("Redis conectado com sucesso")
            return self._client
        except (RedisError, OSError) as e:
            logger.error(f"Erro ao conectar Redis: {e}")
            await self._pool.disconnect()
            self._pool = None
            return None

    async def get(self, key: str) -> Optional[Any]:
        """Obtém valor do cache"""
        client = await self._get_client()
        if not client:
            return None

        try:
            value = await client.get(key)
            return json.loads(value) if value else None
        except (json.JSONDecodeError, RedisError) as e:
            logger.warning(f"Erro ao ler cache {key}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Define valor no cache com TTL"""
        client = await self._get_client()
        if not client:
            return False

        try:
            ttl = ttl or settings.CACHE_TTL
            serialized = json.dumps(value, default=str)
            return bool(await client.setex(key, ttl, serialized))
        except RedisError as e:
            logger.warning(f"Erro ao escrever cache {key}: {e}")
            return False

    async def delete_pattern(self, pattern: str) -> int:
        """Remove todas as chaves que correspondem ao padrão"""
        client = await self._get_client()
        if not client:
            return 0

        try:
            keys = [key async for key in client.scan_iter(match=pattern)]
            return await client.delete(*keys) if keys else 0
        except RedisError as e:
            logger.warning(f"Erro ao deletar padrão {pattern}: {e}")
            return 0

    async def invalidate_match_details(self) -> int:
        """Invalida todos os detalhes de partida (totais de vitórias mudam juntos)"""
        return await self.delete_pattern(f"{MATCH_DETAIL_PREFIX}:*")

    async def close(self):
        """Fecha conexões Redis"""
        if self._client:
            await self._client.aclose()
        if self._pool:
            await self._pool.disconnect()
        self._client = None
        self._pool = None


# Instância global do cache
cache = CacheManager(enabled=settings.CACHE_ENABLED)
