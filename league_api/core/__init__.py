"""Core modules - configurações principais"""
from league_api.core.config import settings
from league_api.core.database import get_db, Base, Database
from league_api.core.cache import cache, CacheManager
from league_api.core.logging_config import setup_logging

__all__ = [
    "settings",
    "get_db",
    "Base",
    "Database",
    "cache",
    "CacheManager",
    "setup_logging",
]
