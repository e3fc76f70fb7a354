"""Helpers de paginação"""
import math
from typing import Tuple
from league_api.core.config import settings


def normalize_pagination(page: int, limit: int) -> Tuple[int, int]:
    """Aplica os defaults: página mínima 1 e limite padrão quando <= 0"""
    if page is None or page <= 0:
        page = 1
    if limit is None or limit <= 0:
        limit = settings.DEFAULT_PAGE_SIZE
    return page, limit


def calculate_total_pages(total_records: int, limit: int) -> int:
    """Número total de páginas (0 quando não há registros)"""
    if total_records == 0:
        return 0
    return math.ceil(total_records / limit)


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def paginated(data: list, total_records: int, page: int, limit: int) -> dict:
    """Monta o envelope padrão das listagens"""
    return {
        "data": data,
        "total_records": total_records,
        "current_page": page,
        "page_size": limit,
        "total_pages": calculate_total_pages(total_records, limit),
    }
