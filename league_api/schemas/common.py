"""Schemas compartilhados"""
from pydantic import BaseModel
from typing import Generic, List, TypeVar

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Envelope padrão das listagens paginadas"""
    data: List[T]
    total_records: int
    current_page: int
    page_size: int
    total_pages: int


class MessageResponse(BaseModel):
    message: str
