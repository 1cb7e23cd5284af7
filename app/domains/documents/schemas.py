from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List
import uuid
from datetime import datetime

from app.core.dates import as_utc


def _normalize_date(v):
    return as_utc(v) if v is not None else v


def _strip_name(v):
    if v is not None and not v.strip():
        raise ValueError('Name cannot be empty')
    return v.strip() if v else v


class DocumentCreate(BaseModel):
    """Схема для создания документа"""
    name: str = Field(..., min_length=1, max_length=255)
    user_id: uuid.UUID
    document_type_id: int
    creation_date: datetime
    update_date: datetime

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _strip_name(v)

    @field_validator('creation_date', 'update_date')
    @classmethod
    def validate_dates(cls, v):
        return _normalize_date(v)


class DocumentUpdate(BaseModel):
    """Схема для частичного обновления документа"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    creation_date: Optional[datetime] = None
    update_date: Optional[datetime] = None
    user_id: Optional[uuid.UUID] = None
    document_type_id: Optional[int] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _strip_name(v)

    @field_validator('creation_date', 'update_date')
    @classmethod
    def validate_dates(cls, v):
        return _normalize_date(v)


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: int
    name: str
    creation_date: datetime
    update_date: datetime
    user_id: uuid.UUID
    document_type_id: int

    model_config = ConfigDict(from_attributes=True)


class DocumentListResponse(BaseModel):
    """Схема для страницы документов"""
    documents: List[DocumentResponse]
    total: int
    page: int
    size: int


class AttributeValueCreate(BaseModel):
    """Схема для создания значения атрибута, оба id обязательны"""
    attribute_id: int
    document_id: int
    value: Optional[str] = None


class AttributeValueUpdate(BaseModel):
    """Схема для обновления значения атрибута"""
    value: Optional[str] = None


class AttributeValueResponse(BaseModel):
    """Схема для ответа со значением атрибута"""
    id: int
    attribute_id: int
    document_id: int
    value: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
