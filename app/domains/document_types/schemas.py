from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime


class AttributeCreate(BaseModel):
    """Схема для создания атрибута"""
    name: str = Field(..., min_length=1, max_length=255)
    data_type: str = Field(..., min_length=1, max_length=50)


class AttributeUpdate(BaseModel):
    """Схема для обновления атрибута"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    data_type: Optional[str] = Field(None, min_length=1, max_length=50)


class AttributeResponse(BaseModel):
    id: int
    name: str
    data_type: str

    model_config = ConfigDict(from_attributes=True)


class DocumentAttributeResponse(BaseModel):
    """Атрибут в составе типа документа"""
    id: Optional[int] = None
    name: str

    model_config = ConfigDict(from_attributes=True)


class DocumentTypeCreate(BaseModel):
    """Схема для создания типа документа"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    attribute_ids: List[int] = Field(default_factory=list)


class DocumentTypeUpdate(BaseModel):
    """Схема для обновления типа документа, список атрибутов заменяется целиком"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    attribute_ids: Optional[List[int]] = None


class DocumentTypeResponse(BaseModel):
    id: Optional[int] = None
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    attributes: List[DocumentAttributeResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
