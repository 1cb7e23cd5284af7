from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from app.core.dates import utcnow
from app.db.base import Base

document_type_attributes = Table(
    "document_type_attributes",
    Base.metadata,
    Column("document_type_id", Integer, ForeignKey("document_types.id", ondelete="CASCADE"), primary_key=True),
    Column("attribute_id", Integer, ForeignKey("attributes.id", ondelete="CASCADE"), primary_key=True),
)


class Attribute(Base):
    __tablename__ = "attributes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    data_type = Column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"Attribute(id={self.id}, name={self.name}, data_type={self.data_type})"


class DocumentType(Base):
    __tablename__ = "document_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Схема атрибутов документов этого типа
    attributes = relationship(
        "Attribute",
        secondary=document_type_attributes,
        order_by="Attribute.id",
        lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"DocumentType(id={self.id}, name={self.name})"
