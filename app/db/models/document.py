from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.db.base import Base


class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    creation_date = Column(DateTime(timezone=True), nullable=False)
    update_date = Column(DateTime(timezone=True), nullable=False)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    document_type_id = Column(Integer, ForeignKey("document_types.id"), nullable=False)

    # Ссылки без владения: удаление документа не трогает пользователя и тип
    user = relationship("User", lazy="joined")
    document_type = relationship("DocumentType", lazy="joined")

    def __repr__(self) -> str:
        return f"Document(id={self.id}, name={self.name}, update_date={self.update_date})"


class AttributeValue(Base):
    __tablename__ = "attribute_values"

    id = Column(Integer, primary_key=True, autoincrement=True)
    attribute_id = Column(Integer, ForeignKey("attributes.id"), nullable=False)
    document_id = Column(Integer, ForeignKey("documents.id", ondelete="CASCADE"), nullable=False)
    value = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"AttributeValue(id={self.id}, attribute_id={self.attribute_id}, document_id={self.document_id})"
