import uuid

from sqlalchemy import Column, String, Uuid

from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    login = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    patronymic = Column(String(100), nullable=True)
    password = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id}, login={self.login}, email={self.email})"
