from sqlalchemy.orm import declarative_base

# Базовый класс для моделей
Base = declarative_base()
