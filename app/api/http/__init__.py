from app.api.http.users import router as users_router
from app.api.http.documents import router as documents_router
from app.api.http.document_types import router as document_types_router
from app.api.http.attributes import router as attributes_router
from app.api.http.attribute_values import router as attribute_values_router

__all__ = [
    "users_router",
    "documents_router",
    "document_types_router",
    "attributes_router",
    "attribute_values_router"
]
