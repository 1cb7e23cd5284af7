from fastapi import APIRouter
from app.api.http import (
    users_router, documents_router, document_types_router,
    attributes_router, attribute_values_router
)

api_router = APIRouter()
api_router.include_router(users_router)
api_router.include_router(documents_router)
api_router.include_router(document_types_router)
api_router.include_router(attributes_router)
api_router.include_router(attribute_values_router)
