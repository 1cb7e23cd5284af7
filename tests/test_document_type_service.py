import pytest

from app.core.exceptions import ResourceNotFoundError
from app.db.models import Attribute, DocumentType
from app.db.repositories.base import Page
from app.domains.document_types.schemas import (
    AttributeCreate, AttributeUpdate, DocumentTypeCreate, DocumentTypeUpdate
)
from app.domains.document_types.services import AttributeService, DocumentTypeService


@pytest.fixture
def document_type_service(session, document_type_repository, attribute_repository):
    return DocumentTypeService(
        session,
        document_type_repository=document_type_repository,
        attribute_repository=attribute_repository
    )


@pytest.fixture
def attribute_service(session, attribute_repository):
    return AttributeService(session, attribute_repository=attribute_repository)


@pytest.fixture
def signer():
    return Attribute(id=1, name="подписант", data_type="текст")


@pytest.fixture
def amount():
    return Attribute(id=2, name="сумма", data_type="число")


async def test_create_document_type_keeps_requested_attribute_order(
    document_type_service, document_type_repository, attribute_repository, signer, amount, session
):
    attribute_repository.get_by_ids.return_value = [signer, amount]

    result = await document_type_service.create_document_type(
        DocumentTypeCreate(name="договор", description="описание", attribute_ids=[2, 1, 2])
    )

    attribute_repository.get_by_ids.assert_awaited_once_with([2, 1])
    document_type_repository.save.assert_awaited_once()
    assert [attribute.name for attribute in result.attributes] == ["сумма", "подписант"]
    assert result.created_at is not None
    session.commit.assert_awaited_once()


async def test_create_document_type_unknown_attribute(
    document_type_service, document_type_repository, attribute_repository, signer
):
    attribute_repository.get_by_ids.return_value = [signer]

    with pytest.raises(ResourceNotFoundError, match="Attribute with id 5"):
        await document_type_service.create_document_type(
            DocumentTypeCreate(name="договор", attribute_ids=[1, 5])
        )

    document_type_repository.save.assert_not_awaited()


async def test_update_document_type_merges_fields(
    document_type_service, document_type_repository, attribute_repository, signer, amount
):
    document_type = DocumentType(id=1, name="договор", description="старое", attributes=[signer])
    document_type_repository.get_by_id.return_value = document_type

    result = await document_type_service.update_document_type(1, DocumentTypeUpdate(description="новое"))

    assert result.name == "договор"
    assert result.description == "новое"
    assert [attribute.id for attribute in result.attributes] == [1]
    attribute_repository.get_by_ids.assert_not_awaited()


async def test_update_document_type_replaces_attributes(
    document_type_service, document_type_repository, attribute_repository, signer, amount
):
    document_type = DocumentType(id=1, name="договор", attributes=[signer])
    document_type_repository.get_by_id.return_value = document_type
    attribute_repository.get_by_ids.return_value = [amount]

    result = await document_type_service.update_document_type(1, DocumentTypeUpdate(attribute_ids=[2]))

    assert [attribute.id for attribute in result.attributes] == [2]


async def test_list_document_types(document_type_service, document_type_repository):
    document_type_repository.get_page.return_value = Page(
        items=[DocumentType(id=1, name="договор", attributes=[])], total=1, page=0, size=10
    )

    result = await document_type_service.list_document_types(0, 10)

    assert [item.name for item in result] == ["договор"]


async def test_get_missing_document_type(document_type_service, document_type_repository):
    document_type_repository.get_by_id.return_value = None

    with pytest.raises(ResourceNotFoundError):
        await document_type_service.get_document_type(1)


async def test_delete_document_type(document_type_service, document_type_repository):
    document_type = DocumentType(id=1, name="договор", attributes=[])
    document_type_repository.get_by_id.return_value = document_type

    await document_type_service.delete_document_type(1)

    document_type_repository.delete.assert_awaited_once_with(document_type)


async def test_create_attribute(attribute_service, attribute_repository):
    async def assign_id(attribute):
        attribute.id = 10
        return attribute

    attribute_repository.save.side_effect = assign_id

    result = await attribute_service.create_attribute(AttributeCreate(name="подписант", data_type="текст"))

    attribute_repository.save.assert_awaited_once()
    assert result.id == 10
    assert result.name == "подписант"


async def test_update_attribute_keeps_absent_fields(attribute_service, attribute_repository, signer):
    attribute_repository.get_by_id.return_value = signer

    result = await attribute_service.update_attribute(1, AttributeUpdate(data_type="строка"))

    assert result.name == "подписант"
    assert result.data_type == "строка"


async def test_delete_missing_attribute(attribute_service, attribute_repository):
    attribute_repository.get_by_id.return_value = None

    with pytest.raises(ResourceNotFoundError):
        await attribute_service.delete_attribute(3)

    attribute_repository.delete.assert_not_awaited()
