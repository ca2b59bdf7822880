"""
Integration тесты для DocumentSession.

Проверяет работу с реальной БД (SQLite in-memory).
"""

from decimal import Decimal
from unittest.mock import AsyncMock, patch
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.domain.entities import Product
from catalog_api.infrastructure.persistence.document_session import (
    DocumentSession,
    document_type_name,
)
from catalog_api.infrastructure.persistence.models import DocumentModel


def make_product(name: str = "Chair", category=None) -> Product:
    return Product(
        name=name,
        category=category if category is not None else ["Furniture"],
        description=f"{name} description",
        image_file=f"{name.lower()}.png",
        price=Decimal("49.90"),
    )


class TestStore:
    """Тесты store()"""

    @pytest.mark.asyncio
    async def test_store_assigns_id(self, session_factory):
        """store() назначает id документу без id"""
        async with session_factory() as db:
            session = DocumentSession(db)
            product = make_product()

            session.store(product)

            assert isinstance(product.id, UUID)

    @pytest.mark.asyncio
    async def test_store_keeps_existing_id(self, session_factory):
        async with session_factory() as db:
            session = DocumentSession(db)
            product_id = uuid4()
            product = make_product()
            product.id = product_id

            session.store(product)

            assert product.id == product_id

    @pytest.mark.asyncio
    async def test_store_does_not_write_before_save_changes(self, session_factory):
        """До save_changes в БД ничего нет"""
        async with session_factory() as db:
            session = DocumentSession(db)
            product = make_product()
            session.store(product)

            assert await session.load(Product, product.id) is None

    def test_document_type_name(self):
        assert document_type_name(Product) == "product"


class TestSaveChanges:
    """Тесты save_changes() и чтения"""

    @pytest.mark.asyncio
    async def test_save_and_load(self, session_factory):
        """Сохраненный документ читается в новой сессии"""
        product = make_product("Desk")

        async with session_factory() as db:
            session = DocumentSession(db)
            session.store(product)
            await session.save_changes()

        async with session_factory() as db:
            loaded = await DocumentSession(db).load(Product, product.id)

        assert loaded is not None
        assert loaded.id == product.id
        assert loaded.name == "Desk"
        assert loaded.category == ["Furniture"]
        assert loaded.description == "Desk description"
        assert loaded.image_file == "desk.png"
        assert loaded.price == Decimal("49.90")

    @pytest.mark.asyncio
    async def test_store_existing_document_overwrites(self, session_factory):
        product = make_product("Desk")

        async with session_factory() as db:
            session = DocumentSession(db)
            session.store(product)
            await session.save_changes()

            product.name = "Standing desk"
            session.store(product)
            await session.save_changes()

            assert await session.count(Product) == 1
            loaded = await session.load(Product, product.id)

        assert loaded.name == "Standing desk"

    @pytest.mark.asyncio
    async def test_query_with_paging(self, session_factory):
        async with session_factory() as db:
            session = DocumentSession(db)
            session.store(*[make_product(f"Item{i}") for i in range(5)])
            await session.save_changes()

            all_products = await session.query(Product)
            page = await session.query(Product, limit=2, offset=4)

        assert len(all_products) == 5
        assert len(page) == 1

    @pytest.mark.asyncio
    async def test_delete(self, session_factory):
        product = make_product()

        async with session_factory() as db:
            session = DocumentSession(db)
            session.store(product)
            await session.save_changes()

            session.delete(Product, product.id)
            await session.save_changes()

            assert await session.load(Product, product.id) is None
            assert await session.count(Product) == 0

    @pytest.mark.asyncio
    async def test_save_changes_without_pending_is_noop(self, session_factory):
        async with session_factory() as db:
            with patch.object(AsyncSession, "commit", new=AsyncMock()) as commit:
                await DocumentSession(db).save_changes()

        commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_commit_rolls_back_and_propagates(self, session_factory):
        """Ошибка commit пробрасывается, данные не сохраняются"""
        product = make_product()

        async with session_factory() as db:
            session = DocumentSession(db)
            session.store(product)
            with patch.object(
                AsyncSession,
                "commit",
                new=AsyncMock(side_effect=ConnectionError("connection lost")),
            ):
                with pytest.raises(ConnectionError, match="connection lost"):
                    await session.save_changes()

        async with session_factory() as db:
            assert await DocumentSession(db).count(Product) == 0

    @pytest.mark.asyncio
    async def test_failed_save_keeps_pending_changes(self, session_factory):
        """После ошибки commit повторный save_changes сохраняет те же изменения"""
        product = make_product()

        async with session_factory() as db:
            session = DocumentSession(db)
            session.store(product)
            with patch.object(
                AsyncSession,
                "commit",
                new=AsyncMock(side_effect=ConnectionError("connection lost")),
            ):
                with pytest.raises(ConnectionError):
                    await session.save_changes()

            await session.save_changes()

        async with session_factory() as db:
            loaded = await DocumentSession(db).load(Product, product.id)

        assert loaded is not None
        assert loaded.name == "Chair"


class TestOrdering:
    """Порядок выборки query()"""

    @pytest.mark.asyncio
    async def test_query_returns_creation_order(self, session_factory):
        products = [make_product(f"Item{i}") for i in range(3)]

        async with session_factory() as db:
            session = DocumentSession(db)
            for product in products:
                session.store(product)
                await session.save_changes()

            listed = await session.query(Product)

        assert [p.id for p in listed] == [p.id for p in products]

    @pytest.mark.asyncio
    async def test_update_keeps_position(self, session_factory):
        """Обновленный документ остается на своем месте"""
        first = make_product("First")
        second = make_product("Second")

        async with session_factory() as db:
            session = DocumentSession(db)
            session.store(first)
            await session.save_changes()
            session.store(second)
            await session.save_changes()

            first.name = "First v2"
            session.store(first)
            await session.save_changes()

            page = await session.query(Product, limit=1)

        assert [p.name for p in page] == ["First v2"]


class TestStoredShape:
    """Товар без обязательных полей не создается и не загружается"""

    def test_product_fields_are_required(self):
        with pytest.raises(ValidationError):
            Product(name="Desk")

    @pytest.mark.asyncio
    async def test_load_rejects_incomplete_document(self, session_factory):
        product_id = uuid4()

        async with session_factory() as db:
            db.add(
                DocumentModel(
                    doc_type="product",
                    id=str(product_id),
                    data={"id": str(product_id), "name": "Desk"},
                )
            )
            await db.commit()

            with pytest.raises(ValidationError):
                await DocumentSession(db).load(Product, product_id)
