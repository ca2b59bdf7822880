"""
API схемы для операций с товарами.

Определяет структуру запросов и ответов для endpoints /products.
"""

from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import Field

from .common import ApiSchema, JsonDecimal


class CreateProductRequest(ApiSchema):
    """
    Запрос на создание товара.

    Пример:
        {
            "name": "Desk",
            "category": ["Furniture"],
            "description": "Oak desk",
            "imageFile": "desk.png",
            "price": 199.99
        }
    """

    name: str = Field(description="Название")
    category: List[str] = Field(description="Категории")
    description: str = Field(description="Описание")
    image_file: str = Field(description="Ссылка на изображение")
    price: Decimal = Field(description="Цена")


class CreateProductResponse(ApiSchema):
    """
    Ответ на создание товара.

    Пример:
        {
            "id": "5334c996-8457-4cf0-815c-ed2b77c4ff61"
        }
    """

    id: UUID = Field(description="ID созданного товара")


class ProductResponse(ApiSchema):
    """Товар в ответах API."""

    id: UUID
    name: str
    category: List[str]
    description: str
    image_file: str
    price: JsonDecimal


class GetProductsResponse(ApiSchema):
    """
    Ответ на получение списка товаров.

    Атрибуты:
        products: Товары на странице
        page_number: Номер страницы
        page_size: Размер страницы
        total_count: Общее количество товаров
    """

    products: List[ProductResponse]
    page_number: int
    page_size: int
    total_count: int


class GetProductByIdResponse(ApiSchema):
    product: ProductResponse


class GetProductsByCategoryResponse(ApiSchema):
    products: List[ProductResponse]


class UpdateProductRequest(ApiSchema):
    """
    Запрос на обновление товара.

    Все поля товара заменяются; частичное обновление не поддерживается.
    """

    id: UUID = Field(description="ID товара")
    name: str = Field(description="Название")
    category: List[str] = Field(description="Категории")
    description: str = Field(description="Описание")
    image_file: str = Field(description="Ссылка на изображение")
    price: Decimal = Field(description="Цена")


class UpdateProductResponse(ApiSchema):
    is_success: bool


class DeleteProductResponse(ApiSchema):
    is_success: bool
