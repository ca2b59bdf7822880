"""
Products роутер.

Endpoints каталога: запрос -> команда/запрос -> медиатор -> результат -> ответ.
Бизнес-логики здесь нет, только маппинг по именам полей.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from building_blocks.cqrs import Sender
from building_blocks.mapping import adapt

from ..schemas.common import ProblemDetails
from ..schemas.product_schemas import (
    CreateProductRequest,
    CreateProductResponse,
    DeleteProductResponse,
    GetProductByIdResponse,
    GetProductsByCategoryResponse,
    GetProductsResponse,
    UpdateProductRequest,
    UpdateProductResponse,
)
from ....application.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from ....application.queries import (
    GetProductByIdQuery,
    GetProductsByCategoryQuery,
    GetProductsQuery,
    MAX_PAGE_NUMBER,
    MAX_PAGE_SIZE,
)
from ....core.dependencies import get_sender
from ....core.errors import ProductNotFoundError

logger = logging.getLogger("catalog-api.api.products")

router = APIRouter(prefix="/products", tags=["products"])


@router.post(
    "",
    response_model=CreateProductResponse,
    status_code=201,
    name="CreateProduct",
    summary="Create Product",
    description="Create Product",
    responses={400: {"model": ProblemDetails}},
)
async def create_product(
    request: CreateProductRequest,
    response: Response,
    sender: Sender = Depends(get_sender),
) -> CreateProductResponse:
    """
    Создать товар.

    Ошибки хранилища не перехватываются и превращаются фреймворком в 500.

    Пример запроса:
        POST /products
        {
            "name": "Desk",
            "category": ["Furniture"],
            "description": "Oak desk",
            "imageFile": "desk.png",
            "price": 199.99
        }

    Пример ответа (201, Location: /products/{id}):
        {
            "id": "5334c996-8457-4cf0-815c-ed2b77c4ff61"
        }
    """
    command = adapt(request, CreateProductCommand)

    result = await sender.send(command)

    product_response = adapt(result, CreateProductResponse)
    response.headers["Location"] = f"/products/{product_response.id}"
    return product_response


@router.get(
    "",
    response_model=GetProductsResponse,
    name="GetProducts",
    summary="Get Products",
    responses={400: {"model": ProblemDetails}},
)
async def get_products(
    page_number: int = Query(default=1, alias="pageNumber", ge=1, le=MAX_PAGE_NUMBER),
    page_size: int = Query(default=10, alias="pageSize", ge=1, le=MAX_PAGE_SIZE),
    sender: Sender = Depends(get_sender),
) -> GetProductsResponse:
    """
    Получить страницу товаров.

    Пример запроса:
        GET /products?pageNumber=1&pageSize=10
    """
    result = await sender.send(GetProductsQuery(page_number=page_number, page_size=page_size))
    return adapt(result, GetProductsResponse)


@router.get(
    "/category/{category}",
    response_model=GetProductsByCategoryResponse,
    name="GetProductsByCategory",
    summary="Get Products By Category",
)
async def get_products_by_category(
    category: str,
    sender: Sender = Depends(get_sender),
) -> GetProductsByCategoryResponse:
    result = await sender.send(GetProductsByCategoryQuery(category=category))
    return adapt(result, GetProductsByCategoryResponse)


@router.get(
    "/{product_id}",
    response_model=GetProductByIdResponse,
    name="GetProductById",
    summary="Get Product By Id",
    responses={400: {"model": ProblemDetails}},
)
async def get_product_by_id(
    product_id: UUID,
    sender: Sender = Depends(get_sender),
) -> GetProductByIdResponse:
    """
    Получить товар по ID.

    Raises:
        HTTPException 404: Если товар не найден
    """
    try:
        result = await sender.send(GetProductByIdQuery(id=product_id))
    except ProductNotFoundError as e:
        logger.warning(f"Product not found: {product_id}")
        raise HTTPException(status_code=404, detail=e.to_dict())

    return adapt(result, GetProductByIdResponse)


@router.put(
    "",
    response_model=UpdateProductResponse,
    name="UpdateProduct",
    summary="Update Product",
    responses={400: {"model": ProblemDetails}},
)
async def update_product(
    request: UpdateProductRequest,
    sender: Sender = Depends(get_sender),
) -> UpdateProductResponse:
    """
    Обновить товар.

    Raises:
        HTTPException 404: Если товар не найден
    """
    command = adapt(request, UpdateProductCommand)

    try:
        result = await sender.send(command)
    except ProductNotFoundError as e:
        logger.warning(f"Cannot update missing product: {command.id}")
        raise HTTPException(status_code=404, detail=e.to_dict())

    return adapt(result, UpdateProductResponse)


@router.delete(
    "/{product_id}",
    response_model=DeleteProductResponse,
    name="DeleteProduct",
    summary="Delete Product",
    responses={400: {"model": ProblemDetails}},
)
async def delete_product(
    product_id: UUID,
    sender: Sender = Depends(get_sender),
) -> DeleteProductResponse:
    """
    Удалить товар.

    Удаление отсутствующего товара тоже отвечает isSuccess=true.
    """
    await sender.send(DeleteProductCommand(id=product_id))
    return DeleteProductResponse(is_success=True)
