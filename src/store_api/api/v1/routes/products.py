from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from store_api.api.v1.dependencies import get_product_service, product_criteria
from store_api.api.v1.schemas import (
    ERROR_RESPONSES,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from store_api.core.logging import get_logger
from store_api.domain.services import ProductService
from store_api.domain.value_objects import ProductSearchCriteria

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["products"], responses=ERROR_RESPONSES)


@router.get("", response_model=list[ProductResponse])
def list_products(
    criteria: ProductSearchCriteria = Depends(product_criteria),
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    logger.info("Obtain all the products")
    return [ProductResponse.model_validate(p) for p in service.get_products(criteria)]


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return ProductResponse.model_validate(service.get_by_id(product_id))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    product = service.save(
        payload.name,
        payload.trade_mark,
        payload.price,
        payload.description,
        stock=payload.stock,
    )
    return ProductResponse.model_validate(product)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: UUID,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    product = service.update(
        product_id, payload.name, payload.trade_mark, payload.price, payload.description
    )
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> Response:
    service.delete_by_id(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
