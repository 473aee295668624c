from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from store_api.api.v1.dependencies import get_sale_service, sale_criteria
from store_api.api.v1.schemas import ERROR_RESPONSES, SaleRequest, SaleResponse
from store_api.core.logging import get_logger
from store_api.domain.services import SaleService
from store_api.domain.value_objects import SaleSearchCriteria

logger = get_logger(__name__)

router = APIRouter(prefix="/sales", tags=["sales"], responses=ERROR_RESPONSES)


@router.get("", response_model=list[SaleResponse])
def list_sales(
    criteria: SaleSearchCriteria = Depends(sale_criteria),
    service: SaleService = Depends(get_sale_service),
) -> list[SaleResponse]:
    """Sales matching every supplied filter, with customer and products."""
    logger.info("Obtain all the sales")
    return [SaleResponse.model_validate(s) for s in service.get_sales(criteria)]


@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    sale_id: UUID,
    service: SaleService = Depends(get_sale_service),
) -> SaleResponse:
    return SaleResponse.model_validate(service.get_by_id(sale_id))


@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    payload: SaleRequest,
    service: SaleService = Depends(get_sale_service),
) -> SaleResponse:
    sale = service.save(payload.customer_id, payload.products_id)
    return SaleResponse.model_validate(sale)


@router.put("/{sale_id}", response_model=SaleResponse)
def update_sale(
    sale_id: UUID,
    payload: SaleRequest,
    service: SaleService = Depends(get_sale_service),
) -> SaleResponse:
    sale = service.update(sale_id, payload.customer_id, payload.products_id)
    return SaleResponse.model_validate(sale)


@router.delete("/{sale_id}", response_model=SaleResponse)
def delete_sale(
    sale_id: UUID,
    service: SaleService = Depends(get_sale_service),
) -> SaleResponse:
    return SaleResponse.model_validate(service.delete_by_id(sale_id))
