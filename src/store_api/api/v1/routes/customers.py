from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from store_api.api.v1.dependencies import customer_criteria, get_customer_service
from store_api.api.v1.schemas import (
    ERROR_RESPONSES,
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)
from store_api.core.logging import get_logger
from store_api.domain.services import CustomerService
from store_api.domain.value_objects import CustomerSearchCriteria

logger = get_logger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"], responses=ERROR_RESPONSES)


@router.get("", response_model=list[CustomerResponse])
def list_customers(
    criteria: CustomerSearchCriteria = Depends(customer_criteria),
    service: CustomerService = Depends(get_customer_service),
) -> list[CustomerResponse]:
    logger.info("Obtain all the customers")
    return [CustomerResponse.model_validate(c) for c in service.get_customers(criteria)]


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    return CustomerResponse.model_validate(service.get_by_id(customer_id))


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    customer = service.save(payload.name, payload.last_name, payload.dni)
    return CustomerResponse.model_validate(customer)


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: UUID,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    customer = service.update(customer_id, payload.name, payload.last_name)
    return CustomerResponse.model_validate(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    service.delete_by_id(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
