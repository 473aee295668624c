from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .customers import CustomerResponse
from .products import ProductResponse


class SaleRequest(BaseModel):
    customer_id: UUID
    products_id: list[UUID] = Field(..., min_length=1)


class SaleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(
        ..., validation_alias=AliasChoices("id", "sale_id"), serialization_alias="sale_id"
    )
    creation_date: date
    total_amount: Decimal = Field(..., description="sum of the product prices")
    customer: CustomerResponse
    products: list[ProductResponse]
