from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from store_api.core.constants import (
    PRODUCT_DESCRIPTION_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_TRADE_MARK_MAX_LENGTH,
)

from .common import not_blank


class ProductUpdate(BaseModel):
    name: str = Field(..., max_length=PRODUCT_NAME_MAX_LENGTH)
    trade_mark: str = Field(..., max_length=PRODUCT_TRADE_MARK_MAX_LENGTH)
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    description: str = Field(..., max_length=PRODUCT_DESCRIPTION_MAX_LENGTH)

    @field_validator("name", "trade_mark", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return not_blank(v)


class ProductCreate(ProductUpdate):
    stock: int = Field(0, ge=0)


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(
        ..., validation_alias=AliasChoices("id", "product_id"), serialization_alias="product_id"
    )
    name: str
    trade_mark: str
    price: Decimal
    description: str
    stock: int
    creation_date: date
