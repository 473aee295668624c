from datetime import date
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from store_api.core.constants import (
    CUSTOMER_DNI_MAX_LENGTH,
    CUSTOMER_LAST_NAME_MAX_LENGTH,
    CUSTOMER_NAME_MAX_LENGTH,
)

from .common import not_blank


class CustomerUpdate(BaseModel):
    name: str = Field(..., max_length=CUSTOMER_NAME_MAX_LENGTH)
    last_name: str = Field(..., max_length=CUSTOMER_LAST_NAME_MAX_LENGTH)

    @field_validator("name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return not_blank(v)


class CustomerCreate(CustomerUpdate):
    dni: str = Field(..., max_length=CUSTOMER_DNI_MAX_LENGTH)

    @field_validator("dni")
    @classmethod
    def validate_dni(cls, v: str) -> str:
        return not_blank(v)


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(
        ..., validation_alias=AliasChoices("id", "customer_id"), serialization_alias="customer_id"
    )
    name: str
    last_name: str
    dni: str
    creation_date: date
