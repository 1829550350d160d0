from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# Quantities live in 32-bit INTEGER columns
MAX_QUANTITY = 2**31 - 1


class CamelModel(BaseModel):
    # Wire format is camelCase; python attributes stay snake_case
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


class ProductCreate(CamelModel):
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    price: float = Field(..., ge=0)
    rating: Optional[float] = None
    min_qty: int = Field(..., ge=1, le=MAX_QUANTITY)
    main_quantity: int = Field(..., ge=0, le=MAX_QUANTITY)
    # "userEmail" is what older clients send
    owner_email: str = Field(
        "anonymous",
        validation_alias=AliasChoices("ownerEmail", "userEmail", "owner_email"),
    )

    @field_validator("owner_email", mode="before")
    @classmethod
    def default_owner(cls, value):
        return value or "anonymous"


class ProductUpdate(CamelModel):
    name: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    rating: Optional[float] = None
    min_qty: Optional[int] = Field(None, ge=1, le=MAX_QUANTITY)
    main_quantity: Optional[int] = Field(None, ge=0, le=MAX_QUANTITY)
    owner_email: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("ownerEmail", "userEmail", "owner_email"),
    )

    @model_validator(mode="after")
    def reject_null_required(self):
        for field in ("name", "price", "min_qty", "main_quantity", "owner_email"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{to_camel(field)} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)


class ProductResponse(CamelModel):
    id: str
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    price: float
    rating: Optional[float] = None
    min_qty: int
    main_quantity: int
    stock: int
    owner_email: str
    created_at: Optional[datetime] = None


class ProductCreated(BaseModel):
    productId: str


class MessageResponse(BaseModel):
    message: str
