"""Request/response schemas for pedido (order) endpoints."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pesca_api.schemas.types import UtcDatetime


class PedidoCreate(BaseModel):
    """Checkout of a single product."""

    product: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: Decimal = Field(
        ...,
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Unit price, two decimal places at most",
    )

    @field_validator("product")
    @classmethod
    def strip_product(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("product must not be blank")
        return v


class PedidoOut(BaseModel):
    """Order as returned by the API; never the ORM entity itself."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: UtcDatetime
    product: str
    price: Decimal
    user_id: int
