from decimal import Decimal
from pydantic import BaseModel, Field
from datetime import datetime

from app.database import MAX_INTEGER


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    price: Decimal = Field(
        ...,
        ge=0,
        lt=100_000_000,
        decimal_places=2,
        description="Unit price, two decimal places",
    )

    stock: int = Field(0, ge=0, le=MAX_INTEGER)

    category_id: int | None = None


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    price: Decimal | None = Field(None, ge=0, lt=100_000_000, decimal_places=2)
    stock: int | None = Field(None, ge=0, le=MAX_INTEGER)
    category_id: int | None = None


class ProductResponse(BaseModel):
    id: int
    name: str
    price: Decimal
    stock: int
    category_id: int | None
    category_name: str | None
    created_at: datetime

    class Config:
        from_attributes = True
