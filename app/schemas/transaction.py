# schemas/transaction.py

from pydantic import BaseModel
from datetime import datetime
from typing import List
from decimal import Decimal

class CheckoutItem(BaseModel):
    product_id: int
    quantity: int

class CheckoutRequest(BaseModel):
    items: List[CheckoutItem]

class CheckoutResponse(BaseModel):
    transaction_id: int
    total: Decimal

class TransactionDetailResponse(BaseModel):
    id: int
    product_id: int | None
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    class Config:
        from_attributes = True

class TransactionResponse(BaseModel):
    id: int
    total_amount: Decimal
    created_at: datetime
    items: List[TransactionDetailResponse]

    class Config:
        from_attributes = True
