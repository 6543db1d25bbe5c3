# schemas/report.py

from pydantic import BaseModel
from datetime import date
from decimal import Decimal
from typing import Optional


class BestSellingProduct(BaseModel):
    product_id: int
    name: str
    quantity_sold: int


class SalesSummaryResponse(BaseModel):
    start_date: date
    end_date: date
    total_revenue: Decimal
    total_transactions: int
    best_selling_product: Optional[BestSellingProduct] = None
