# =========================================================
# REPORTS ROUTER
#
# Read-only sales summaries over committed transactions:
# - today (UTC)
# - inclusive start/end date range
#
# best_selling_product is omitted when nothing was sold.
# =========================================================

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidRequest
from app.database import get_db
from app.schemas.report import SalesSummaryResponse
from app.services.reports import sales_summary, sales_summary_today

router = APIRouter(prefix="/reports", tags=["Reports"])


# =========================================================
# TODAY
# =========================================================
@router.get(
    "/today",
    response_model=SalesSummaryResponse,
    response_model_exclude_none=True,
)
def today_report(db: Session = Depends(get_db)):
    return sales_summary_today(db)


# =========================================================
# DATE RANGE
# =========================================================
@router.get(
    "",
    response_model=SalesSummaryResponse,
    response_model_exclude_none=True,
)
def range_report(
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: Session = Depends(get_db),
):
    try:
        return sales_summary(db, start_date, end_date)
    except InvalidRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc))
