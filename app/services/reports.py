# app/services/reports.py

from datetime import date, datetime, timedelta, timezone

from sqlalchemy import Date, and_, func, literal
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidRequest
from app.models.transactions import Transaction
from app.models.transaction_details import TransactionDetail
from app.services.pricing import to_money


def sales_summary(db: Session, start_date: date, end_date: date) -> dict:
    """
    Revenue, transaction count and best seller for an inclusive date window.

    The best seller is the product with the largest summed quantity; ties go
    to the lowest product id. Lines whose product has since been deleted are
    left out of that ranking. ``best_selling_product`` is None when nothing
    was sold in the window.
    """
    if start_date > end_date:
        raise InvalidRequest("start_date must not be after end_date")

    # Half-open [start, end + 1 day), bound as plain dates: a stored
    # "YYYY-MM-DD 00:00:00" must not sort below a datetime-formatted bound
    window = and_(
        Transaction.created_at >= literal(start_date, Date),
        Transaction.created_at < literal(end_date + timedelta(days=1), Date),
    )

    total_revenue, total_transactions = (
        db.query(
            func.coalesce(func.sum(Transaction.total_amount), 0),
            func.count(Transaction.id),
        )
        .filter(window)
        .one()
    )

    quantity_sold = func.sum(TransactionDetail.quantity).label("quantity_sold")

    best = (
        db.query(
            TransactionDetail.product_id,
            func.max(TransactionDetail.product_name).label("name"),
            quantity_sold,
        )
        .join(Transaction, TransactionDetail.transaction_id == Transaction.id)
        .filter(window, TransactionDetail.product_id.isnot(None))
        .group_by(TransactionDetail.product_id)
        .order_by(quantity_sold.desc(), TransactionDetail.product_id.asc())
        .first()
    )

    best_selling_product = None
    if best is not None:
        best_selling_product = {
            "product_id": best.product_id,
            "name": best.name,
            "quantity_sold": int(best.quantity_sold),
        }

    return {
        "start_date": start_date,
        "end_date": end_date,
        "total_revenue": to_money(total_revenue or 0),
        "total_transactions": total_transactions,
        "best_selling_product": best_selling_product,
    }


def sales_summary_today(db: Session) -> dict:
    today = datetime.now(timezone.utc).date()
    return sales_summary(db, today, today)
