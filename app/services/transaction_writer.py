# app/services/transaction_writer.py

import logging
from decimal import Decimal
from typing import NamedTuple, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidRequest, PersistenceError
from app.models.transactions import Transaction
from app.models.transaction_details import TransactionDetail

logger = logging.getLogger(__name__)


class LineItem(NamedTuple):
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


def create_transaction(db: Session, total: Decimal, lines: Sequence[LineItem]) -> int:
    """
    Insert a transaction header and its lines inside the caller's unit of work.

    Flushes so the generated id is available, but never commits: the caller
    decides whether the whole unit of work lands.
    """
    if not lines:
        raise InvalidRequest("Transaction must contain at least one line")

    try:
        transaction = Transaction(total_amount=total)
        db.add(transaction)
        db.flush()

        db.add_all(
            [
                TransactionDetail(
                    transaction_id=transaction.id,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    subtotal=line.subtotal,
                )
                for line in lines
            ]
        )
        db.flush()

    except SQLAlchemyError as exc:
        logger.exception("Failed to write transaction")
        raise PersistenceError("Unable to record transaction") from exc

    return transaction.id
