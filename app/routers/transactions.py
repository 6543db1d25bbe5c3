# =========================================================
# CHECKOUT & TRANSACTION HISTORY ROUTER
#
# POST /checkout turns a cart into a committed transaction.
# Every failure rolls back the whole checkout; the caller
# gets exactly one outcome.
# =========================================================

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.core.exceptions import (
    InsufficientStock,
    InvalidRequest,
    NotFound,
    PersistenceError,
)
from app.core.rate_limiter import limiter
from app.database import MAX_INTEGER, get_db
from app.models.transactions import Transaction
from app.schemas.transaction import (
    CheckoutRequest,
    CheckoutResponse,
    TransactionResponse,
)
from app.services.checkout import CheckoutService

router = APIRouter(tags=["Transactions"])

logger = logging.getLogger(__name__)


# =========================================================
# CHECKOUT
# =========================================================
@router.post(
    "/checkout",
    response_model=CheckoutResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.CHECKOUT_RATE_LIMIT)
def checkout(
    request: Request,
    checkout_data: CheckoutRequest,
    lock_mode: bool | None = Query(
        None,
        description="Lock product rows while checking out. Defaults to server setting.",
    ),
    db: Session = Depends(get_db),
):
    if lock_mode is None:
        lock_mode = settings.CHECKOUT_PESSIMISTIC_LOCKING

    items = [(item.product_id, item.quantity) for item in checkout_data.items]

    try:
        result = CheckoutService(db).checkout(items, lock_mode=lock_mode)

    except InvalidRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    except NotFound as exc:
        raise HTTPException(
            status_code=404,
            detail={"message": "Product not found", "product_id": exc.product_id},
        )

    except InsufficientStock as exc:
        raise HTTPException(
            status_code=409,
            detail={"message": "Insufficient stock", "product_id": exc.product_id},
        )

    except PersistenceError:
        raise HTTPException(status_code=500, detail="Unable to complete checkout")

    return CheckoutResponse(transaction_id=result.transaction_id, total=result.total)


# =========================================================
# LIST TRANSACTIONS
# =========================================================
@router.get("/transactions", response_model=list[TransactionResponse])
def list_transactions(
    db: Session = Depends(get_db),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0, le=MAX_INTEGER),
):
    return (
        db.query(Transaction)
        .options(joinedload(Transaction.items))
        .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )


# =========================================================
# GET SINGLE TRANSACTION
# =========================================================
@router.get("/transactions/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
):
    if not 0 < transaction_id <= MAX_INTEGER:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )

    transaction = (
        db.query(Transaction)
        .options(joinedload(Transaction.items))
        .filter(Transaction.id == transaction_id)
        .first()
    )

    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )

    return transaction
