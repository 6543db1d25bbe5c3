# =========================================================
# CHECKOUT ORCHESTRATOR
#
# Turns a cart into a committed transaction in one unit of work:
#   VALIDATING -> PRICING -> PERSISTING -> ADJUSTING -> COMMITTED
# Any failure moves to FAILED and rolls the whole session back.
#
# lock_mode=True  : product rows are read with SELECT ... FOR UPDATE.
# lock_mode=False : plain reads; the guarded decrement re-checks stock
#                   and a conflict aborts the checkout.
#
# Rows are always read and decremented in ascending product id order.
# =========================================================

import enum
import logging
from decimal import Decimal
from typing import Iterable, NamedTuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import InsufficientStock, InvalidRequest, PersistenceError
from app.services.inventory import InventoryStore
from app.services.pricing import MAX_TOTAL, calculate_totals
from app.services.transaction_writer import LineItem, create_transaction

logger = logging.getLogger(__name__)


class CheckoutState(str, enum.Enum):
    VALIDATING = "validating"
    PRICING = "pricing"
    PERSISTING = "persisting"
    ADJUSTING = "adjusting"
    COMMITTED = "committed"
    FAILED = "failed"


class CheckoutResult(NamedTuple):
    transaction_id: int
    total: Decimal


def merge_items(items: Iterable[tuple[int, int]]) -> dict[int, int]:
    """
    Validate cart items and fold repeated products into one quantity.

    Keeps first-seen product order. Raises ``InvalidRequest`` for an empty
    cart or any quantity that is not a positive integer.
    """
    quantities: dict[int, int] = {}

    for product_id, quantity in items:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidRequest(f"Quantity for product {product_id} must be greater than zero")

        quantities[product_id] = quantities.get(product_id, 0) + quantity

    if not quantities:
        raise InvalidRequest("Cart must contain at least one item")

    return quantities


class CheckoutService:
    def __init__(self, db: Session, inventory: InventoryStore | None = None):
        self.db = db
        self.inventory = inventory or InventoryStore(db)
        self.state: CheckoutState | None = None

    def _transition(self, state: CheckoutState) -> None:
        logger.debug("checkout %s -> %s", self.state.value if self.state else "start", state.value)
        self.state = state

    def _fail(self) -> None:
        self.db.rollback()
        self._transition(CheckoutState.FAILED)

    def checkout(self, items: Iterable[tuple[int, int]], lock_mode: bool = False) -> CheckoutResult:
        self.state = None
        self._transition(CheckoutState.VALIDATING)

        # Rejected before the session is touched
        try:
            quantities = merge_items(items)
        except InvalidRequest:
            self._transition(CheckoutState.FAILED)
            raise

        try:
            snapshots = {
                product_id: self.inventory.get_for_update(product_id, lock=lock_mode)
                for product_id in sorted(quantities)
            }

            for product_id, quantity in quantities.items():
                available = snapshots[product_id].stock
                if quantity > available:
                    raise InsufficientStock(product_id, requested=quantity, available=available)

            self._transition(CheckoutState.PRICING)
            priced = calculate_totals(
                (snapshots[product_id].price, quantity)
                for product_id, quantity in quantities.items()
            )
            if priced.total > MAX_TOTAL:
                raise InvalidRequest(f"Cart total {priced.total} exceeds the largest recordable amount")

            lines = [
                LineItem(
                    product_id=product_id,
                    product_name=snapshots[product_id].name,
                    quantity=quantity,
                    unit_price=snapshots[product_id].price,
                    subtotal=subtotal,
                )
                for (product_id, quantity), subtotal in zip(quantities.items(), priced.subtotals)
            ]

            self._transition(CheckoutState.PERSISTING)
            transaction_id = create_transaction(self.db, priced.total, lines)

            # Under lock_mode=False this is where a concurrent sale shows up
            self._transition(CheckoutState.ADJUSTING)
            for product_id in sorted(quantities):
                self.inventory.decrement_stock(product_id, quantities[product_id])

            self.db.commit()

        except InsufficientStock as exc:
            self._fail()
            logger.warning("Checkout rejected: %s", exc)
            raise

        except SQLAlchemyError as exc:
            self._fail()
            logger.exception("Checkout failed in the data store")
            raise PersistenceError("Unable to complete checkout") from exc

        except Exception:
            self._fail()
            raise

        self._transition(CheckoutState.COMMITTED)
        logger.info(
            "Checkout committed: transaction=%s total=%s lines=%s",
            transaction_id,
            priced.total,
            len(lines),
        )

        return CheckoutResult(transaction_id=transaction_id, total=priced.total)
