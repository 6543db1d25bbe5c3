# app/models/transaction_details.py

from sqlalchemy import CheckConstraint, Column, Integer, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.transactions import Transaction


class TransactionDetail(Base):
    __tablename__ = "transaction_details"

    id = Column(Integer, primary_key=True, index=True)

    transaction_id = Column(
        Integer,
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Lines outlive the product they were sold from
    product_id = Column(
        Integer,
        ForeignKey("products.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    product_name = Column(String(100), nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    subtotal = Column(Numeric(20, 2), nullable=False)

    transaction = relationship(Transaction, back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_transaction_detail_quantity_positive"),
    )
