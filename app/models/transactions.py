# app/models/transactions.py

from sqlalchemy import CheckConstraint, Column, Integer, DateTime, Numeric
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)

    total_amount = Column(Numeric(20, 2), nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    items = relationship(
        "TransactionDetail",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionDetail.id",
    )

    __table_args__ = (
        CheckConstraint("total_amount >= 0", name="ck_transaction_total_non_negative"),
    )
