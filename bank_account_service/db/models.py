"""SQLAlchemy ORM models."""
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from bank_account_service.infrastructure.database.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)


class BankAccount(Base):
    __tablename__ = "bank_accounts"

    id = Column(String(36), primary_key=True)
    seq = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    balance = Column(Float)
    currency = Column(String(16))
    type = Column(String(20), index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), index=True)

    customer = relationship("Customer", lazy="joined")
