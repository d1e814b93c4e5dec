"""
Trade Database Model

SQLAlchemy model for commodity trades.
"""

from sqlalchemy import Column, Integer, String, DateTime

from src.infrastructure.database.models.base import Base
from src.infrastructure.database.models.types import ExactDecimal


class TradeModel(Base):
    """Trade database model."""

    __tablename__ = 'Trades'
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    commodity = Column(String, nullable=False)
    quantity = Column(ExactDecimal(), nullable=False)
    price = Column(ExactDecimal(), nullable=False)
    trade_date = Column(DateTime(timezone=True), nullable=False)
    counterparty = Column(String, nullable=False)
