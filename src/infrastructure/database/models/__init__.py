from .base import Base
from .trade_model import TradeModel


__all__ = [
    "Base",
    "TradeModel",
]
