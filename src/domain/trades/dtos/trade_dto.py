from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.infrastructure.database.models.types import DECIMAL_PRECISION, DECIMAL_SCALE

# Zero timestamp a client may send to mean "not set".
ZERO_TRADE_DATE = datetime.min


class TradeDTO(BaseModel):
    """
    Commodity trade DTO (Pydantic model).

    Serialized with camelCase names (``tradeDate``); both camelCase and
    snake_case are accepted on input. Quantity and price must fit the
    storage column, so they are rejected rather than rounded.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: Optional[int] = None
    commodity: str = Field(..., min_length=1)
    quantity: Decimal = Field(
        default=Decimal("0"),
        max_digits=DECIMAL_PRECISION,
        decimal_places=DECIMAL_SCALE,
    )
    price: Decimal = Field(
        default=Decimal("0"),
        max_digits=DECIMAL_PRECISION,
        decimal_places=DECIMAL_SCALE,
    )
    trade_date: Optional[datetime] = None
    counterparty: str

    @field_validator("commodity")
    @classmethod
    def validate_commodity(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("commodity cannot be blank")
        return v

    @field_validator("trade_date")
    @classmethod
    def normalize_trade_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive timestamps are taken as UTC; aware ones are converted."""
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        try:
            return v.astimezone(timezone.utc)
        except OverflowError:
            raise ValueError("tradeDate is out of range once converted to UTC")

    @property
    def has_trade_date(self) -> bool:
        if self.trade_date is None:
            return False
        return self.trade_date.replace(tzinfo=None) != ZERO_TRADE_DATE

    def to_wire(self) -> Dict[str, Any]:
        """camelCase dict keeping Decimal and datetime objects for exact JSON encoding."""
        return self.model_dump(by_alias=True)
