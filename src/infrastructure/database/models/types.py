"""
Custom column types.
"""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator

DECIMAL_PRECISION = 18
DECIMAL_SCALE = 6


class ExactDecimal(TypeDecorator):
    """
    Decimal column that never passes through a binary float.

    SQLite has no decimal storage, so values are kept as TEXT there and
    parsed back into Decimal. Other dialects use a native NUMERIC.
    """

    impl = String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String())
        return dialect.type_descriptor(
            Numeric(precision=DECIMAL_PRECISION, scale=DECIMAL_SCALE, asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = Decimal(value)
        return str(value) if dialect.name == "sqlite" else value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)
