import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from pydantic import ValidationError

from src.domain.trades.dtos.trade_dto import TradeDTO


def test_accepts_camel_case_and_serializes_camel_case():
    trade = TradeDTO.model_validate({
        "commodity": "Gold",
        "quantity": 200,
        "price": 1850.75,
        "tradeDate": "2025-12-02T15:12:56Z",
        "counterparty": "X",
    })

    wire = trade.to_wire()

    assert wire["tradeDate"] == datetime(2025, 12, 2, 15, 12, 56, tzinfo=timezone.utc)
    assert "trade_date" not in wire
    assert wire["quantity"] == Decimal("200")
    assert wire["price"] == Decimal("1850.75")


def test_accepts_snake_case_names():
    trade = TradeDTO(commodity="Gold", counterparty="X",
                     trade_date=datetime(2025, 1, 1, tzinfo=timezone.utc))
    assert trade.has_trade_date


def test_decimals_stay_decimal_in_python():
    trade = TradeDTO.model_validate({"commodity": "Copper", "price": "4.65", "counterparty": "Y"})
    assert trade.price == Decimal("4.65")
    assert trade.quantity == Decimal("0")


def test_naive_trade_date_is_taken_as_utc():
    trade = TradeDTO(commodity="Gold", counterparty="X", trade_date=datetime(2025, 1, 1, 9, 30))
    assert trade.trade_date == datetime(2025, 1, 1, 9, 30, tzinfo=timezone.utc)


def test_offset_trade_date_is_converted_to_utc():
    plus_two = timezone(timedelta(hours=2))
    trade = TradeDTO(commodity="Gold", counterparty="X",
                     trade_date=datetime(2025, 1, 1, 11, 0, tzinfo=plus_two))
    assert trade.trade_date == datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)
    assert trade.trade_date.utcoffset() == timedelta(0)


@pytest.mark.parametrize("trade_date", [None, "0001-01-01T00:00:00"])
def test_unset_trade_date(trade_date):
    trade = TradeDTO.model_validate({"commodity": "Gold", "counterparty": "X", "tradeDate": trade_date})
    assert not trade.has_trade_date


@pytest.mark.parametrize("payload", [
    {"counterparty": "X"},
    {"commodity": "", "counterparty": "X"},
    {"commodity": "   ", "counterparty": "X"},
    {"commodity": None, "counterparty": "X"},
    {"commodity": "Gold"},
])
def test_required_fields(payload):
    with pytest.raises(ValidationError):
        TradeDTO.model_validate(payload)


def test_high_precision_decimal_is_kept_exactly():
    trade = TradeDTO.model_validate({
        "commodity": "Gold",
        "quantity": Decimal("123456789012.123456"),
        "price": "0.000001",
        "counterparty": "X",
    })
    assert trade.quantity == Decimal("123456789012.123456")
    assert str(trade.price) == "0.000001"


@pytest.mark.parametrize("field, value", [
    ("price", "0.1234567"),
    ("quantity", "12345678901234.123456"),
    ("quantity", "1234567890123456789"),
])
def test_decimal_beyond_column_precision_is_rejected(field, value):
    with pytest.raises(ValidationError):
        TradeDTO.model_validate({"commodity": "Gold", "counterparty": "X", field: value})


@pytest.mark.parametrize("trade_date", [
    "0001-01-01T00:00:00+01:00",
    "9999-12-31T23:59:59-01:00",
])
def test_trade_date_outside_utc_range_is_rejected(trade_date):
    with pytest.raises(ValidationError):
        TradeDTO.model_validate({"commodity": "Gold", "counterparty": "X", "tradeDate": trade_date})
