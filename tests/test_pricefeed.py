from dataclasses import replace
from datetime import datetime, timedelta, timezone

from blockrows.pricefeed import TokenPriceRow, TokenRow, TokenUnitRow

T0 = datetime(2021, 6, 1, tzinfo=timezone.utc)


def test_token_unit_row_defaults():
    row = TokenUnitRow("daric", "udaric", 0)
    assert row.aliases == ()
    assert row.price_id is None


def test_token_unit_row_equality():
    row = TokenUnitRow("daric", "daric", 6, ("DARIC",), "desmos")
    assert row == TokenUnitRow("daric", "daric", 6, ("DARIC",), "desmos")
    assert row != replace(row, price_id=None)
    assert row != replace(row, aliases=())


def test_token_row_equality():
    assert TokenRow("daric", "udaric") == TokenRow("daric", "udaric")
    assert TokenRow("daric", "udaric") != TokenRow("daric", "daric")


def test_token_price_row_ignores_id():
    row = TokenPriceRow("daric", 1.5, 1000, T0)
    assert row.id == ""
    assert row == TokenPriceRow("daric", 1.5, 1000, T0, id="42")


def test_token_price_row_differs_on_compared_fields():
    row = TokenPriceRow("daric", 1.5, 1000, T0)
    assert row != replace(row, name="atom")
    assert row != replace(row, price=1.6)
    assert row != replace(row, market_cap=1001)
    assert row != replace(row, timestamp=T0 + timedelta(minutes=1))


def test_token_price_row_compares_instants():
    row = TokenPriceRow("daric", 1.5, 1000, T0)
    shifted = T0.astimezone(timezone(timedelta(hours=-5)))
    assert row == replace(row, timestamp=shifted)