import json

from telekit.media import Photo
from telekit.payments import (
    Currency,
    Invoice,
    Price,
    ShippingAddress,
    ShippingOption,
)


def test_shipping_address_from_dict():
    data = {
        "country_code": "US",
        "state": "S",
        "city": "C",
        "street_line1": "L1",
        "street_line2": "L2",
        "post_code": "P",
    }
    addr = ShippingAddress.from_dict(data)
    assert addr == ShippingAddress("US", "S", "C", "L1", "L2", "P")
    assert ShippingAddress.from_dict({}) == ShippingAddress()


def test_shipping_option_to_dict():
    option = ShippingOption(id="o", title="T", prices=[Price("A", 5)])
    assert option.to_dict() == {
        "id": "o",
        "title": "T",
        "prices": [{"label": "A", "amount": 5}],
    }


def test_invoice_params_flags_and_strings():
    inv = Invoice(title="T", currency="USD", need_email=True, max_tip_amount=7)
    params = inv.params()
    assert params["title"] == "T"
    assert params["currency"] == "USD"
    assert params["need_email"] == "true"
    assert params["need_name"] == "false"
    assert params["max_tip_amount"] == "7"
    assert "prices" not in params
    assert "photo_url" not in params


def test_invoice_params_prices_round_trip():
    prices = [Price("A", 100), Price("B", 250)]
    params = Invoice(prices=prices).params()
    assert params["prices"] == '[{"label":"A","amount":100},{"label":"B","amount":250}]'
    decoded = [Price(**p) for p in json.loads(params["prices"])]
    assert decoded == prices


def test_invoice_params_tip_amounts_are_strings():
    params = Invoice(suggested_tip_amounts=[10, 20]).params()
    assert json.loads(params["suggested_tip_amounts"]) == ["10", "20"]


def test_invoice_params_photo():
    photo = Photo(file_url="https://example.com/p.png", width=64, height=32)
    params = Invoice(photo=photo, photo_size=9).params()
    assert params["photo_url"] == "https://example.com/p.png"
    assert params["photo_size"] == "9"
    assert params["photo_width"] == "64"
    assert params["photo_height"] == "32"
    bare = Invoice(photo=Photo()).params()
    assert "photo_url" not in bare
    assert "photo_width" not in bare


def test_currency_round_trip_whole_amounts():
    cur = Currency(code="USD", exp=2)
    for major in (0, 1, 3, 12):
        assert cur.from_total(cur.to_total(major)) == major


def test_currency_to_total_drops_fraction():
    cur = Currency(exp=2)
    assert cur.to_total(1.99) == cur.to_total(1)


def test_currency_zero_exponent():
    cur = Currency(exp=0)
    assert cur.from_total(42) == 42
    assert cur.to_total(42) == 42