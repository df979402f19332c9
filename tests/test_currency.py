import pytest

from app.services.currency import (
    CURRENCY_BY_COUNTRY,
    DEFAULT_CURRENCY,
    country_from_locale,
    detect_currency,
    format_currency,
)


@pytest.mark.parametrize("header, country", [
    ("en-GB", "GB"),
    ("pt_br", "BR"),
    ("es-CO,es;q=0.9,en;q=0.8", "CO"),
    ("fr", None),
    ("", None),
    (None, None),
])
def test_country_from_locale(header, country):
    assert country_from_locale(header) == country


def test_locale_wins_over_timezone():
    assert detect_currency("en-GB", "Asia/Tokyo").code == "GBP"


def test_timezone_fallback_when_locale_has_no_known_country():
    assert detect_currency("es-CO", "Europe/Madrid").code == "EUR"
    assert detect_currency("fr", "Asia/Tokyo").code == "JPY"


def test_defaults_to_usd():
    assert detect_currency("xx-ZZ", "Mars/Olympus") == DEFAULT_CURRENCY
    assert detect_currency() == DEFAULT_CURRENCY


@pytest.mark.parametrize("country, amount, expected", [
    ("US", 1234.5, "$1,234.50"),
    ("GB", 9.99, "£9.99"),
    ("DE", 1234.5, "1.234,50\u00a0€"),
    ("BR", 1234.5, "R$\u00a01.234,50"),
    ("CH", 123456.5, "CHF\u00a0123\u2019456.50"),
    ("IN", 123456.5, "₹1,23,456.50"),
    ("IN", 12345678.9, "₹1,23,45,678.90"),
    ("IN", 999, "₹999.00"),
    ("ES", 1234.5, "1234,50\u00a0€"),
    ("ES", 123456.5, "123.456,50\u00a0€"),
    ("FR", 1234.5, "1\u202f234,50\u00a0€"),
    ("SE", 1234.5, "1\u00a0234,50\u00a0kr"),
    ("US", -5, "-$5.00"),
    ("US", 0.005, "$0.01"),
])
def test_format_currency(country, amount, expected):
    assert format_currency(amount, CURRENCY_BY_COUNTRY[country]) == expected


def test_format_currency_defaults_to_usd():
    assert format_currency(15.49) == "$15.49"
