"""
Detección de moneda a partir del locale del navegador o de su zona horaria,
y formateo de montos.

No hay estado global: la configuración (CurrencyInfo) se detecta una vez y
se pasa explícitamente a format_currency.
"""

from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional


@dataclass(frozen=True)
class CurrencyInfo:
    symbol: str
    code: str
    locale: str


DEFAULT_CURRENCY = CurrencyInfo(symbol="$", code="USD", locale="en-US")

CURRENCY_BY_COUNTRY: Dict[str, CurrencyInfo] = {
    "US": CurrencyInfo("$", "USD", "en-US"),
    "GB": CurrencyInfo("£", "GBP", "en-GB"),
    "EU": CurrencyInfo("€", "EUR", "de-DE"),
    "DE": CurrencyInfo("€", "EUR", "de-DE"),
    "FR": CurrencyInfo("€", "EUR", "fr-FR"),
    "ES": CurrencyInfo("€", "EUR", "es-ES"),
    "IT": CurrencyInfo("€", "EUR", "it-IT"),
    "JP": CurrencyInfo("¥", "JPY", "ja-JP"),
    "CN": CurrencyInfo("¥", "CNY", "zh-CN"),
    "IN": CurrencyInfo("₹", "INR", "en-IN"),
    "AU": CurrencyInfo("A$", "AUD", "en-AU"),
    "CA": CurrencyInfo("C$", "CAD", "en-CA"),
    "BR": CurrencyInfo("R$", "BRL", "pt-BR"),
    "MX": CurrencyInfo("MX$", "MXN", "es-MX"),
    "KR": CurrencyInfo("₩", "KRW", "ko-KR"),
    "RU": CurrencyInfo("₽", "RUB", "ru-RU"),
    "ZA": CurrencyInfo("R", "ZAR", "en-ZA"),
    "AE": CurrencyInfo("د.إ", "AED", "ar-AE"),
    "SA": CurrencyInfo("﷼", "SAR", "ar-SA"),
    "SG": CurrencyInfo("S$", "SGD", "en-SG"),
    "HK": CurrencyInfo("HK$", "HKD", "zh-HK"),
    "NZ": CurrencyInfo("NZ$", "NZD", "en-NZ"),
    "CH": CurrencyInfo("CHF", "CHF", "de-CH"),
    "SE": CurrencyInfo("kr", "SEK", "sv-SE"),
    "NO": CurrencyInfo("kr", "NOK", "nb-NO"),
    "DK": CurrencyInfo("kr", "DKK", "da-DK"),
    "PL": CurrencyInfo("zł", "PLN", "pl-PL"),
    "TR": CurrencyInfo("₺", "TRY", "tr-TR"),
    "TH": CurrencyInfo("฿", "THB", "th-TH"),
    "ID": CurrencyInfo("Rp", "IDR", "id-ID"),
    "MY": CurrencyInfo("RM", "MYR", "ms-MY"),
    "PH": CurrencyInfo("₱", "PHP", "en-PH"),
    "VN": CurrencyInfo("₫", "VND", "vi-VN"),
    "PK": CurrencyInfo("₨", "PKR", "en-PK"),
    "BD": CurrencyInfo("৳", "BDT", "bn-BD"),
    "NG": CurrencyInfo("₦", "NGN", "en-NG"),
    "EG": CurrencyInfo("E£", "EGP", "ar-EG"),
    "IL": CurrencyInfo("₪", "ILS", "he-IL"),
}

COUNTRY_BY_TIMEZONE: Dict[str, str] = {
    "America/New_York": "US",
    "America/Los_Angeles": "US",
    "America/Chicago": "US",
    "America/Denver": "US",
    "Europe/London": "GB",
    "Europe/Paris": "FR",
    "Europe/Berlin": "DE",
    "Europe/Madrid": "ES",
    "Europe/Rome": "IT",
    "Asia/Tokyo": "JP",
    "Asia/Shanghai": "CN",
    "Asia/Kolkata": "IN",
    "Australia/Sydney": "AU",
    "America/Toronto": "CA",
    "America/Sao_Paulo": "BR",
    "America/Mexico_City": "MX",
    "Asia/Seoul": "KR",
    "Europe/Moscow": "RU",
    "Africa/Johannesburg": "ZA",
    "Asia/Dubai": "AE",
    "Asia/Singapore": "SG",
    "Asia/Hong_Kong": "HK",
    "Pacific/Auckland": "NZ",
    "Europe/Zurich": "CH",
    "Europe/Stockholm": "SE",
    "Europe/Oslo": "NO",
    "Europe/Copenhagen": "DK",
    "Europe/Warsaw": "PL",
    "Europe/Istanbul": "TR",
    "Asia/Bangkok": "TH",
    "Asia/Jakarta": "ID",
    "Asia/Kuala_Lumpur": "MY",
    "Asia/Manila": "PH",
    "Asia/Ho_Chi_Minh": "VN",
    "Asia/Karachi": "PK",
    "Asia/Dhaka": "BD",
    "Africa/Lagos": "NG",
    "Africa/Cairo": "EG",
    "Asia/Jerusalem": "IL",
}

NBSP = "\u00a0"
NARROW_NBSP = "\u202f"


class NumberStyle(NamedTuple):
    group: str = ","
    decimal: str = "."
    symbol_after: bool = False
    spaced: bool = False  # espacio (no separable) entre símbolo y número
    lakh: bool = False  # agrupación india: 1,23,456
    min_grouping: int = 1  # es-ES y pl-PL no agrupan números de 4 cifras


DEFAULT_STYLE = NumberStyle()

# Estilos por locale completo, como los produce Intl.NumberFormat
NUMBER_STYLES: Dict[str, NumberStyle] = {
    "de-DE": NumberStyle(".", ",", symbol_after=True, spaced=True),
    "fr-FR": NumberStyle(NARROW_NBSP, ",", symbol_after=True, spaced=True),
    "es-ES": NumberStyle(".", ",", symbol_after=True, spaced=True, min_grouping=2),
    "it-IT": NumberStyle(".", ",", symbol_after=True, spaced=True),
    "de-CH": NumberStyle("\u2019", ".", spaced=True),
    "en-IN": NumberStyle(lakh=True),
    "pt-BR": NumberStyle(".", ",", spaced=True),
    "ru-RU": NumberStyle(NBSP, ",", symbol_after=True, spaced=True),
    "en-ZA": NumberStyle(NBSP, ",", spaced=True),
    "sv-SE": NumberStyle(NBSP, ",", symbol_after=True, spaced=True),
    "nb-NO": NumberStyle(NBSP, ",", symbol_after=True, spaced=True),
    "da-DK": NumberStyle(".", ",", symbol_after=True, spaced=True),
    "pl-PL": NumberStyle(NBSP, ",", symbol_after=True, spaced=True, min_grouping=2),
    "tr-TR": NumberStyle(".", ","),
    "id-ID": NumberStyle(".", ",", spaced=True),
    "vi-VN": NumberStyle(".", ",", symbol_after=True, spaced=True),
    "he-IL": NumberStyle(symbol_after=True, spaced=True),
}


def country_from_locale(browser_locale: Optional[str]) -> Optional[str]:
    if not browser_locale:
        return None
    # Accept-Language puede traer varios valores: "es-CO,es;q=0.9"
    primary = browser_locale.split(",")[0].split(";")[0].strip()
    parts = primary.replace("_", "-").split("-")
    return parts[1].upper() if len(parts) > 1 and parts[1] else None


def detect_currency(browser_locale: Optional[str] = None, timezone: Optional[str] = None) -> CurrencyInfo:
    country = country_from_locale(browser_locale)
    if country in CURRENCY_BY_COUNTRY:
        return CURRENCY_BY_COUNTRY[country]

    country = COUNTRY_BY_TIMEZONE.get(timezone or "")
    if country in CURRENCY_BY_COUNTRY:
        return CURRENCY_BY_COUNTRY[country]

    return DEFAULT_CURRENCY


def _group_digits(digits: str, style: NumberStyle) -> str:
    if len(digits) < 3 + style.min_grouping:
        return digits
    head, groups = digits[:-3], [digits[-3:]]
    size = 2 if style.lakh else 3
    while len(head) > size:
        groups.insert(0, head[-size:])
        head = head[:-size]
    return style.group.join([head] + groups)


def format_currency(amount: float, currency: CurrencyInfo = DEFAULT_CURRENCY) -> str:
    style = NUMBER_STYLES.get(currency.locale, DEFAULT_STYLE)

    integer_part, fraction = f"{abs(amount):.2f}".split(".")
    number = f"{_group_digits(integer_part, style)}{style.decimal}{fraction}"
    sign = "-" if round(amount, 2) < 0 else ""
    space = NBSP if style.spaced else ""

    if style.symbol_after:
        return f"{sign}{number}{space}{currency.symbol}"
    return f"{sign}{currency.symbol}{space}{number}"
