# app/routes/currency.py
from typing import Optional

from fastapi import APIRouter, Header, Query

from app.schemas.insights import CurrencyRead
from app.services.currency import detect_currency, format_currency

router = APIRouter(prefix="/currency", tags=["currency"])

SAMPLE_AMOUNT = 1234.5

@router.get("/", response_model=CurrencyRead)
def get_currency(
    tz: Optional[str] = Query(None, description="Zona horaria IANA del navegador, ej. Europe/Berlin"),
    accept_language: Optional[str] = Header(None),
):
    # El cliente lo pide una vez por sesión y lo guarda
    currency = detect_currency(accept_language, tz)
    return CurrencyRead(
        symbol=currency.symbol,
        code=currency.code,
        locale=currency.locale,
        sample=format_currency(SAMPLE_AMOUNT, currency),
    )
