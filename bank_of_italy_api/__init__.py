"""
Typed async client for the Banca d'Italia exchange rate API.

    async with BancaDItalia() as boi:
        rates = await boi.get_latest_rate()
"""
from bank_of_italy_api.domain.exceptions import (
    ApiError,
    BancaDItaliaError,
    ConversionFailed,
    DeserializeFailed,
    ErrorKind,
    NoResult,
    RequestFailed,
)
from bank_of_italy_api.domain.models import Country, Currency, ExchangeRate
from bank_of_italy_api.infrastructure.decoding import parse_date, parse_decimal
from bank_of_italy_api.infrastructure.providers import BancaDItalia

__all__ = [
    "BancaDItalia",
    "Currency",
    "Country",
    "ExchangeRate",
    "BancaDItaliaError",
    "ErrorKind",
    "RequestFailed",
    "DeserializeFailed",
    "ApiError",
    "NoResult",
    "ConversionFailed",
    "parse_decimal",
    "parse_date",
]
