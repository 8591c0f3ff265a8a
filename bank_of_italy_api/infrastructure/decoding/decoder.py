"""
Decoding of Banca d'Italia payloads into domain models.

The input is an already parsed JSON value: either a bare array of records or
the provider envelope ``{"resultsInfo": {...}, "<data_key>": [...]}``.
Provider error envelopes are recognised before any data is looked at.
"""
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from bank_of_italy_api.domain.exceptions.currency import ApiError, ConversionFailed, DeserializeFailed
from bank_of_italy_api.domain.models.currency import Country, Currency, ExchangeRate
from bank_of_italy_api.infrastructure.decoding.locale import parse_date, parse_decimal

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]

CURRENCIES_KEY = "currencies"
LATEST_RATES_KEY = "latestRates"

# Canonical field name -> accepted wire names, first match wins
CURRENCY_FIELDS = {
    "code": ("code", "isoCode"),
    "name": ("name",),
    "country": ("country",),
    "countries": ("countries",),
    "graph": ("graph",),
}

COUNTRY_FIELDS = {
    "currency_iso": ("currencyISO", "currency_iso"),
    "country": ("country",),
    "country_iso": ("countryISO", "country_iso"),
    "validity_start_date": ("validityStartDate", "validity_start_date"),
    "validity_end_date": ("validityEndDate", "validity_end_date"),
}

RATE_FIELDS = {
    "currency_code": ("currency_code", "isoCode"),
    "date": ("date", "referenceDate"),
    "eur_rate": ("eur_rate", "eurRate"),
    "usd_rate": ("usd_rate", "usdRate"),
    "country": ("country",),
    "currency_name": ("currency",),
    "uic_code": ("uic_code", "uicCode"),
    "usd_exchange_convention": ("usd_exchange_convention", "usdExchangeConvention"),
    "usd_exchange_convention_code": ("usd_exchange_convention_code", "usdExchangeConventionCode"),
}


def raise_for_error_envelope(body: Any) -> None:
    """Raise ApiError if the body is a provider-declared error."""
    if not isinstance(body, Mapping):
        return

    # Markers only count when set; "error": null or false is not an error
    error = body.get("error")
    if error:
        if isinstance(error, Mapping):
            message = error.get("message") or error.get("info") or error.get("description")
            raise ApiError(str(message) if message is not None else str(dict(error)), code=error.get("code"))
        raise ApiError(str(error))

    if body.get("errorMessage"):
        raise ApiError(str(body["errorMessage"]), code=body.get("errorCode"))

    if body.get("code") is not None and body.get("message"):
        raise ApiError(str(body["message"]), code=body["code"])


def extract_records(body: Any, data_key: str) -> list[RawRecord]:
    raise_for_error_envelope(body)

    if isinstance(body, list):
        items = body
    elif isinstance(body, Mapping):
        items = body.get(data_key)
        if not isinstance(items, list):
            raise DeserializeFailed(f"response has no '{data_key}' array", field=data_key)
    else:
        raise DeserializeFailed(f"expected a JSON array or object, got {type(body).__name__}")

    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise DeserializeFailed(
                f"expected an object, got {type(item).__name__}", index=index
            )
    return items


def decode_currencies(body: Any) -> list[Currency]:
    records = extract_records(body, CURRENCIES_KEY)
    currencies = [_decode_currency(record, index) for index, record in enumerate(records)]
    logger.debug(f"Decoded {len(currencies)} currencies")
    return currencies


def decode_latest_rates(body: Any) -> list[ExchangeRate]:
    records = extract_records(body, LATEST_RATES_KEY)
    rates = [_decode_rate(record, index) for index, record in enumerate(records)]
    logger.debug(f"Decoded {len(rates)} exchange rates")
    return rates


def _decode_currency(record: RawRecord, index: int) -> Currency:
    code = _required_text(record, CURRENCY_FIELDS, "code", index)
    name = _required_text(record, CURRENCY_FIELDS, "name", index)

    raw_countries = _lookup(record, CURRENCY_FIELDS, "countries")
    if raw_countries is None:
        raw_countries = []
    if not isinstance(raw_countries, list):
        raise DeserializeFailed("'countries' must be an array", field="countries", index=index)
    countries = tuple(
        _decode_country(entry, code, index, position)
        for position, entry in enumerate(raw_countries)
    )

    country = _lookup(record, CURRENCY_FIELDS, "country")
    if not country and countries:
        country = countries[0].country
    if not isinstance(country, str) or not country:
        raise DeserializeFailed("missing required field", field="country", index=index)

    graph = _lookup(record, CURRENCY_FIELDS, "graph")
    if graph is not None and not isinstance(graph, bool):
        raise DeserializeFailed(f"expected a boolean, got {type(graph).__name__}", field="graph", index=index)

    return Currency(code=code, name=name, country=country, countries=countries, graph=graph)


def _decode_country(entry: Any, currency_code: str, index: int, position: int) -> Country:
    path = f"countries[{position}]"
    if not isinstance(entry, Mapping):
        raise DeserializeFailed(f"expected an object, got {type(entry).__name__}", field=path, index=index)

    country = _required_text(entry, COUNTRY_FIELDS, "country", index, prefix=path)
    currency_iso = _lookup(entry, COUNTRY_FIELDS, "currency_iso") or currency_code
    country_iso = _lookup(entry, COUNTRY_FIELDS, "country_iso") or None

    start = _convert(entry, COUNTRY_FIELDS, "validity_start_date", parse_date, index, prefix=path)
    end_raw = _lookup(entry, COUNTRY_FIELDS, "validity_end_date")
    end = None
    if end_raw not in (None, ""):
        end = _convert(entry, COUNTRY_FIELDS, "validity_end_date", parse_date, index, prefix=path)

    try:
        return Country(
            currency_iso=str(currency_iso),
            country=country,
            country_iso=str(country_iso) if country_iso is not None else None,
            validity_start_date=start,
            validity_end_date=end,
        )
    except ValueError as e:
        raise DeserializeFailed(str(e), field=path, index=index) from e


def _decode_rate(record: RawRecord, index: int) -> ExchangeRate:
    currency_code = _required_text(record, RATE_FIELDS, "currency_code", index)
    reference_date = _convert(record, RATE_FIELDS, "date", parse_date, index)
    eur_rate = _convert(record, RATE_FIELDS, "eur_rate", _to_decimal, index)
    usd_rate = _convert(record, RATE_FIELDS, "usd_rate", _to_decimal, index)

    return ExchangeRate(
        currency_code=currency_code,
        reference_date=reference_date,
        eur_rate=eur_rate,
        usd_rate=usd_rate,
        country=_optional_text(record, RATE_FIELDS, "country"),
        currency_name=_optional_text(record, RATE_FIELDS, "currency_name"),
        uic_code=_optional_text(record, RATE_FIELDS, "uic_code"),
        usd_exchange_convention=_optional_text(record, RATE_FIELDS, "usd_exchange_convention"),
        usd_exchange_convention_code=_optional_text(record, RATE_FIELDS, "usd_exchange_convention_code"),
    )


def _to_decimal(raw: Any) -> Decimal:
    # JSON numbers go through their string form, never through float arithmetic
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        raw = str(raw)
    return parse_decimal(raw)


def _lookup(record: RawRecord, fields: dict[str, tuple[str, ...]], name: str) -> Any:
    for wire_name in fields[name]:
        if wire_name in record:
            return record[wire_name]
    return None


def _wire_name(record: RawRecord, fields: dict[str, tuple[str, ...]], name: str) -> str:
    for wire_name in fields[name]:
        if wire_name in record:
            return wire_name
    return fields[name][0]


def _required_text(
    record: RawRecord,
    fields: dict[str, tuple[str, ...]],
    name: str,
    index: int,
    prefix: str | None = None,
) -> str:
    value = _lookup(record, fields, name)
    field = _wire_name(record, fields, name)
    if prefix:
        field = f"{prefix}.{field}"
    if value is None:
        raise DeserializeFailed("missing required field", field=field, index=index)
    if not isinstance(value, str):
        raise DeserializeFailed(f"expected a string, got {type(value).__name__}", field=field, index=index)
    if not value.strip():
        raise DeserializeFailed("required field is empty", field=field, index=index)
    return value


def _optional_text(record: RawRecord, fields: dict[str, tuple[str, ...]], name: str) -> str | None:
    value = _lookup(record, fields, name)
    if value is None:
        return None
    return str(value)


def _convert(record, fields, name, parser, index, prefix=None):
    field = _wire_name(record, fields, name)
    if prefix:
        field = f"{prefix}.{field}"
    raw = _lookup(record, fields, name)
    if raw is None:
        raise DeserializeFailed("missing required field", field=field, index=index)
    try:
        return parser(raw)
    except ConversionFailed as e:
        raise e.at(field, index) from e
