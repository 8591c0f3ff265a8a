from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Country:
    """A country that uses (or used) a currency, with its validity window."""
    currency_iso: str
    country: str
    country_iso: str | None
    validity_start_date: date
    validity_end_date: date | None = None

    def __post_init__(self):
        if not self.country:
            raise ValueError("Country name must not be empty")
        if self.validity_end_date is not None and self.validity_end_date < self.validity_start_date:
            raise ValueError(
                f"Validity of {self.currency_iso} in {self.country} ends before it starts"
            )


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    country: str
    countries: tuple[Country, ...] = ()
    graph: bool | None = None

    def __post_init__(self):
        if not self.code:
            raise ValueError("Currency code must not be empty")


@dataclass(frozen=True)
class ExchangeRate:
    """Latest reference rate of one currency, quoted against EUR and USD."""
    currency_code: str
    reference_date: date
    eur_rate: Decimal
    usd_rate: Decimal
    country: str | None = None
    currency_name: str | None = None
    uic_code: str | None = None
    usd_exchange_convention: str | None = None
    usd_exchange_convention_code: str | None = None

    def __post_init__(self):
        if not self.currency_code:
            raise ValueError("Currency code must not be empty")
        if not isinstance(self.reference_date, date):
            raise ValueError(f"Reference date must be a date, got {self.reference_date!r}")
        for label, value in (("eur_rate", self.eur_rate), ("usd_rate", self.usd_rate)):
            if not isinstance(value, Decimal) or not value.is_finite():
                raise ValueError(f"{label} must be a finite Decimal, got {value!r}")
            if value < 0:
                raise ValueError(f"{label} must not be negative, got {value}")
