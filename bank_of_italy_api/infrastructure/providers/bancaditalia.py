import logging

import httpx

from bank_of_italy_api.config.settings import Settings, get_settings
from bank_of_italy_api.domain.exceptions.currency import BancaDItaliaError, NoResult
from bank_of_italy_api.domain.models.currency import Currency, ExchangeRate
from bank_of_italy_api.infrastructure.decoding.decoder import decode_currencies, decode_latest_rates
from bank_of_italy_api.infrastructure.providers.base import BaseAPIProvider

logger = logging.getLogger(__name__)


class BancaDItalia(BaseAPIProvider):
    """Client for the Banca d'Italia exchange rate service.

    Every operation is one GET followed by a pure decode. The handle keeps no
    state besides its transport, so operations may run concurrently.
    """

    CURRENCIES_ENDPOINT = "currencies"
    LATEST_RATES_ENDPOINT = "latestRates"

    def __init__(self, client: httpx.AsyncClient | None = None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        super().__init__(base_url=self.settings.BASE_URL, client=client)

    @property
    def name(self) -> str:
        return "bancaditalia"

    async def get_currencies(self) -> list[Currency]:
        """Registry of listed currencies. An empty registry is a valid answer."""
        body = await self._make_request(self.CURRENCIES_ENDPOINT, {"lang": self.settings.LANGUAGE})
        try:
            currencies = decode_currencies(body)
        except BancaDItaliaError as e:
            logger.error(f"Failed to decode {self.name} currencies: {e}",
                         extra={"extra_data": {"operation": self.CURRENCIES_ENDPOINT, "error_kind": e.kind.value}})
            raise

        logger.info(f"{self.name} listed {len(currencies)} currencies",
                    extra={"extra_data": {"operation": self.CURRENCIES_ENDPOINT, "records": len(currencies)}})
        return currencies

    async def get_latest_rate(self) -> list[ExchangeRate]:
        """Latest EUR and USD rates. An empty answer raises NoResult."""
        body = await self._make_request(self.LATEST_RATES_ENDPOINT, {"lang": self.settings.LANGUAGE})
        try:
            rates = decode_latest_rates(body)
        except BancaDItaliaError as e:
            logger.error(f"Failed to decode {self.name} latest rates: {e}",
                         extra={"extra_data": {"operation": self.LATEST_RATES_ENDPOINT, "error_kind": e.kind.value}})
            raise

        if not rates:
            logger.error(f"{self.name} returned no latest rates",
                         extra={"extra_data": {"operation": self.LATEST_RATES_ENDPOINT, "records": 0}})
            raise NoResult(self.LATEST_RATES_ENDPOINT)

        logger.info(f"{self.name} returned {len(rates)} latest rates",
                    extra={"extra_data": {"operation": self.LATEST_RATES_ENDPOINT, "records": len(rates)}})
        return rates
