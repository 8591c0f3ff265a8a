from .currency import Country, Currency, ExchangeRate

__all__ = ['Country', 'Currency', 'ExchangeRate']
